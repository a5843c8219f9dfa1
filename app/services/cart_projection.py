# app/services/cart_projection.py
from typing import Dict, List
from uuid import UUID

from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel
from app.domain.cart_data import CartData, CartItemData
from app.domain.schemas import ProductSnapshot
from app.services.product_catalog import ProductCatalog
from app.services.stock_validator import StockValidator


class CartProjectionBuilder:
    """Sklada CartData z zapisanych pozycji i aktualnego katalogu."""

    def __init__(self, catalog: ProductCatalog, validator: StockValidator | None = None):
        self.catalog = catalog
        self.validator = validator or StockValidator()

    def build(self, cart: CartModel, items: List[CartItemModel]) -> CartData:
        # jedno zapytanie do katalogu na caly koszyk
        products = self.catalog.get_products(i.product_id for i in items)
        item_data = [self.build_item(i, products) for i in items]

        subtotal = sum(i.total_price for i in item_data)

        return CartData(
            uuid=cart.id,
            user_id=cart.user_id,
            items=item_data,
            total_items=sum(i.quantity for i in item_data),
            subtotal=subtotal,
            total_amount=subtotal,
            has_stock_issues=self.validator.has_stock_issues(item_data),
            has_unavailable_items=self.validator.has_unavailable_items(item_data),
        )

    def build_item(self, item: CartItemModel, products: Dict[UUID, ProductSnapshot]) -> CartItemData:
        product = products.get(item.product_id)

        # produkt zniknal z katalogu -> pozycja niedostepna, bez bledu przy odczycie
        return CartItemData(
            uuid=item.id,
            product_id=item.product_id,
            product_name=product.name if product else "",
            product_sku=product.sku if product else "",
            product_image=product.image_path if product else None,
            quantity=item.quantity,
            unit_price=item.unit_price,
            total_price=item.quantity * item.unit_price,
            available_stock=product.stock_quantity if product else 0,
            is_available=self.validator.is_available(product),
        )
