# app/services/stock_validator.py
from app.domain.cart_data import CartData, CartItemData
from app.domain.exceptions import InsufficientStock, OutOfStock
from app.domain.schemas import ProductSnapshot


class StockValidator:
    """
    Walidacja stanu magazynowego, tylko odczyt z katalogu.

    ensure_* rzucaja bledy przy zapisie (komendy), pozostale metody
    raportuja miekkie konflikty w projekcji przy odczycie.
    """

    def ensure_purchasable(self, product: ProductSnapshot, requested: int = 0) -> None:
        if not product.is_active or product.stock_quantity == 0:
            raise OutOfStock(product.name, requested)

    def ensure_quantity_available(self, product: ProductSnapshot, requested: int) -> None:
        if requested > product.stock_quantity:
            raise InsufficientStock(product.name, requested, product.stock_quantity)

    # odczyt
    def has_stock_issue(self, item: CartItemData) -> bool:
        return item.has_stock_issue()

    def is_available(self, product: ProductSnapshot | None) -> bool:
        return product is not None and product.is_purchasable()

    def has_stock_issues(self, items: list[CartItemData]) -> bool:
        return any(item.has_stock_issue() for item in items)

    def has_unavailable_items(self, items: list[CartItemData]) -> bool:
        return any(not item.is_product_available() for item in items)

    def is_empty(self, cart: CartData) -> bool:
        return not cart.items or cart.total_items == 0

    def is_ready_for_checkout(self, cart: CartData) -> bool:
        return (
            not self.is_empty(cart)
            and not cart.has_stock_issues
            and not cart.has_unavailable_items
        )
