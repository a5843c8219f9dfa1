# app/domain/cart_data.py
"""
Projekcje koszyka (CartData / CartItemData).

Liczone przy kazdym odczycie z zapisanych pozycji i aktualnego katalogu,
nigdy nie zapisywane ani cache'owane. Kwoty w groszach, wersje
sformatowane tylko przez jawne metody *_formatted() / *_info().
"""
from typing import Dict, List
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from app.utils.money import amount_info, format_amount
from app.utils.settings import CURRENCY_SYMBOL


class CartItemData(BaseModel):
    uuid: UUID
    product_id: UUID
    product_name: str
    product_sku: str
    product_image: str | None = None
    quantity: int
    unit_price: int
    total_price: int
    available_stock: int
    is_available: bool

    model_config = ConfigDict(frozen=True)

    def has_stock_issue(self) -> bool:
        return self.quantity > self.available_stock

    def is_product_available(self) -> bool:
        return self.is_available

    def unit_price_formatted(self, currency_symbol: str = CURRENCY_SYMBOL) -> str:
        return format_amount(self.unit_price, currency_symbol)

    def total_price_formatted(self, currency_symbol: str = CURRENCY_SYMBOL) -> str:
        return format_amount(self.total_price, currency_symbol)

    def unit_price_info(self, currency_symbol: str = CURRENCY_SYMBOL) -> Dict[str, object]:
        return amount_info(self.unit_price, currency_symbol)

    def total_price_info(self, currency_symbol: str = CURRENCY_SYMBOL) -> Dict[str, object]:
        return amount_info(self.total_price, currency_symbol)


class CartData(BaseModel):
    uuid: UUID
    user_id: UUID
    items: List[CartItemData]
    total_items: int
    subtotal: int
    # na razie bez podatkow i wysylki, total_amount == subtotal
    total_amount: int
    has_stock_issues: bool
    has_unavailable_items: bool

    model_config = ConfigDict(frozen=True)

    def is_empty(self) -> bool:
        return not self.items

    def items_with_stock_issues(self) -> List[CartItemData]:
        return [item for item in self.items if item.has_stock_issue()]

    def unavailable_items(self) -> List[CartItemData]:
        return [item for item in self.items if not item.is_product_available()]

    def total_unique_products(self) -> int:
        return len(self.items)

    def find_item(self, product_id: UUID) -> CartItemData | None:
        return next((item for item in self.items if item.product_id == product_id), None)

    def subtotal_formatted(self, currency_symbol: str = CURRENCY_SYMBOL) -> str:
        return format_amount(self.subtotal, currency_symbol)

    def total_amount_formatted(self, currency_symbol: str = CURRENCY_SYMBOL) -> str:
        return format_amount(self.total_amount, currency_symbol)

    def total_amount_info(self, currency_symbol: str = CURRENCY_SYMBOL) -> Dict[str, object]:
        return amount_info(self.total_amount, currency_symbol)
