# app/domain/schemas.py
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ItemIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: UUID = Field(..., description="ID produktu")
    quantity: int = Field(..., gt=0, description="Ilosc do dodania (musi byc > 0)")


class ItemUpdateIn(BaseModel):
    """Schema dla zmiany ilosci, 0 usuwa pozycje."""

    product_id: UUID = Field(..., description="ID produktu")
    quantity: int = Field(..., ge=0, description="Nowa ilosc (nadpisuje, nie sumuje)")


class ProductSnapshot(BaseModel):
    """Produkt z katalogu w momencie odczytu, ceny w groszach."""

    id: UUID
    name: str
    sku: str
    image_path: str | None = None
    is_active: bool = True
    stock_quantity: int = Field(..., ge=0)
    price: int = Field(..., ge=0)

    model_config = ConfigDict(from_attributes=True, frozen=True)

    def is_purchasable(self) -> bool:
        return self.is_active and self.stock_quantity > 0


class ErrorOut(BaseModel):
    """Schema bledu zwracanego przez API."""

    success: bool = False
    message: str


class HealthOut(BaseModel):
    status: str
    service: str
    database: str
