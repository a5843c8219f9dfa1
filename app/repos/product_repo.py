# app/repos/product_repo.py
from typing import Dict, Iterable
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel


class ProductRepo:
    """Odczyt katalogu, ten serwis nigdy nie zmienia produktow."""

    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: UUID) -> ProductModel | None:
        return self.db.execute(
            select(ProductModel)
            .where(ProductModel.id == product_id)
            .execution_options(populate_existing=True)
        ).scalar_one_or_none()

    def get_products(self, product_ids: Iterable[UUID]) -> Dict[UUID, ProductModel]:
        ids = set(product_ids)
        if not ids:
            return {}
        rows = self.db.execute(
            select(ProductModel)
            .where(ProductModel.id.in_(ids))
            .execution_options(populate_existing=True)
        ).scalars()
        return {p.id: p for p in rows}
