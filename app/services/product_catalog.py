# app/services/product_catalog.py
from typing import Dict, Iterable, Protocol
from uuid import UUID

from sqlalchemy.orm import Session

from app.domain.schemas import ProductSnapshot
from app.repos.product_repo import ProductRepo
from app.services.product_client import ProductClient
from app.utils.settings import PRODUCT_CATALOG_BACKEND


class ProductCatalog(Protocol):
    def get_product(self, product_id: UUID) -> ProductSnapshot | None: ...

    def get_products(self, product_ids: Iterable[UUID]) -> Dict[UUID, ProductSnapshot]: ...


class DbProductCatalog:
    """Katalog w tej samej bazie co koszyki, odczyt w transakcji komendy."""

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def get_product(self, product_id: UUID) -> ProductSnapshot | None:
        product = self.repo.get_product(product_id)
        if not product:
            return None
        return ProductSnapshot.model_validate(product)

    def get_products(self, product_ids: Iterable[UUID]) -> Dict[UUID, ProductSnapshot]:
        return {
            pid: ProductSnapshot.model_validate(product)
            for pid, product in self.repo.get_products(product_ids).items()
        }


def build_product_catalog(db: Session, backend: str = PRODUCT_CATALOG_BACKEND) -> ProductCatalog:
    if backend == "db":
        return DbProductCatalog(db)
    if backend == "http":
        return ProductClient()
    raise ValueError(f"Nieznany PRODUCT_CATALOG_BACKEND: {backend}")
