# app/services/product_client.py
from typing import Dict, Iterable
from uuid import UUID

import requests

from app.domain.schemas import ProductSnapshot
from app.utils.logging import get_logger
from app.utils.retry import http_retry
from app.utils.settings import PRODUCT_SERVICE_TIMEOUT, PRODUCT_SERVICE_URL

logger = get_logger(__name__)


class ProductClient:
    """Katalog produktow z product-service po HTTP."""

    def __init__(self, base_url: str | None = None, timeout: int = PRODUCT_SERVICE_TIMEOUT):
        self.base_url = (base_url or PRODUCT_SERVICE_URL).rstrip("/")
        self.timeout = timeout

    @http_retry()
    def fetch_product(self, product_id: UUID) -> dict | None:
        url = f"{self.base_url}/products/{product_id}"
        logger.info(f"ProductClient GET {url}")

        resp = requests.get(url, timeout=self.timeout)
        if resp.status_code == 404:
            return None
        resp.raise_for_status()
        return resp.json()

    def get_product(self, product_id: UUID) -> ProductSnapshot | None:
        data = self.fetch_product(product_id)
        if data is None:
            return None
        return ProductSnapshot.model_validate(data)

    def get_products(self, product_ids: Iterable[UUID]) -> Dict[UUID, ProductSnapshot]:
        # product-service nie ma endpointu batch, pytamy po kolei
        products = {}
        for product_id in set(product_ids):
            snapshot = self.get_product(product_id)
            if snapshot is not None:
                products[product_id] = snapshot
        return products
