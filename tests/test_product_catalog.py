from uuid import uuid4

import pytest
import requests
from fastapi.testclient import TestClient

from app.data.models.product import ProductModel
from app.data.seed import DEMO_PRODUCTS, seed
from app.domain.schemas import ProductSnapshot
from app.product_service.main import app as product_service_app
from app.services.product_catalog import DbProductCatalog, build_product_catalog
from app.services.product_client import ProductClient


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


def _payload(product_id, **overrides):
    data = {
        "id": str(product_id),
        "name": "Keyboard",
        "sku": "KB-001",
        "image_path": None,
        "is_active": True,
        "stock_quantity": 5,
        "price": 19999,
    }
    data.update(overrides)
    return data


def test_product_client_maps_payload_to_snapshot(monkeypatch):
    product_id = uuid4()
    calls = []

    def fake_get(url, timeout):
        calls.append(url)
        return FakeResponse(payload=_payload(product_id))

    monkeypatch.setattr("app.services.product_client.requests.get", fake_get)

    snapshot = ProductClient(base_url="http://catalog/").get_product(product_id)

    assert calls == [f"http://catalog/products/{product_id}"]
    assert snapshot == ProductSnapshot(
        id=product_id, name="Keyboard", sku="KB-001", stock_quantity=5, price=19999
    )


def test_product_client_returns_none_on_404(monkeypatch):
    monkeypatch.setattr(
        "app.services.product_client.requests.get",
        lambda url, timeout: FakeResponse(status_code=404),
    )

    assert ProductClient(base_url="http://catalog").get_product(uuid4()) is None


def test_product_client_retries_connection_errors(monkeypatch):
    product_id = uuid4()
    attempts = []

    def flaky_get(url, timeout):
        attempts.append(url)
        if len(attempts) < 3:
            raise requests.ConnectionError("connection refused")
        return FakeResponse(payload=_payload(product_id))

    monkeypatch.setattr("app.services.product_client.requests.get", flaky_get)

    snapshot = ProductClient(base_url="http://catalog").get_product(product_id)

    assert len(attempts) == 3
    assert snapshot.id == product_id


def test_product_client_does_not_retry_server_errors(monkeypatch):
    attempts = []

    def failing_get(url, timeout):
        attempts.append(url)
        return FakeResponse(status_code=500)

    monkeypatch.setattr("app.services.product_client.requests.get", failing_get)

    with pytest.raises(requests.HTTPError):
        ProductClient(base_url="http://catalog").get_product(uuid4())
    assert len(attempts) == 1


def test_product_client_batch_skips_missing(monkeypatch):
    known, unknown = uuid4(), uuid4()

    def fake_get(url, timeout):
        if url.endswith(str(known)):
            return FakeResponse(payload=_payload(known))
        return FakeResponse(status_code=404)

    monkeypatch.setattr("app.services.product_client.requests.get", fake_get)

    products = ProductClient(base_url="http://catalog").get_products([known, unknown, known])

    assert list(products) == [known]


def test_db_catalog_reads_snapshots(db, make_product):
    product_id = make_product(name="Mouse", stock=4, price=4950)

    catalog = DbProductCatalog(db)

    assert catalog.get_product(product_id).price == 4950
    assert catalog.get_product(uuid4()) is None
    assert catalog.get_products([]) == {}
    assert set(catalog.get_products([product_id, uuid4()])) == {product_id}


def test_build_product_catalog_backends(db):
    assert isinstance(build_product_catalog(db, "db"), DbProductCatalog)
    assert isinstance(build_product_catalog(db, "http"), ProductClient)
    with pytest.raises(ValueError):
        build_product_catalog(db, "ftp")


def test_seed_inserts_demo_products_once(session_factory):
    assert seed(session_factory) == len(DEMO_PRODUCTS)
    assert seed(session_factory) == 0

    with session_factory() as db:
        assert db.query(ProductModel).count() == len(DEMO_PRODUCTS)


def test_product_service_mock_serves_demo_catalog():
    client = TestClient(product_service_app)
    demo = DEMO_PRODUCTS[0]

    found = client.get(f"/products/{demo['id']}")
    missing = client.get(f"/products/{uuid4()}")

    assert found.status_code == 200
    assert ProductSnapshot.model_validate(found.json()).price == demo["price"]
    assert missing.status_code == 404
