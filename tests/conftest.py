import os

# przed importem app.*, settings czytaja env przy imporcie
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("PRODUCT_CATALOG_BACKEND", "db")
os.environ.setdefault("CURRENCY_SYMBOL", "₺")
os.environ.setdefault("LOG_JSON", "0")

from uuid import uuid4

import pytest
from sqlalchemy.orm import sessionmaker

from app.data.database import build_engine, init_db
from app.data.models.product import ProductModel
from app.services.cart_service import CartService


@pytest.fixture
def engine(tmp_path):
    # plik zamiast :memory:, test wspolbieznosci uzywa wielu polaczen
    engine = build_engine(f"sqlite:///{tmp_path / 'cart.db'}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def service(db):
    return CartService(db=db)


@pytest.fixture
def user_id():
    return uuid4()


@pytest.fixture
def make_product(session_factory):
    def _make(name="Keyboard", stock=10, price=10000, is_active=True):
        product = ProductModel(
            id=uuid4(),
            name=name,
            sku=f"SKU-{uuid4().hex[:8]}",
            image_path=f"products/{name.lower()}.jpg",
            is_active=is_active,
            stock_quantity=stock,
            price=price,
        )
        with session_factory() as s:
            s.add(product)
            s.commit()
        return product.id

    return _make


@pytest.fixture
def update_product(session_factory):
    """Zmiana katalogu z zewnatrz, tak jak robi to panel admina."""

    def _update(product_id, **fields):
        with session_factory() as s:
            product = s.get(ProductModel, product_id)
            for key, value in fields.items():
                setattr(product, key, value)
            s.commit()

    return _update


@pytest.fixture
def delete_product(session_factory):
    def _delete(product_id):
        with session_factory() as s:
            s.delete(s.get(ProductModel, product_id))
            s.commit()

    return _delete
