# app/data/seed.py
from uuid import UUID

from app.data.database import SessionLocal
from app.data.models.product import ProductModel

# ceny w groszach
DEMO_PRODUCTS = [
    {
        "id": UUID("6f1c2a52-3b7e-4d0a-9a51-0c6b3f1e9a01"),
        "name": "Keyboard",
        "sku": "KB-001",
        "image_path": "products/keyboard.jpg",
        "is_active": True,
        "stock_quantity": 25,
        "price": 19999,
    },
    {
        "id": UUID("6f1c2a52-3b7e-4d0a-9a51-0c6b3f1e9a02"),
        "name": "Mouse",
        "sku": "MS-001",
        "image_path": "products/mouse.jpg",
        "is_active": True,
        "stock_quantity": 40,
        "price": 4950,
    },
    {
        "id": UUID("6f1c2a52-3b7e-4d0a-9a51-0c6b3f1e9a03"),
        "name": "Monitor",
        "sku": "MN-001",
        "image_path": "products/monitor.jpg",
        "is_active": True,
        "stock_quantity": 3,
        "price": 89900,
    },
    {
        "id": UUID("6f1c2a52-3b7e-4d0a-9a51-0c6b3f1e9a04"),
        "name": "Webcam",
        "sku": "WC-001",
        "image_path": None,
        "is_active": False,
        "stock_quantity": 10,
        "price": 12900,
    },
]


def seed(session_factory=SessionLocal) -> int:
    db = session_factory()
    try:
        # tylko brakujace produkty, istniejacych nie nadpisujemy
        created = 0
        for data in DEMO_PRODUCTS:
            if db.get(ProductModel, data["id"]):
                continue
            db.add(ProductModel(**data))
            created += 1
        db.commit()
        return created
    finally:
        db.close()
