from sqlalchemy import Boolean, CheckConstraint, Column, Integer, String, Uuid

from app.data.database import Base


class ProductModel(Base):
    """Katalog produktow, dla koszyka tylko do odczytu."""

    __tablename__ = "products"

    id = Column(Uuid, primary_key=True)
    name = Column(String(255), nullable=False)
    sku = Column(String(64), nullable=False, unique=True)
    image_path = Column(String(500), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    stock_quantity = Column(Integer, nullable=False, default=0)
    # cena w groszach
    price = Column(Integer, nullable=False)

    __table_args__ = (
        CheckConstraint("stock_quantity >= 0", name="ck_product_stock_non_negative"),
    )
