#app/data/models/cart.py
import uuid

from sqlalchemy import Column, DateTime, Uuid
from sqlalchemy.orm import relationship

from app.data.database import Base, utcnow


class CartModel(Base):
    __tablename__ = "carts"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    # jeden koszyk na uzytkownika, tworzony leniwie
    user_id = Column(Uuid, nullable=False, unique=True, index=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    # pozycje ladowane jawnie przez CartRepo.get_cart_items, nigdy leniwie
    items = relationship(
        "CartItemModel",
        back_populates="cart",
        cascade="all, delete-orphan",
        order_by="CartItemModel.created_at",
        lazy="raise",
    )
