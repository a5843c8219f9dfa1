# app/repos/cart_repo.py
from typing import List
from uuid import UUID, uuid4

from sqlalchemy import delete, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from app.data.database import utcnow
from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel

# dialekty z INSERT ... ON CONFLICT
_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class CartRepo:
    """
    Granica zapisu koszyka. Wszystkie zapytania sa jawne i eager,
    commit/rollback robi serwis (jedna transakcja na komende).
    """

    def __init__(self, db: Session):
        self.db = db

    def _insert(self, model):
        dialect = self.db.get_bind().dialect.name
        try:
            return _UPSERT_DIALECTS[dialect](model)
        except KeyError:
            raise RuntimeError(f"Dialekt {dialect} nie obsluguje ON CONFLICT") from None

    # odczyt
    def get_cart_by_user(self, user_id: UUID) -> CartModel | None:
        return self.db.execute(
            select(CartModel)
            .where(CartModel.user_id == user_id)
            .execution_options(populate_existing=True)
        ).scalar_one_or_none()

    def get_or_create_cart(self, user_id: UUID) -> CartModel:
        cart = self.get_cart_by_user(user_id)
        if cart:
            return cart

        # dwa rownolegle pierwsze odczyty -> jeden koszyk
        now = utcnow()
        self.db.execute(
            self._insert(CartModel)
            .values(id=uuid4(), user_id=user_id, created_at=now, updated_at=now)
            .on_conflict_do_nothing(index_elements=["user_id"])
        )
        return self.get_cart_by_user(user_id)

    def get_cart_items(self, cart_id: UUID) -> List[CartItemModel]:
        return list(
            self.db.execute(
                select(CartItemModel)
                .where(CartItemModel.cart_id == cart_id)
                .order_by(CartItemModel.created_at)
                .execution_options(populate_existing=True)
            ).scalars()
        )

    def get_cart_item(self, cart_id: UUID, product_id: UUID, for_update: bool = False) -> CartItemModel | None:
        stmt = (
            select(CartItemModel)
            .where(
                CartItemModel.cart_id == cart_id,
                CartItemModel.product_id == product_id,
            )
            .execution_options(populate_existing=True)
        )
        if for_update:
            # na sqlite ignorowane, tam zapisy i tak sa serializowane
            stmt = stmt.with_for_update()
        return self.db.execute(stmt).scalar_one_or_none()

    # zapis
    def upsert_cart_item(self, cart_id: UUID, product_id: UUID, quantity: int, unit_price: int) -> int:
        """
        Atomowe dodanie: nowa pozycja albo quantity += quantity.
        unit_price zapisywany tylko przy tworzeniu. Zwraca ilosc po scaleniu.
        """
        now = utcnow()
        stmt = self._insert(CartItemModel).values(
            id=uuid4(),
            cart_id=cart_id,
            product_id=product_id,
            quantity=quantity,
            unit_price=unit_price,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["cart_id", "product_id"],
            set_={
                "quantity": CartItemModel.quantity + stmt.excluded.quantity,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        self.db.execute(stmt)

        return self.db.execute(
            select(CartItemModel.quantity).where(
                CartItemModel.cart_id == cart_id,
                CartItemModel.product_id == product_id,
            )
        ).scalar_one()

    def update_cart_item_quantity(self, cart_id: UUID, product_id: UUID, quantity: int) -> int:
        result = self.db.execute(
            update(CartItemModel)
            .where(
                CartItemModel.cart_id == cart_id,
                CartItemModel.product_id == product_id,
            )
            .values(quantity=quantity, updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def delete_cart_item(self, cart_id: UUID, product_id: UUID) -> int:
        result = self.db.execute(
            delete(CartItemModel)
            .where(
                CartItemModel.cart_id == cart_id,
                CartItemModel.product_id == product_id,
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def clear_cart_items(self, cart_id: UUID) -> int:
        result = self.db.execute(
            delete(CartItemModel)
            .where(CartItemModel.cart_id == cart_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def touch_cart(self, cart_id: UUID) -> None:
        self.db.execute(
            update(CartModel)
            .where(CartModel.id == cart_id)
            .values(updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
