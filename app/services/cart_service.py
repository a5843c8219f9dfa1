import logging
from contextlib import contextmanager
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.models.cart import CartModel
from app.domain.cart_data import CartData
from app.domain.exceptions import CartError, CartItemNotFound, CartPersistenceError, ProductNotFound
from app.repos.cart_repo import CartRepo
from app.services.cart_projection import CartProjectionBuilder
from app.services.product_catalog import ProductCatalog, build_product_catalog
from app.services.stock_validator import StockValidator
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use case'y koszyka w stylu cqrs
    commands (add, update, remove, clear) zmieniaja stan, kazda w jednej transakcji
    query (get) tylko odczyt, poza leniwym utworzeniem pustego koszyka
    """

    def __init__(
        self,
        db: Session,
        catalog: ProductCatalog | None = None,
        validator: StockValidator | None = None,
        projection: CartProjectionBuilder | None = None,
        log: logging.Logger | None = None,
    ):
        self.repo = CartRepo(db)
        self.catalog = catalog or build_product_catalog(db)
        self.validator = validator or StockValidator()
        self.projection = projection or CartProjectionBuilder(self.catalog, self.validator)
        self.logger = log or logger

    @contextmanager
    def _transaction(self, action: str, user_id: UUID):
        """Commit na koniec, rollback przy kazdym bledzie."""
        try:
            yield
            self.repo.commit()
        except CartError:
            self.repo.rollback()
            raise
        except SQLAlchemyError:
            self.repo.rollback()
            self.logger.exception(
                f"Blad bazy podczas {action} dla uzytkownika {user_id}",
                extra={"user_id": str(user_id)},
            )
            raise CartPersistenceError() from None
        except Exception:
            self.repo.rollback()
            raise

    def _project(self, cart: CartModel) -> CartData:
        items = self.repo.get_cart_items(cart.id)
        return self.projection.build(cart, items)

    #query
    def get_cart(self, user_id: UUID) -> CartData:
        with self._transaction("get_cart", user_id):
            cart = self.repo.get_or_create_cart(user_id)
            return self._project(cart)

    #commands
    def add_to_cart(self, user_id: UUID, product_id: UUID, quantity: int) -> CartData:
        if quantity <= 0:
            raise ValueError("Quantity must be greater than 0")

        with self._transaction("add_to_cart", user_id):
            cart = self.repo.get_or_create_cart(user_id)

            product = self.catalog.get_product(product_id)
            if product is None:
                raise ProductNotFound(product_id)

            self.validator.ensure_purchasable(product, quantity)

            # odczyt z lockiem wiersza, target to suma po scaleniu
            existing = self.repo.get_cart_item(cart.id, product_id, for_update=True)
            target = existing.quantity + quantity if existing else quantity
            self.validator.ensure_quantity_available(product, target)

            if existing:
                self.logger.info(
                    f"Produkt {product_id} juz jest w koszyku {cart.id}, "
                    f"zwiekszam ilosc z {existing.quantity} do {target}",
                    extra={"user_id": str(user_id), "product_id": str(product_id), "quantity": target},
                )
            else:
                self.logger.info(
                    f"Dodaje nowy produkt {product_id} do koszyka {cart.id}",
                    extra={"user_id": str(user_id), "product_id": str(product_id), "quantity": target},
                )

            # atomowy upsert, unit_price tylko przy pierwszym dodaniu
            merged = self.repo.upsert_cart_item(cart.id, product_id, quantity, product.price)

            # rownolegle dodanie moglo wejsc miedzy odczyt a upsert
            self.validator.ensure_quantity_available(product, merged)
            self.repo.touch_cart(cart.id)

            return self._project(cart)

    def update_cart_item(self, user_id: UUID, product_id: UUID, quantity: int) -> CartData:
        if quantity < 0:
            raise ValueError("Quantity cannot be negative")

        with self._transaction("update_cart_item", user_id):
            cart = self.repo.get_or_create_cart(user_id)

            existing = self.repo.get_cart_item(cart.id, product_id, for_update=True)
            if existing is None:
                raise CartItemNotFound(product_id)

            if quantity == 0:
                # pozycja z iloscia 0 nie istnieje
                self.logger.info(f"Ilosc 0, usuwam produkt {product_id} z koszyka {cart.id}")
                self.repo.delete_cart_item(cart.id, product_id)
            else:
                product = self.catalog.get_product(product_id)
                if product is None:
                    raise ProductNotFound(product_id)

                self.validator.ensure_quantity_available(product, quantity)

                self.logger.info(
                    f"Zmiana ilosci produktu {product_id} w koszyku {cart.id} "
                    f"z {existing.quantity} na {quantity}"
                )
                self.repo.update_cart_item_quantity(cart.id, product_id, quantity)

            self.repo.touch_cart(cart.id)
            return self._project(cart)

    def remove_from_cart(self, user_id: UUID, product_id: UUID) -> CartData:
        with self._transaction("remove_from_cart", user_id):
            cart = self.repo.get_or_create_cart(user_id)

            removed = self.repo.delete_cart_item(cart.id, product_id)
            if removed:
                self.logger.info(f"Produkt {product_id} usuniety z koszyka {cart.id}")
                self.repo.touch_cart(cart.id)
            else:
                self.logger.info(f"Produktu {product_id} nie ma w koszyku {cart.id}, nic do usuniecia")

            return self._project(cart)

    def clear_cart(self, user_id: UUID) -> None:
        with self._transaction("clear_cart", user_id):
            cart = self.repo.get_or_create_cart(user_id)

            removed = self.repo.clear_cart_items(cart.id)
            if removed:
                self.repo.touch_cart(cart.id)

            self.logger.info(f"Koszyk {cart.id} wyczyszczony, usunieto {removed} pozycji")

    def is_ready_for_checkout(self, user_id: UUID) -> bool:
        return self.validator.is_ready_for_checkout(self.get_cart(user_id))
