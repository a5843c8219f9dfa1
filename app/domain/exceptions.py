# app/domain/exceptions.py


class CartError(Exception):
    """Bazowy blad domeny koszyka, message idzie wprost do klienta."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ProductNotFound(CartError):
    def __init__(self, product_id):
        super().__init__(f"Product '{product_id}' not found.")
        self.product_id = product_id


class CartItemNotFound(CartError):
    def __init__(self, product_id):
        super().__init__(f"Product '{product_id}' is not in the cart.")
        self.product_id = product_id


class StockError(CartError):
    """Blad naprawialny po stronie klienta, uzytkownik zmienia ilosc."""

    def __init__(self, message: str, product_name: str, requested: int, available: int):
        super().__init__(message)
        self.product_name = product_name
        self.requested = requested
        self.available = available


class OutOfStock(StockError):
    def __init__(self, product_name: str, requested: int = 0):
        super().__init__(
            f"Product '{product_name}' is out of stock.",
            product_name=product_name,
            requested=requested,
            available=0,
        )


class InsufficientStock(StockError):
    def __init__(self, product_name: str, requested: int, available: int):
        super().__init__(
            f"Insufficient stock for product '{product_name}'. "
            f"Requested: {requested}, Available: {available}",
            product_name=product_name,
            requested=requested,
            available=available,
        )


class CartPersistenceError(CartError):
    """Blad bazy, szczegoly tylko w logach."""

    def __init__(self, message: str = "Cart storage is temporarily unavailable"):
        super().__init__(message)
