#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel
from app.data.models.product import ProductModel

__all__ = ["CartModel", "CartItemModel", "ProductModel"]
