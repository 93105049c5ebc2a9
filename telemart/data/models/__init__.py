#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from telemart.data.models.user import UserModel
from telemart.data.models.product import ProductModel
from telemart.data.models.cart_item import CartItemModel

__all__ = ["UserModel", "ProductModel", "CartItemModel"]
