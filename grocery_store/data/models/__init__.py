#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w Base.metadata

from grocery_store.data.models.product import ProductModel
from grocery_store.data.models.cart_item import CartItemModel
from grocery_store.data.models.order import OrderModel
from grocery_store.data.models.order_item import OrderItemModel

__all__ = ["ProductModel", "CartItemModel", "OrderModel", "OrderItemModel"]
