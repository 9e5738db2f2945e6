# grocery_store/data/models/cart_item.py
from sqlalchemy import Column, Integer, String, CheckConstraint

from grocery_store.data.database import Base


class CartItemModel(Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True)
    user_id = Column(String(100), nullable=False, index=True)

    #bez FK do products - produkt moze zniknac z katalogu a linia w koszyku zostaje
    product_id = Column(Integer, nullable=False, index=True)

    quantity = Column(Integer, nullable=False)

    __table_args__ = (CheckConstraint("quantity >= 1", name="ck_cart_items_quantity"),)

    def __repr__(self) -> str:
        return f"<CartItemModel id={self.id} user={self.user_id!r} product={self.product_id} x{self.quantity}>"
