# grocery_store/repos/cart_repo.py
from typing import List

from sqlalchemy import select, delete, func
from sqlalchemy.orm import Session

from grocery_store.data.models.cart_item import CartItemModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_cart_items(self, user_id: str) -> List[CartItemModel]:
        stmt = (
            select(CartItemModel)
            .where(CartItemModel.user_id == user_id)
            .order_by(CartItemModel.id)
        )
        return list(self.db.execute(stmt).scalars())

    def get_cart_item(self, item_id: int) -> CartItemModel | None:
        return self.db.get(CartItemModel, item_id)

    def get_user_item_for_product(self, user_id: str, product_id: int) -> CartItemModel | None:
        stmt = select(CartItemModel).where(
            CartItemModel.user_id == user_id,
            CartItemModel.product_id == product_id,
        )
        return self.db.execute(stmt).scalars().first()

    def add_cart_item(self, item: CartItemModel) -> CartItemModel:
        self.db.add(item)
        self.db.flush()
        return item

    def delete_cart_item(self, item: CartItemModel) -> None:
        self.db.delete(item)
        self.db.flush()

    def delete_user_items(self, user_id: str) -> int:
        result = self.db.execute(
            delete(CartItemModel)
            .where(CartItemModel.user_id == user_id)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount

    def count_user_quantity(self, user_id: str) -> int:
        stmt = select(func.coalesce(func.sum(CartItemModel.quantity), 0)).where(
            CartItemModel.user_id == user_id
        )
        return int(self.db.execute(stmt).scalar_one())
