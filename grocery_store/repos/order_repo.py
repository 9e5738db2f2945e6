# grocery_store/repos/order_repo.py
from datetime import datetime
from typing import List

from sqlalchemy import select, func
from sqlalchemy.orm import Session, selectinload

from grocery_store.data.models.order import OrderModel
from grocery_store.data.models.order_item import OrderItemModel
from grocery_store.domain.enums import OrderStatus


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_order(self, order: OrderModel) -> OrderModel:
        self.db.add(order)
        self.db.flush()
        return order

    def add_order_items(self, order: OrderModel, items: List[OrderItemModel]) -> OrderModel:
        order.items.extend(items)
        self.db.flush()
        return order

    def save(self, order: OrderModel) -> OrderModel:
        self.db.add(order)
        self.db.flush()
        return order

    def get_order(self, order_id: int) -> OrderModel | None:
        stmt = (
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .where(OrderModel.id == order_id)
        )
        return self.db.execute(stmt).scalars().first()

    def _list(self, *criteria) -> List[OrderModel]:
        stmt = (
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .where(*criteria)
            .order_by(OrderModel.order_date.desc(), OrderModel.id.desc())
        )
        return list(self.db.execute(stmt).scalars())

    def get_orders_by_user(self, user_id: str) -> List[OrderModel]:
        return self._list(OrderModel.user_id == user_id)

    def get_orders_by_status(self, status: OrderStatus) -> List[OrderModel]:
        return self._list(OrderModel.status == status)

    def get_orders_by_user_and_status(self, user_id: str, status: OrderStatus) -> List[OrderModel]:
        return self._list(OrderModel.user_id == user_id, OrderModel.status == status)

    def get_orders_between(self, start: datetime, end: datetime) -> List[OrderModel]:
        return self._list(OrderModel.order_date >= start, OrderModel.order_date <= end)

    def get_orders_since(self, cutoff: datetime) -> List[OrderModel]:
        return self._list(OrderModel.order_date >= cutoff)

    def count_by_user(self, user_id: str) -> int:
        stmt = select(func.count(OrderModel.id)).where(OrderModel.user_id == user_id)
        return self.db.execute(stmt).scalar_one()
