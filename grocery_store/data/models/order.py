# grocery_store/data/models/order.py
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Numeric, Enum as SAEnum
from sqlalchemy.orm import relationship

from grocery_store.data.database import Base, UTCDateTime
from grocery_store.domain.enums import OrderStatus, PaymentMethod


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)
    user_id = Column(String(100), nullable=False, index=True)
    order_date = Column(UTCDateTime(), nullable=False, default=_utcnow)
    status = Column(
        SAEnum(OrderStatus, native_enum=False, length=20),
        nullable=False,
        default=OrderStatus.PENDING,
    )

    # dane klienta
    full_name = Column(String(200), nullable=False)
    email = Column(String(200), nullable=False)
    phone = Column(String(50), nullable=False)

    # adres dostawy
    address_line1 = Column(String(200), nullable=False)
    address_line2 = Column(String(200))
    city = Column(String(100), nullable=False)
    state = Column(String(100), nullable=False)
    zip_code = Column(String(20), nullable=False)
    country = Column(String(100), nullable=False)

    # kwoty liczone raz przy tworzeniu zamowienia
    subtotal = Column(Numeric(10, 2), nullable=False)
    tax_amount = Column(Numeric(10, 2), nullable=False)
    total_amount = Column(Numeric(10, 2), nullable=False)

    payment_method = Column(SAEnum(PaymentMethod, native_enum=False, length=20))
    payment_transaction_id = Column(String(64))

    estimated_delivery_date = Column(UTCDateTime())
    delivery_instructions = Column(String(1000))

    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.id",
    )

    def __init__(self, **kwargs):
        # status i data ustawione od razu, nie dopiero przy flush
        kwargs.setdefault("status", OrderStatus.PENDING)
        kwargs.setdefault("order_date", _utcnow())
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return (
            f"<OrderModel id={self.id} user={self.user_id!r} status={self.status} "
            f"total={self.total_amount}>"
        )
