# grocery_store/data/models/order_item.py
from decimal import Decimal

from sqlalchemy import Column, Integer, String, ForeignKey, Numeric, Enum as SAEnum
from sqlalchemy.orm import relationship, validates

from grocery_store.data.database import Base
from grocery_store.domain.enums import Category


class OrderItemModel(Base):
    """
    Linia zamowienia. Dane produktu sa kopiowane w momencie zamowienia
    (snapshot), zeby historia zamowien nie zmieniala sie razem z katalogiem.
    """

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)

    #bez FK - snapshot, produkt moze byc potem usuniety
    product_id = Column(Integer, nullable=False)
    product_name = Column(String(200), nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)
    quantity = Column(Integer, nullable=False)
    subtotal = Column(Numeric(10, 2), nullable=False)

    product_description = Column(String(1000))
    product_image_url = Column(String(500))
    product_category = Column(SAEnum(Category, native_enum=False, length=20))

    order = relationship("OrderModel", back_populates="items")

    @validates("quantity")
    def _validate_quantity(self, key, quantity):
        if quantity is None or quantity < 1:
            raise ValueError("Quantity must be at least 1")
        self._recompute_subtotal(self.unit_price, quantity)
        return quantity

    @validates("unit_price")
    def _validate_unit_price(self, key, unit_price):
        self._recompute_subtotal(unit_price, self.quantity)
        return unit_price

    def _recompute_subtotal(self, unit_price, quantity) -> None:
        # subtotal zawsze = cena * ilosc, przeliczane przy kazdym ustawieniu
        if unit_price is not None and quantity is not None:
            self.subtotal = Decimal(unit_price) * quantity

    def __repr__(self) -> str:
        return (
            f"<OrderItemModel id={self.id} product={self.product_id} "
            f"{self.product_name!r} x{self.quantity} = {self.subtotal}>"
        )
