"""Tests for order / order line model invariants."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from grocery_store.data.models import OrderItemModel, OrderModel
from grocery_store.domain.enums import Category, OrderStatus, PaymentMethod


class TestOrderItemSubtotal:
    def test_subtotal_computed_on_construction(self):
        item = OrderItemModel(
            product_id=1,
            product_name="Fresh Apples",
            unit_price=Decimal("3.99"),
            quantity=3,
            product_category=Category.FRUITS,
        )

        assert item.subtotal == Decimal("11.97")

    def test_subtotal_recomputed_when_quantity_changes(self):
        item = OrderItemModel(product_id=1, product_name="Milk", unit_price=Decimal("3.29"), quantity=1)

        item.quantity = 4

        assert item.subtotal == Decimal("13.16")

    def test_quantity_must_be_positive(self):
        with pytest.raises(ValueError):
            OrderItemModel(product_id=1, product_name="Milk", unit_price=Decimal("3.29"), quantity=0)


class TestOrderDefaults:
    def test_new_order_is_pending_with_timestamp(self):
        order = OrderModel(user_id="user123")

        assert order.status == OrderStatus.PENDING
        assert order.order_date is not None


class TestOrderDates:
    def test_dates_come_back_as_utc(self, db):
        placed = datetime(2026, 3, 1, 14, 30, tzinfo=timezone(timedelta(hours=2)))
        order = OrderModel(
            user_id="user123",
            order_date=placed,
            estimated_delivery_date=placed + timedelta(days=4),
            full_name="Jane Doe",
            email="jane@example.com",
            phone="555-0100",
            address_line1="1 Market St",
            city="Springfield",
            state="IL",
            zip_code="62701",
            country="USA",
            subtotal=Decimal("1.00"),
            tax_amount=Decimal("0.08"),
            total_amount=Decimal("1.08"),
            payment_method=PaymentMethod.PAYPAL,
        )
        db.add(order)
        db.commit()
        db.expire_all()

        stored = db.get(OrderModel, order.id)

        assert stored.order_date.tzinfo == timezone.utc
        assert stored.order_date == datetime(2026, 3, 1, 12, 30, tzinfo=timezone.utc)
        assert stored.estimated_delivery_date == datetime(2026, 3, 5, 12, 30, tzinfo=timezone.utc)
