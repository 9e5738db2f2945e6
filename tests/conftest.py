"""Pytest fixtures for grocery_store tests."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from grocery_store.data import models  # noqa: F401
from grocery_store.data.database import Base, get_db
from grocery_store.data.models import CartItemModel, ProductModel
from grocery_store.domain.enums import Category, PaymentMethod
from grocery_store.services.payment_service import PaymentSimulator


class FixedRandom:
    """Random source that always returns the same value."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


APPROVE = FixedRandom(0.99)
DECLINE = FixedRandom(0.0)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    Session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    session = Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_product(db):
    def _make(name="Fresh Apples", category=Category.FRUITS, price="3.99",
              image_url=None, description=None):
        product = ProductModel(
            name=name,
            category=category,
            price=Decimal(price),
            image_url=image_url or f"https://img.example/{name.lower().replace(' ', '-')}.jpg",
            description=description or f"{name} description",
        )
        db.add(product)
        db.commit()
        return product

    return _make


@pytest.fixture
def apples(make_product):
    return make_product("Fresh Apples", Category.FRUITS, "3.99")


@pytest.fixture
def bananas(make_product):
    return make_product("Organic Bananas", Category.FRUITS, "2.49")


@pytest.fixture
def milk(make_product):
    return make_product("Whole Milk", Category.DAIRY, "3.29")


@pytest.fixture
def add_line(db):
    def _add(user_id, product, quantity):
        line = CartItemModel(user_id=user_id, product_id=product.id, quantity=quantity)
        db.add(line)
        db.commit()
        return line

    return _add


@pytest.fixture
def checkout_payload():
    def _payload(user_id="user123", method=PaymentMethod.CASH_ON_DELIVERY, **overrides):
        data = {
            "userId": user_id,
            "fullName": "Jane Doe",
            "email": "jane@example.com",
            "phone": "555-0100",
            "addressLine1": "1 Market St",
            "addressLine2": None,
            "city": "Springfield",
            "state": "IL",
            "zipCode": "62701",
            "country": "USA",
            "paymentMethod": method.value if isinstance(method, PaymentMethod) else method,
            "deliveryInstructions": "Leave at the door",
        }
        data.update(overrides)
        return data

    return _payload


@pytest.fixture
def payments():
    """Payment simulator the API uses; tests flip its random source."""
    return PaymentSimulator(rng=APPROVE)


@pytest.fixture
def client(db, payments):
    from grocery_store.api.routers.orders import get_payment_simulator
    from grocery_store.main import app

    def _get_db():
        yield db

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_payment_simulator] = lambda: payments
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
