# grocery_store/domain/enums.py
from enum import Enum


class Category(str, Enum):
    FRUITS = "FRUITS"
    VEGETABLES = "VEGETABLES"
    DAIRY = "DAIRY"
    BEVERAGES = "BEVERAGES"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, raw: str) -> "Category":
        """Nazwa kategorii bez wzgledu na wielkosc liter, ValueError dla nieznanej."""
        try:
            return cls[raw.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown category: {raw}") from None


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


#statusy z ktorych user moze sam anulowac zamowienie
USER_CANCELLABLE_STATUSES = frozenset({OrderStatus.PENDING, OrderStatus.CONFIRMED})


class PaymentMethod(str, Enum):
    CREDIT_CARD = "CREDIT_CARD"
    DEBIT_CARD = "DEBIT_CARD"
    PAYPAL = "PAYPAL"
    CASH_ON_DELIVERY = "CASH_ON_DELIVERY"

    @property
    def display_name(self) -> str:
        return {
            PaymentMethod.CREDIT_CARD: "Credit Card",
            PaymentMethod.DEBIT_CARD: "Debit Card",
            PaymentMethod.PAYPAL: "PayPal",
            PaymentMethod.CASH_ON_DELIVERY: "Cash on Delivery",
        }[self]
