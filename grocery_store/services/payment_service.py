# grocery_store/services/payment_service.py
import random
from typing import Protocol

from grocery_store.data.models.order import OrderModel
from grocery_store.domain.enums import PaymentMethod
from grocery_store.utils.logging import get_logger

logger = get_logger(__name__)


class RandomSource(Protocol):
    def random(self) -> float: ...


class PaymentSimulator:
    """
    Symulacja bramki platniczej (demo).

    karta kredytowa / debetowa - 95% sukcesu
    PayPal - 98% sukcesu
    platnosc przy odbiorze - zawsze sukces
    inna metoda - zawsze odmowa

    Zrodlo losowosci jest wstrzykiwane, w testach podstawiamy stala wartosc.
    """

    CARD_FAILURE_RATE = 0.05
    PAYPAL_FAILURE_RATE = 0.02

    def __init__(self, rng: RandomSource | None = None):
        self.rng = rng or random.Random()

    def process(self, order: OrderModel) -> bool:
        method = order.payment_method

        if method in (PaymentMethod.CREDIT_CARD, PaymentMethod.DEBIT_CARD):
            approved = self.rng.random() > self.CARD_FAILURE_RATE
        elif method == PaymentMethod.PAYPAL:
            approved = self.rng.random() > self.PAYPAL_FAILURE_RATE
        elif method == PaymentMethod.CASH_ON_DELIVERY:
            approved = True
        else:
            approved = False

        logger.info(
            f"Platnosc {order.payment_transaction_id} ({method.value if method else None}) "
            f"za zamowienie {order.id}: "
            f"{'OK' if approved else 'ODMOWA'}"
        )
        return approved
