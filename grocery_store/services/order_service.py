# grocery_store/services/order_service.py
import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import List

from sqlalchemy.orm import Session

from grocery_store.data.database import transaction
from grocery_store.data.models.order import OrderModel
from grocery_store.data.models.order_item import OrderItemModel
from grocery_store.domain.enums import OrderStatus, USER_CANCELLABLE_STATUSES
from grocery_store.domain.errors import EmptyCartError, PaymentDeclinedError, ProductNotFoundError
from grocery_store.domain.schemas import CheckoutIn, OrderOut, quantize_money
from grocery_store.repos.order_repo import OrderRepo
from grocery_store.repos.product_repo import ProductRepo
from grocery_store.services.cart_service import CartService
from grocery_store.services.payment_service import PaymentSimulator
from grocery_store.utils.logging import get_logger

logger = get_logger(__name__)

TAX_RATE = Decimal("0.08")
DELIVERY_DAYS = 4
TRANSACTION_PREFIX = "TXN-"


def calculate_tax(subtotal: Decimal) -> Decimal:
    return quantize_money(subtotal * TAX_RATE)


def generate_transaction_id() -> str:
    # unikalny "w praktyce", wystarczy do sledzenia w demo
    return TRANSACTION_PREFIX + str(uuid.uuid4())[:8].upper()


class OrderService:
    """
    Serwis odpowiedzialny za domene zamowien: checkout, zapytania,
    zmiany statusu. Koszyk obslugiwany przez CartService.
    """

    def __init__(
        self,
        db: Session,
        cart_service: CartService | None = None,
        payments: PaymentSimulator | None = None,
    ):
        self.db = db
        self.repo = OrderRepo(db)
        self.products = ProductRepo(db)
        self.cart_service = cart_service or CartService(db)
        self.payments = payments or PaymentSimulator()

    def process_checkout(self, request: CheckoutIn) -> OrderOut:
        """
        Use Case: zamiana koszyka w zamowienie.

        1. Wycena koszyka (pusty -> EmptyCartError, nic nie zapisujemy)
        2-3. Naglowek zamowienia w PENDING, podatek 8%, dostawa +4 dni
        4. Zapis naglowka (osobna transakcja)
        5. Snapshot linii z aktualnych produktow (brak produktu -> ProductNotFoundError)
        6. Symulacja platnosci; odmowa -> CANCELLED + PaymentDeclinedError
        7. CONFIRMED, czyszczenie koszyka

        Naglowek z kroku 4 nie jest wycofywany przy bledzie w 5/6 -
        zostaje jako slad (PENDING bez linii albo CANCELLED).
        """
        user_id = request.user_id

        # 1. wycena koszyka
        cart = self.cart_service.get_cart(user_id)
        if not cart.items:
            logger.warning(f"Checkout dla {user_id}: pusty koszyk")
            raise EmptyCartError(user_id)

        # 2-3. naglowek + kwoty
        now = datetime.now(timezone.utc)
        subtotal = cart.total_amount
        tax_amount = calculate_tax(subtotal)

        order = OrderModel(
            user_id=user_id,
            order_date=now,
            status=OrderStatus.PENDING,
            full_name=request.full_name,
            email=request.email,
            phone=request.phone,
            address_line1=request.address_line1,
            address_line2=request.address_line2,
            city=request.city,
            state=request.state,
            zip_code=request.zip_code,
            country=request.country,
            payment_method=request.payment_method,
            payment_transaction_id=(
                request.payment_transaction_id
                if request.payment_transaction_id is not None
                else generate_transaction_id()
            ),
            delivery_instructions=request.delivery_instructions,
            estimated_delivery_date=now + timedelta(days=DELIVERY_DAYS),
            subtotal=subtotal,
            tax_amount=tax_amount,
            total_amount=subtotal + tax_amount,
        )

        # 4. zapis naglowka - od tego momentu zamowienie istnieje niezaleznie od reszty
        with transaction(self.db):
            self.repo.create_order(order)

        logger.info(
            f"Utworzono zamowienie {order.id} dla {user_id}: subtotal={subtotal} "
            f"tax={tax_amount} total={order.total_amount} ({request.payment_method.display_name})"
        )

        # 5. snapshot linii z produktow
        with transaction(self.db):
            order_items = []
            for cart_item in cart.items:
                product = self.products.get_product(cart_item.product_id)
                if product is None:
                    logger.error(
                        f"Zamowienie {order.id}: produkt {cart_item.product_id} zniknal z katalogu"
                    )
                    raise ProductNotFoundError(cart_item.product_id)

                order_items.append(
                    OrderItemModel(
                        product_id=cart_item.product_id,
                        product_name=cart_item.product_name or product.name,
                        unit_price=(
                            cart_item.product_price
                            if cart_item.product_price is not None
                            else product.price
                        ),
                        quantity=cart_item.quantity,
                        product_description=product.description,
                        product_image_url=product.image_url,
                        product_category=product.category,
                    )
                )

            self.repo.add_order_items(order, order_items)

        # 6. platnosc
        if not self.payments.process(order):
            with transaction(self.db):
                order.status = OrderStatus.CANCELLED
                self.repo.save(order)

            logger.warning(f"Zamowienie {order.id} anulowane - platnosc odrzucona")
            raise PaymentDeclinedError(order.id)

        # 7. potwierdzenie + czyszczenie koszyka
        with transaction(self.db):
            order.status = OrderStatus.CONFIRMED
            self.repo.save(order)

        self.cart_service.clear_cart(user_id)

        logger.info(f"Zamowienie {order.id} potwierdzone ({len(order.items)} pozycji)")
        return OrderOut.from_model(order)

    #query
    def get_order_by_id(self, order_id: int) -> OrderOut | None:
        order = self.repo.get_order(order_id)
        return OrderOut.from_model(order) if order else None

    def get_user_orders(self, user_id: str) -> List[OrderOut]:
        return [OrderOut.from_model(o) for o in self.repo.get_orders_by_user(user_id)]

    def get_orders_by_status(self, status: OrderStatus) -> List[OrderOut]:
        return [OrderOut.from_model(o) for o in self.repo.get_orders_by_status(status)]

    def get_user_orders_by_status(self, user_id: str, status: OrderStatus) -> List[OrderOut]:
        return [
            OrderOut.from_model(o)
            for o in self.repo.get_orders_by_user_and_status(user_id, status)
        ]

    def get_orders_between(self, start: datetime, end: datetime) -> List[OrderOut]:
        return [OrderOut.from_model(o) for o in self.repo.get_orders_between(start, end)]

    def get_recent_orders(self, days: int) -> List[OrderOut]:
        cutoff = datetime.now(timezone.utc) - timedelta(days=days)
        return [OrderOut.from_model(o) for o in self.repo.get_orders_since(cutoff)]

    def get_user_order_count(self, user_id: str) -> int:
        return self.repo.count_by_user(user_id)

    #commands
    def update_order_status(self, order_id: int, status: OrderStatus) -> OrderOut | None:
        """
        Administracyjna zmiana statusu. Brak walidacji przejsc -
        dowolny status z dowolnego.
        """
        order = self.repo.get_order(order_id)
        if order is None:
            return None

        previous = order.status
        with transaction(self.db):
            order.status = status
            self.repo.save(order)

        logger.info(
            f"Zamowienie {order_id}: status {previous.display_name} -> {status.display_name}"
        )
        return OrderOut.from_model(order)

    def cancel_order(self, order_id: int, user_id: str) -> bool:
        """
        Anulowanie przez usera. False gdy zamowienie nie istnieje, nalezy
        do kogos innego albo jest w statusie ktorego nie mozna anulowac -
        wywolujacy nie wie ktory z tych przypadkow zaszedl.
        """
        order = self.repo.get_order(order_id)

        if (
            order is None
            or order.user_id != user_id
            or order.status not in USER_CANCELLABLE_STATUSES
        ):
            logger.warning(f"Odmowa anulowania zamowienia {order_id} przez {user_id}")
            return False

        with transaction(self.db):
            order.status = OrderStatus.CANCELLED
            self.repo.save(order)

        logger.info(f"Zamowienie {order_id} anulowane przez {user_id}")
        return True
