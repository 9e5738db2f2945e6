# grocery_store/domain/schemas.py
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Annotated, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from grocery_store.domain.enums import Category, OrderStatus, PaymentMethod

CENTS = Decimal("0.01")


def quantize_money(value: Decimal) -> Decimal:
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


# kwoty w JSON jako liczba z dwoma miejscami po przecinku
Money = Annotated[
    Decimal,
    PlainSerializer(lambda v: float(quantize_money(v)), return_type=float, when_used="json"),
]


class CamelModel(BaseModel):
    """Bazowy model: pola snake_case w Pythonie, camelCase w JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# =====================================================
# PRODUCTS
# =====================================================
class ProductIn(CamelModel):
    """Schema dla tworzenia / aktualizacji produktu."""

    name: str = Field(..., min_length=1, max_length=200)
    category: Category
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    image_url: Optional[str] = Field(None, max_length=500)
    description: Optional[str] = Field(None, max_length=1000)


class ProductOut(CamelModel):
    id: int
    name: str
    category: Category
    price: Money
    image_url: Optional[str] = None
    description: Optional[str] = None


# =====================================================
# CART
# =====================================================
class AddToCartIn(CamelModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: int = Field(..., description="ID produktu")
    user_id: str = Field(..., min_length=1, max_length=100, description="ID uzytkownika")
    quantity: int = Field(..., ge=1, description="Ilosc (co najmniej 1)")


class UpdateCartIn(CamelModel):
    quantity: int = Field(..., ge=1, description="Nowa ilosc (co najmniej 1)")


class CartLineOut(CamelModel):
    """Surowa linia koszyka (odpowiedz na dodanie / zmiane ilosci)."""

    id: int
    user_id: str
    product_id: int
    quantity: int


class CartItemOut(CamelModel):
    """Linia koszyka wzbogacona o aktualne dane produktu."""

    id: int
    product_id: int
    quantity: int
    product_name: Optional[str] = None
    product_price: Optional[Money] = None
    product_image_url: Optional[str] = None
    product_category: Optional[Category] = None
    product_description: Optional[str] = None
    subtotal: Optional[Money] = None


class CartOut(CamelModel):
    user_id: str
    items: List[CartItemOut]
    total_items: int
    total_amount: Money


# =====================================================
# ORDERS
# =====================================================
class CheckoutIn(CamelModel):
    """Schema dla checkoutu: dane klienta, adres dostawy, platnosc."""

    user_id: str = Field(..., min_length=1, max_length=100)

    full_name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., max_length=200, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    phone: str = Field(..., min_length=1, max_length=50)

    address_line1: str = Field(..., min_length=1, max_length=200)
    address_line2: Optional[str] = Field(None, max_length=200)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    zip_code: str = Field(..., min_length=1, max_length=20)
    country: str = Field(..., min_length=1, max_length=100)

    payment_method: PaymentMethod
    payment_transaction_id: Optional[str] = Field(
        None,
        max_length=64,
        validation_alias=AliasChoices("paymentTransactionId", "transactionId", "payment_transaction_id"),
    )
    delivery_instructions: Optional[str] = Field(None, max_length=1000)


class AddressOut(CamelModel):
    address_line1: str
    address_line2: Optional[str] = None
    city: str
    state: str
    zip_code: str
    country: str


class OrderItemOut(CamelModel):
    id: int
    product_id: int
    product_name: str
    unit_price: Money
    quantity: int
    subtotal: Money
    product_description: Optional[str] = None
    product_image_url: Optional[str] = None
    product_category: Optional[Category] = None


class OrderOut(CamelModel):
    order_id: int
    user_id: str
    order_date: datetime
    status: OrderStatus
    full_name: str
    email: str
    phone: str
    shipping_address: AddressOut
    subtotal: Money
    tax_amount: Money
    total_amount: Money
    items: List[OrderItemOut] = []
    payment_method: Optional[PaymentMethod] = None
    payment_transaction_id: Optional[str] = None
    estimated_delivery_date: Optional[datetime] = None
    delivery_instructions: Optional[str] = None

    @classmethod
    def from_model(cls, order) -> "OrderOut":
        return cls(
            order_id=order.id,
            user_id=order.user_id,
            order_date=order.order_date,
            status=order.status,
            full_name=order.full_name,
            email=order.email,
            phone=order.phone,
            shipping_address=AddressOut.model_validate(order),
            subtotal=order.subtotal,
            tax_amount=order.tax_amount,
            total_amount=order.total_amount,
            items=[OrderItemOut.model_validate(i) for i in order.items],
            payment_method=order.payment_method,
            payment_transaction_id=order.payment_transaction_id,
            estimated_delivery_date=order.estimated_delivery_date,
            delivery_instructions=order.delivery_instructions,
        )


class MessageOut(BaseModel):
    message: str


class HealthOut(BaseModel):
    status: str
    service: str
    database: str
