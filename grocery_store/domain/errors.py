# grocery_store/domain/errors.py
"""
Wyjatki domenowe. Dziedzicza po wbudowanych (ValueError, LookupError,
RuntimeError), wiec routery lapia je tak samo jak reszte bledow.
"""


class EmptyCartError(ValueError):
    def __init__(self, user_id: str):
        super().__init__("Cart is empty. Cannot process checkout.")
        self.user_id = user_id


class ProductNotFoundError(ValueError):
    def __init__(self, product_id: int):
        super().__init__(f"Product not found with ID: {product_id}")
        self.product_id = product_id


class CartItemNotFoundError(LookupError):
    def __init__(self, item_id: int):
        super().__init__(f"Cart item not found with ID: {item_id}")
        self.item_id = item_id


class PaymentDeclinedError(RuntimeError):
    def __init__(self, order_id: int):
        super().__init__("Payment processing failed. Order has been cancelled.")
        self.order_id = order_id
