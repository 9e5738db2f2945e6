# grocery_store/services/cart_service.py
from decimal import Decimal
from typing import List

from sqlalchemy.orm import Session

from grocery_store.data.database import transaction
from grocery_store.data.models.cart_item import CartItemModel
from grocery_store.domain.errors import CartItemNotFoundError, ProductNotFoundError
from grocery_store.domain.schemas import CartItemOut, CartOut
from grocery_store.repos.cart_repo import CartRepo
from grocery_store.repos.product_repo import ProductRepo
from grocery_store.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Koszyk uzytkownika.
    commands (add, update, remove, clear) modyfikuja stan,
    query (get_cart, count, check) tylko odczyt.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = CartRepo(db)
        self.products = ProductRepo(db)

    #query - odczyt
    def get_cart(self, user_id: str) -> CartOut:
        """
        Wycena koszyka na biezacych cenach katalogu.

        Kazda linia jest laczona z produktem osobnym lookupem po product_id.
        Jesli produktu juz nie ma, linia zostaje w widoku z pustymi polami
        produktu i nie wchodzi do total_amount (ale jej ilosc wchodzi do total_items).
        """
        lines = self.repo.get_cart_items(user_id)

        items: List[CartItemOut] = []
        total_amount = Decimal("0.00")

        for line in lines:
            item = CartItemOut(id=line.id, product_id=line.product_id, quantity=line.quantity)

            product = self.products.get_product(line.product_id)
            if product is not None:
                subtotal = product.price * line.quantity
                item.product_name = product.name
                item.product_price = product.price
                item.product_image_url = product.image_url
                item.product_category = product.category
                item.product_description = product.description
                item.subtotal = subtotal
                total_amount += subtotal
            else:
                logger.warning(
                    f"Produkt {line.product_id} z koszyka {user_id} nie istnieje, pomijam w wycenie"
                )

            items.append(item)

        return CartOut(
            user_id=user_id,
            items=items,
            total_items=sum(line.quantity for line in lines),
            total_amount=total_amount,
        )

    def get_cart_item(self, item_id: int, user_id: str) -> CartItemModel | None:
        """Linia tylko jesli nalezy do usera, inaczej None (bez rozrozniania)."""
        item = self.repo.get_cart_item(item_id)
        if item is None or item.user_id != user_id:
            return None
        return item

    def get_cart_item_count(self, user_id: str) -> int:
        return self.repo.count_user_quantity(user_id)

    def is_product_in_cart(self, user_id: str, product_id: int) -> bool:
        return self.repo.get_user_item_for_product(user_id, product_id) is not None

    #commands
    def add_to_cart(self, user_id: str, product_id: int, quantity: int) -> CartItemModel:
        if quantity < 1:
            raise ValueError("Quantity must be at least 1")

        if self.products.get_product(product_id) is None:
            raise ProductNotFoundError(product_id)

        with transaction(self.db):
            existing = self.repo.get_user_item_for_product(user_id, product_id)

            if existing:
                logger.info(
                    f"Produkt {product_id} juz jest w koszyku {user_id}, zwiekszam ilosc "
                    f"z {existing.quantity} do {existing.quantity + quantity}"
                )
                existing.quantity += quantity
                item = existing
            else:
                logger.info(f"Dodaje produkt {product_id} x{quantity} do koszyka {user_id}")
                item = self.repo.add_cart_item(
                    CartItemModel(user_id=user_id, product_id=product_id, quantity=quantity)
                )

        return item

    def update_cart_item_quantity(self, item_id: int, quantity: int) -> CartItemModel:
        if quantity < 1:
            raise ValueError("Quantity must be at least 1")

        item = self.repo.get_cart_item(item_id)
        if item is None:
            raise CartItemNotFoundError(item_id)

        with transaction(self.db):
            item.quantity = quantity

        logger.info(f"Linia koszyka {item_id}: nowa ilosc {quantity}")
        return item

    def remove_from_cart(self, item_id: int, user_id: str | None = None) -> bool:
        """
        Usuwa linie. Z user_id - tylko wlasna linie; obca i nieistniejaca
        daja ten sam wynik False.
        """
        item = self.repo.get_cart_item(item_id)

        if item is None or (user_id is not None and item.user_id != user_id):
            return False

        with transaction(self.db):
            self.repo.delete_cart_item(item)

        logger.info(f"Usunieto linie {item_id} z koszyka {item.user_id}")
        return True

    def clear_cart(self, user_id: str) -> None:
        with transaction(self.db):
            removed = self.repo.delete_user_items(user_id)

        logger.info(f"Wyczyszczono koszyk {user_id} ({removed} linii)")
