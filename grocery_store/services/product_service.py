# grocery_store/services/product_service.py
from typing import List

from sqlalchemy.orm import Session

from grocery_store.data.database import transaction
from grocery_store.data.models.product import ProductModel
from grocery_store.domain.enums import Category
from grocery_store.domain.schemas import ProductIn
from grocery_store.repos.product_repo import ProductRepo
from grocery_store.utils.logging import get_logger

logger = get_logger(__name__)


class ProductService:
    """Katalog produktow: zapytania + proste zarzadzanie (create/update/delete)."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ProductRepo(db)

    #query
    def get_all_products(self) -> List[ProductModel]:
        return self.repo.list_products()

    def get_products_by_category(self, category: Category) -> List[ProductModel]:
        return self.repo.list_by_category(category)

    def search_products_by_name(self, name: str) -> List[ProductModel]:
        return self.repo.search_by_name(name)

    def get_product_by_id(self, product_id: int) -> ProductModel | None:
        return self.repo.get_product(product_id)

    #commands
    def create_product(self, payload: ProductIn) -> ProductModel:
        with transaction(self.db):
            product = self.repo.add_product(ProductModel(**payload.model_dump()))

        logger.info(
            f"Utworzono produkt {product.id} ({product.name}, {product.category.display_name})"
        )
        return product

    def update_product(self, product_id: int, payload: ProductIn) -> ProductModel | None:
        product = self.repo.get_product(product_id)
        if not product:
            return None

        with transaction(self.db):
            product.name = payload.name
            product.category = payload.category
            product.price = payload.price
            product.image_url = payload.image_url
            product.description = payload.description

        logger.info(f"Zaktualizowano produkt {product_id}")
        return product

    def delete_product(self, product_id: int) -> bool:
        product = self.repo.get_product(product_id)
        if not product:
            return False

        with transaction(self.db):
            self.repo.delete_product(product)

        logger.info(f"Usunieto produkt {product_id}")
        return True
