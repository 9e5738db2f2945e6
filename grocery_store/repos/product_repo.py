# grocery_store/repos/product_repo.py
from typing import List

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from grocery_store.data.models.product import ProductModel
from grocery_store.domain.enums import Category


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def list_products(self) -> List[ProductModel]:
        return list(self.db.execute(select(ProductModel).order_by(ProductModel.name.asc())).scalars())

    def list_by_category(self, category: Category) -> List[ProductModel]:
        stmt = (
            select(ProductModel)
            .where(ProductModel.category == category)
            .order_by(ProductModel.id)
        )
        return list(self.db.execute(stmt).scalars())

    def search_by_name(self, name: str) -> List[ProductModel]:
        # case insensitive "zawiera"
        stmt = (
            select(ProductModel)
            .where(func.lower(ProductModel.name).contains(name.lower(), autoescape=True))
            .order_by(ProductModel.id)
        )
        return list(self.db.execute(stmt).scalars())

    def add_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.flush()
        return product

    def delete_product(self, product: ProductModel) -> None:
        self.db.delete(product)
        self.db.flush()

    def count(self) -> int:
        return self.db.execute(select(func.count(ProductModel.id))).scalar_one()
