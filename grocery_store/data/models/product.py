# grocery_store/data/models/product.py
from sqlalchemy import Column, Integer, String, Numeric, Enum as SAEnum

from grocery_store.data.database import Base
from grocery_store.domain.enums import Category


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    name = Column(String(200), nullable=False, index=True)
    category = Column(SAEnum(Category, native_enum=False, length=20), nullable=False, index=True)
    price = Column(Numeric(10, 2), nullable=False)
    image_url = Column(String(500))
    description = Column(String(1000))

    def __repr__(self) -> str:
        return f"<ProductModel id={self.id} name={self.name!r} price={self.price}>"
