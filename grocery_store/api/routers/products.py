# grocery_store/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from grocery_store.data.database import get_db
from grocery_store.domain.enums import Category
from grocery_store.domain.schemas import ProductIn, ProductOut
from grocery_store.services.product_service import ProductService

router = APIRouter(prefix="/api/products", tags=["products"])


def get_service(db: Session):
    return ProductService(db)


@router.get("", response_model=List[ProductOut])
def get_all_products(db: Session = Depends(get_db)):
    return get_service(db).get_all_products()


@router.get("/search", response_model=List[ProductOut])
def search_products(name: str = Query(..., min_length=1), db: Session = Depends(get_db)):
    return get_service(db).search_products_by_name(name)


@router.get("/{category}", response_model=List[ProductOut])
def get_products_by_category(category: str, db: Session = Depends(get_db)):
    try:
        parsed = Category.parse(category)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return get_service(db).get_products_by_category(parsed)


@router.post("", response_model=ProductOut, status_code=status.HTTP_201_CREATED)
def create_product(payload: ProductIn, db: Session = Depends(get_db)):
    return get_service(db).create_product(payload)


@router.put("/{product_id}", response_model=ProductOut)
def update_product(product_id: int, payload: ProductIn, db: Session = Depends(get_db)):
    product = get_service(db).update_product(product_id, payload)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: int, db: Session = Depends(get_db)):
    if not get_service(db).delete_product(product_id):
        raise HTTPException(status_code=404, detail="Product not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
