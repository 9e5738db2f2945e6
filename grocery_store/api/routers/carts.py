# grocery_store/api/routers/carts.py
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from grocery_store.data.database import get_db
from grocery_store.domain.errors import CartItemNotFoundError
from grocery_store.domain.schemas import AddToCartIn, CartLineOut, CartOut, UpdateCartIn
from grocery_store.services.cart_service import CartService

router = APIRouter(prefix="/api/cart", tags=["cart"])


def get_service(db: Session):
    return CartService(db)


@router.get("", response_model=CartOut)
def get_cart(
    user_id: str = Query(..., alias="userId"),
    db: Session = Depends(get_db),
):
    return get_service(db).get_cart(user_id)


@router.post("", response_model=CartLineOut, status_code=status.HTTP_201_CREATED)
def add_to_cart(payload: AddToCartIn, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.add_to_cart(payload.user_id, payload.product_id, payload.quantity)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Error: {e}")


# /clear, /count, /check przed /{item_id}
@router.delete("/clear", status_code=status.HTTP_204_NO_CONTENT)
def clear_cart(
    user_id: str = Query(..., alias="userId"),
    db: Session = Depends(get_db),
):
    get_service(db).clear_cart(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/count", response_model=int)
def get_cart_item_count(
    user_id: str = Query(..., alias="userId"),
    db: Session = Depends(get_db),
):
    return get_service(db).get_cart_item_count(user_id)


@router.get("/check", response_model=bool)
def check_product_in_cart(
    user_id: str = Query(..., alias="userId"),
    product_id: int = Query(..., alias="productId"),
    db: Session = Depends(get_db),
):
    return get_service(db).is_product_in_cart(user_id, product_id)


@router.put("/{item_id}", response_model=CartLineOut)
def update_cart_item(
    item_id: int,
    payload: UpdateCartIn,
    user_id: str = Query(..., alias="userId"),
    db: Session = Depends(get_db),
):
    svc = get_service(db)

    #linia musi nalezec do usera, obca = nieistniejaca
    if svc.get_cart_item(item_id, user_id) is None:
        raise HTTPException(status_code=404, detail="Cart item not found")

    try:
        return svc.update_cart_item_quantity(item_id, payload.quantity)
    except CartItemNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Error: {e}")


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_from_cart(
    item_id: int,
    user_id: str = Query(..., alias="userId"),
    db: Session = Depends(get_db),
):
    if not get_service(db).remove_from_cart(item_id, user_id):
        raise HTTPException(status_code=404, detail="Cart item not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
