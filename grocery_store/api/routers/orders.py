# grocery_store/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from grocery_store.data.database import get_db
from grocery_store.domain.enums import OrderStatus
from grocery_store.domain.errors import PaymentDeclinedError
from grocery_store.domain.schemas import CheckoutIn, MessageOut, OrderOut
from grocery_store.services.order_service import OrderService
from grocery_store.services.payment_service import PaymentSimulator
from grocery_store.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/order", tags=["order"])

_payments = PaymentSimulator()


def get_payment_simulator() -> PaymentSimulator:
    return _payments


def get_service(
    db: Session = Depends(get_db),
    payments: PaymentSimulator = Depends(get_payment_simulator),
) -> OrderService:
    return OrderService(db, payments=payments)


@router.post("/checkout", response_model=OrderOut, status_code=status.HTTP_201_CREATED)
def process_checkout(payload: CheckoutIn, svc: OrderService = Depends(get_service)):
    """
    Zamienia koszyk usera w zamowienie.
    400 - pusty koszyk / brak produktu, 402 - platnosc odrzucona.
    """
    try:
        return svc.process_checkout(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Checkout error: {e}")
    except PaymentDeclinedError as e:
        raise HTTPException(status_code=402, detail=f"Payment error: {e}")
    except Exception:
        logger.exception(f"Checkout dla {payload.user_id} nie powiodl sie")
        raise HTTPException(
            status_code=500,
            detail="An error occurred while processing your order. Please try again.",
        )


@router.get("/health", response_class=PlainTextResponse)
def order_health():
    return "Order service is running"


@router.get("/recent", response_model=List[OrderOut])
def get_recent_orders(
    days: int = Query(7, ge=1, le=365),
    svc: OrderService = Depends(get_service),
):
    return svc.get_recent_orders(days)


@router.get("/status/{order_status}", response_model=List[OrderOut])
def get_orders_by_status(order_status: OrderStatus, svc: OrderService = Depends(get_service)):
    return svc.get_orders_by_status(order_status)


@router.get("/user/{user_id}", response_model=List[OrderOut])
def get_user_orders(user_id: str, svc: OrderService = Depends(get_service)):
    return svc.get_user_orders(user_id)


@router.get("/user/{user_id}/count", response_model=int)
def get_user_order_count(user_id: str, svc: OrderService = Depends(get_service)):
    return svc.get_user_order_count(user_id)


@router.get("/{order_id}", response_model=OrderOut)
def get_order(order_id: int, svc: OrderService = Depends(get_service)):
    order = svc.get_order_by_id(order_id)
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.put("/{order_id}/status", response_model=OrderOut)
def update_order_status(
    order_id: int,
    new_status: OrderStatus = Query(..., alias="status"),
    svc: OrderService = Depends(get_service),
):
    order = svc.update_order_status(order_id, new_status)
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.delete("/{order_id}/cancel", response_model=MessageOut)
def cancel_order(
    order_id: int,
    user_id: str = Query(..., alias="userId"),
    svc: OrderService = Depends(get_service),
):
    if not svc.cancel_order(order_id, user_id):
        raise HTTPException(
            status_code=400,
            detail=(
                "Unable to cancel order. Order may not exist, not belong to user, "
                "or cannot be cancelled in current status."
            ),
        )
    return MessageOut(message="Order cancelled successfully")
