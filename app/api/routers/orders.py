# app/api/routers/orders.py
from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.deps import Services, get_services
from app.domain.errors import CommerceError, NotFoundError
from app.domain.schemas import (
    ApiListResponse,
    ApiResponse,
    FulfillmentStatusIn,
    Order,
    PaymentStatusIn,
)
from app.services.order_service import OrderService

router = APIRouter(prefix="/api/ucp/orders", tags=["ucp"])


def get_service(services: Services = Depends(get_services)) -> OrderService:
    return services.orders


@router.get("", response_model=ApiListResponse[Order])
def get_customer_orders(
    customer_id: str = Query(..., alias="customerId", min_length=1),
    svc: OrderService = Depends(get_service),
):
    orders = svc.get_customer_orders(customer_id)
    return ApiListResponse[Order](data=orders, count=len(orders))


@router.get("/{order_id}", response_model=ApiResponse[Order])
def get_order(order_id: str, svc: OrderService = Depends(get_service)):
    try:
        return ApiResponse[Order](data=svc.get_order(order_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{order_id}/payment", response_model=ApiResponse[Order])
def update_payment_status(
    order_id: str,
    payload: PaymentStatusIn,
    svc: OrderService = Depends(get_service),
):
    """
    Symulacja bramki platnosci: completed potwierdza zamowienie, failed je anuluje.
    """
    try:
        return ApiResponse[Order](data=svc.update_payment_status(order_id, payload.payment_status))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{order_id}/fulfillment", response_model=ApiResponse[Order])
def update_fulfillment_status(
    order_id: str,
    payload: FulfillmentStatusIn,
    svc: OrderService = Depends(get_service),
):
    try:
        return ApiResponse[Order](
            data=svc.update_fulfillment_status(order_id, payload.fulfillment_status)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{order_id}/cancel", response_model=ApiResponse[Order])
def cancel_order(order_id: str, svc: OrderService = Depends(get_service)):
    try:
        return ApiResponse[Order](data=svc.cancel_order(order_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CommerceError as e:
        raise HTTPException(status_code=400, detail=str(e))
