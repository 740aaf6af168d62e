# app/api/routers/checkout.py
from fastapi import APIRouter, Body, Depends, HTTPException

from app.api.deps import Services, get_services
from app.domain.errors import CommerceError, NotFoundError
from app.domain.schemas import (
    ApiMessage,
    ApiResponse,
    CheckoutResponse,
    CheckoutSession,
    CompleteCheckoutIn,
    CreateCheckoutSessionIn,
    Order,
)

router = APIRouter(prefix="/api/ucp/checkout", tags=["ucp"])


@router.post("/sessions", response_model=ApiResponse[CheckoutResponse], status_code=201)
def create_checkout_session(
    payload: CreateCheckoutSessionIn,
    services: Services = Depends(get_services),
):
    """
    Tworzy sesje checkout UCP z koszyka (cartId) albo z gotowych pozycji (cartItems).
    """
    try:
        if payload.cart_id:
            items = services.carts.checkout_items(payload.cart_id)
        elif payload.cart_items is not None:
            items = payload.cart_items
        else:
            raise HTTPException(
                status_code=400, detail="Either cartId or cartItems must be provided"
            )

        response = services.checkout.create_session(
            items,
            currency=payload.currency,
            metadata=payload.metadata,
            return_url=payload.return_url,
            cancel_url=payload.cancel_url,
        )
        return ApiResponse[CheckoutResponse](data=response)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CommerceError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/sessions/{session_id}", response_model=ApiResponse[CheckoutSession])
def get_checkout_session(session_id: str, services: Services = Depends(get_services)):
    try:
        return ApiResponse[CheckoutSession](data=services.checkout.get_session(session_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/sessions/{session_id}/complete", response_model=ApiResponse[Order])
def complete_checkout(
    session_id: str,
    payload: CompleteCheckoutIn | None = Body(None),
    services: Services = Depends(get_services),
):
    """
    Konczy checkout i tworzy zamowienie.
    Brak sesji, zly stan i wygasniecie zwracaja 400.
    """
    payload = payload or CompleteCheckoutIn()
    try:
        order = services.checkout.complete_checkout(
            session_id,
            customer_id=payload.customer_id,
            shipping_address=payload.shipping_address,
            billing_address=payload.billing_address,
        )
        return ApiResponse[Order](data=order)
    except CommerceError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/sessions/{session_id}/cancel", response_model=ApiMessage)
def cancel_checkout_session(session_id: str, services: Services = Depends(get_services)):
    if not services.checkout.cancel_session(session_id):
        raise HTTPException(status_code=404, detail="Checkout session not found")
    return ApiMessage(message="Checkout session cancelled")
