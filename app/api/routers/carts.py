# app/api/routers/carts.py
from fastapi import APIRouter, Body, Depends, HTTPException

from app.api.deps import Services, get_services
from app.domain.errors import CommerceError, NotFoundError
from app.domain.schemas import ApiResponse, Cart, CartSnapshot, CreateCartIn, ItemIn, QuantityIn
from app.services.cart_service import CartService

router = APIRouter(prefix="/api/cart", tags=["cart"])


def get_service(services: Services = Depends(get_services)) -> CartService:
    return services.carts


@router.post("", response_model=ApiResponse[Cart], status_code=201)
def create_cart(
    payload: CreateCartIn | None = Body(None),
    svc: CartService = Depends(get_service),
):
    cart = svc.create_cart(payload.user_id if payload else None)
    return ApiResponse[Cart](data=cart)


@router.get("/{cart_id}", response_model=ApiResponse[CartSnapshot])
def get_cart(cart_id: str, svc: CartService = Depends(get_service)):
    try:
        return ApiResponse[CartSnapshot](data=svc.price_snapshot(cart_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{cart_id}/items", response_model=ApiResponse[CartSnapshot])
def add_item(cart_id: str, payload: ItemIn, svc: CartService = Depends(get_service)):
    try:
        svc.add_item(cart_id, payload.product_id, payload.quantity)
        return ApiResponse[CartSnapshot](data=svc.price_snapshot(cart_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CommerceError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/{cart_id}/items/{product_id}", response_model=ApiResponse[CartSnapshot])
def update_item(
    cart_id: str,
    product_id: str,
    payload: QuantityIn,
    svc: CartService = Depends(get_service),
):
    try:
        svc.set_quantity(cart_id, product_id, payload.quantity)
        return ApiResponse[CartSnapshot](data=svc.price_snapshot(cart_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CommerceError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{cart_id}/items/{product_id}", response_model=ApiResponse[CartSnapshot])
def remove_item(cart_id: str, product_id: str, svc: CartService = Depends(get_service)):
    try:
        svc.remove_item(cart_id, product_id)
        return ApiResponse[CartSnapshot](data=svc.price_snapshot(cart_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{cart_id}", response_model=ApiResponse[Cart])
def clear_cart(cart_id: str, svc: CartService = Depends(get_service)):
    try:
        return ApiResponse[Cart](data=svc.clear_cart(cart_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
