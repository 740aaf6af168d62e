# app/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel
from typing import Annotated, Any, Dict, Generic, List, Optional, TypeVar
from decimal import Decimal
from datetime import datetime

from app.domain.enums import (
    ProductCategory,
    SessionStatus,
    OrderStatus,
    PaymentStatus,
    FulfillmentStatus,
    WebhookEventType,
)

# kwoty trzymamy jako Decimal, w JSON leca jako liczby
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

T = TypeVar("T")


class CamelModel(BaseModel):
    """Pola snake_case w Pythonie, camelCase na drucie."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =====================================================
# CATALOG
# =====================================================
class NutritionalInfo(CamelModel):
    serving_size: str
    calories: int
    protein: float
    carbohydrates: float
    fat: float
    fiber: float
    sugar: float


class Product(CamelModel):
    id: str
    name: str
    description: str
    category: ProductCategory
    price: Money
    currency: str = "USD"
    image_url: str
    in_stock: bool
    stock_quantity: int = Field(..., ge=0)
    ingredients: List[str] = []
    allergens: List[str] = []
    nutritional_info: NutritionalInfo
    tags: List[str] = []
    created_at: datetime
    updated_at: datetime


class AvailabilityOut(CamelModel):
    product_id: str
    available: bool
    in_stock: bool
    stock_quantity: int
    requested_quantity: int


# =====================================================
# CART
# =====================================================
class CartLine(CamelModel):
    product_id: str
    quantity: int = Field(..., gt=0)
    added_at: datetime


class Cart(CamelModel):
    id: str
    user_id: Optional[str] = None
    items: List[CartLine] = []
    created_at: datetime
    updated_at: datetime


class PricedCartItem(CamelModel):
    product_id: str
    product: Product
    quantity: int
    unit_price: Money
    total_price: Money
    added_at: datetime


class CartSnapshot(CamelModel):
    """Wyceniony widok koszyka, liczony przy kazdym odczycie."""

    cart: Cart
    items: List[PricedCartItem]
    subtotal: Money
    item_count: int


class CreateCartIn(CamelModel):
    user_id: Optional[str] = None


class ItemIn(CamelModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: str = Field(..., min_length=1, description="ID produktu")
    quantity: int = Field(..., gt=0, description="Ilosc produktu (musi byc > 0)")


class QuantityIn(CamelModel):
    """Schema dla zmiany ilosci, 0 usuwa pozycje."""

    quantity: int = Field(..., ge=0)


# =====================================================
# UCP CHECKOUT
# =====================================================
class CheckoutItem(CamelModel):
    product_id: str = Field(..., min_length=1)
    name: str
    description: str = ""
    quantity: int = Field(..., gt=0)
    unit_price: Money = Field(..., ge=0)
    total_price: Money = Field(..., ge=0)
    image_url: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class CheckoutSession(CamelModel):
    session_id: str
    merchant_id: str
    status: SessionStatus
    cart_items: List[CheckoutItem]
    subtotal: Money
    tax: Money
    shipping: Money
    total: Money
    currency: str
    created_at: datetime
    expires_at: datetime
    return_url: Optional[str] = None
    cancel_url: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class CheckoutResponse(CamelModel):
    session_id: str
    checkout_url: str
    expires_at: datetime


class CreateCheckoutSessionIn(CamelModel):
    """Albo cartId, albo gotowa lista cartItems."""

    cart_id: Optional[str] = None
    cart_items: Optional[List[CheckoutItem]] = None
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    return_url: Optional[str] = None
    cancel_url: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class Address(CamelModel):
    first_name: str
    last_name: str
    address_line1: str
    address_line2: Optional[str] = None
    city: str
    state: str
    postal_code: str
    country: str
    phone: Optional[str] = None


class CompleteCheckoutIn(CamelModel):
    customer_id: Optional[str] = None
    shipping_address: Optional[Address] = None
    billing_address: Optional[Address] = None


# =====================================================
# UCP ORDERS
# =====================================================
class Order(CamelModel):
    order_id: str
    session_id: str
    merchant_id: str
    customer_id: Optional[str] = None
    status: OrderStatus
    items: List[CheckoutItem]
    subtotal: Money
    tax: Money
    shipping: Money
    total: Money
    currency: str
    payment_status: PaymentStatus
    fulfillment_status: FulfillmentStatus
    shipping_address: Optional[Address] = None
    billing_address: Optional[Address] = None
    created_at: datetime
    updated_at: datetime
    metadata: Optional[Dict[str, Any]] = None


class PaymentStatusIn(CamelModel):
    payment_status: PaymentStatus


class FulfillmentStatusIn(CamelModel):
    fulfillment_status: FulfillmentStatus


# =====================================================
# WEBHOOKS
# =====================================================
class WebhookEventData(CamelModel):
    order_id: str
    status: Optional[OrderStatus] = None
    payment_status: Optional[PaymentStatus] = None
    fulfillment_status: Optional[FulfillmentStatus] = None
    metadata: Optional[Dict[str, Any]] = None


class WebhookEvent(CamelModel):
    event_id: str
    event_type: WebhookEventType
    timestamp: datetime
    data: WebhookEventData


# =====================================================
# ENVELOPE
# =====================================================
class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    data: T


class ApiListResponse(BaseModel, Generic[T]):
    success: bool = True
    data: List[T]
    count: int


class ApiMessage(BaseModel):
    success: bool = True
    message: str
