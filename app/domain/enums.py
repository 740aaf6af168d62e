# app/domain/enums.py
from enum import Enum


class ProductCategory(str, Enum):
    SMOOTHIE_BOWL = "smoothie-bowl"
    PANCAKES_WAFFLES = "pancakes-waffles"
    TOFU_SCRAMBLE = "tofu-scramble"
    OATMEAL_PORRIDGE = "oatmeal-porridge"
    BREAKFAST_BURRITO = "breakfast-burrito"
    AVOCADO_TOAST = "avocado-toast"
    CHIA_PUDDING = "chia-pudding"
    GRANOLA_MUESLI = "granola-muesli"
    FRUIT_BOWL = "fruit-bowl"
    BEVERAGES = "beverages"


class SessionStatus(str, Enum):
    PENDING = "pending"
    # nic nie przechodzi do ACTIVE, status zostaje dla zgodnosci z UCP
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    EXPIRED = "expired"


class OrderStatus(str, Enum):
    PENDING_PAYMENT = "pending_payment"
    PAYMENT_PROCESSING = "payment_processing"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


class FulfillmentStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class WebhookEventType(str, Enum):
    ORDER_CREATED = "order.created"
    ORDER_CONFIRMED = "order.confirmed"
    ORDER_CANCELLED = "order.cancelled"
    PAYMENT_COMPLETED = "payment.completed"
    PAYMENT_FAILED = "payment.failed"
    SHIPMENT_CREATED = "shipment.created"
    SHIPMENT_IN_TRANSIT = "shipment.in_transit"
    SHIPMENT_DELIVERED = "shipment.delivered"
    REFUND_PROCESSED = "refund.processed"
