# app/services/order_service.py
import uuid
from typing import List

from app.domain.enums import FulfillmentStatus, OrderStatus, PaymentStatus, WebhookEventType
from app.domain.errors import InvalidStateError, NotFoundError
from app.domain.schemas import Address, CheckoutSession, Order
from app.repos.order_repo import OrderRepo
from app.services.catalog_service import CatalogService
from app.services.webhook_service import WebhookDispatcher
from app.utils.clock import Clock, utcnow
from app.utils.logging import get_logger

logger = get_logger(__name__)

#zamowien w tych stanach nie da sie juz anulowac
NON_CANCELLABLE = {OrderStatus.SHIPPED, OrderStatus.DELIVERED}


class OrderService:
    """
    Serwis odpowiedzialny za domene zamowien UCP.
    Separacja od CheckoutService: sesja konczy sie tutaj, dalej zyje zamowienie.
    """

    def __init__(
        self,
        repo: OrderRepo,
        catalog: CatalogService,
        webhooks: WebhookDispatcher,
        clock: Clock = utcnow,
    ):
        self.repo = repo
        self.catalog = catalog
        self.webhooks = webhooks
        self.clock = clock

    def create_order_from_session(
        self,
        session: CheckoutSession,
        customer_id: str | None = None,
        shipping_address: Address | None = None,
        billing_address: Address | None = None,
    ) -> Order:
        """
        Use Case: Tworzenie zamowienia z zakonczonej sesji checkout.

        1. Kopiuje pozycje i sumy z sesji
        2. Zdejmuje stan magazynowy dla kazdej pozycji
        3. Wysyla webhook order.created
        """
        created = self.place_order_from_session(
            session,
            customer_id=customer_id,
            shipping_address=shipping_address,
            billing_address=billing_address,
        )
        self.notify_order_created(created)
        return created

    def place_order_from_session(
        self,
        session: CheckoutSession,
        customer_id: str | None = None,
        shipping_address: Address | None = None,
        billing_address: Address | None = None,
    ) -> Order:
        """Zapis zamowienia i zdjecie stanu magazynowego, bez webhooka."""
        now = self.clock()
        order = Order(
            order_id=str(uuid.uuid4()),
            session_id=session.session_id,
            merchant_id=session.merchant_id,
            customer_id=customer_id,
            status=OrderStatus.PENDING_PAYMENT,
            items=[i.model_copy(deep=True) for i in session.cart_items],
            subtotal=session.subtotal,
            tax=session.tax,
            shipping=session.shipping,
            total=session.total,
            currency=session.currency,
            payment_status=PaymentStatus.PENDING,
            fulfillment_status=FulfillmentStatus.PENDING,
            shipping_address=shipping_address,
            billing_address=billing_address,
            created_at=now,
            updated_at=now,
            metadata=dict(session.metadata) if session.metadata else None,
        )

        created = self.repo.create_order(order)
        logger.info(f"Utworzono zamowienie {created.order_id} z sesji {session.session_id}")

        for item in created.items:
            self.catalog.adjust_stock(item.product_id, item.quantity)

        return created

    def notify_order_created(self, order: Order) -> None:
        self.webhooks.emit(
            WebhookEventType.ORDER_CREATED,
            order_id=order.order_id,
            status=order.status,
        )

    #query
    def get_order(self, order_id: str) -> Order:
        order = self.repo.get_order(order_id)
        if not order:
            raise NotFoundError("Order not found")
        return order

    def get_customer_orders(self, customer_id: str) -> List[Order]:
        orders = self.repo.get_orders_by_customer(customer_id)
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    #commands
    def update_payment_status(self, order_id: str, payment_status: PaymentStatus) -> Order:
        order = self.get_order(order_id)

        order.payment_status = payment_status
        order.updated_at = self.clock()

        event_type = None
        if payment_status == PaymentStatus.COMPLETED:
            order.status = OrderStatus.CONFIRMED
            event_type = WebhookEventType.PAYMENT_COMPLETED
        elif payment_status == PaymentStatus.FAILED:
            order.status = OrderStatus.CANCELLED
            event_type = WebhookEventType.PAYMENT_FAILED

        self.repo.save_order(order)
        logger.info(f"Zamowienie {order_id}, status platnosci -> {payment_status.value}")

        #pozostale statusy platnosci tylko zapisujemy, bez zdarzenia
        if event_type:
            self.webhooks.emit(event_type, order_id=order_id, payment_status=payment_status)
        return order

    def update_fulfillment_status(
        self, order_id: str, fulfillment_status: FulfillmentStatus
    ) -> Order:
        order = self.get_order(order_id)

        order.fulfillment_status = fulfillment_status
        order.updated_at = self.clock()

        event_type = None
        if fulfillment_status == FulfillmentStatus.SHIPPED:
            order.status = OrderStatus.SHIPPED
            event_type = WebhookEventType.SHIPMENT_CREATED
        elif fulfillment_status == FulfillmentStatus.DELIVERED:
            order.status = OrderStatus.DELIVERED
            event_type = WebhookEventType.SHIPMENT_DELIVERED

        self.repo.save_order(order)
        logger.info(f"Zamowienie {order_id}, status realizacji -> {fulfillment_status.value}")

        if event_type:
            self.webhooks.emit(
                event_type, order_id=order_id, fulfillment_status=fulfillment_status
            )
        return order

    def cancel_order(self, order_id: str) -> Order:
        order = self.get_order(order_id)

        if order.status in NON_CANCELLABLE:
            raise InvalidStateError("Cannot cancel order that has been shipped or delivered")

        order.status = OrderStatus.CANCELLED
        order.updated_at = self.clock()
        self.repo.save_order(order)
        logger.info(f"Zamowienie {order_id} anulowane")

        self.webhooks.emit(
            WebhookEventType.ORDER_CANCELLED,
            order_id=order_id,
            status=OrderStatus.CANCELLED,
        )

        #zwrot na magazyn dokladnie tego co zdjelismy przy tworzeniu
        for item in order.items:
            self.catalog.adjust_stock(item.product_id, -item.quantity)

        return order
