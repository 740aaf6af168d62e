import pytest

from app.domain.enums import FulfillmentStatus, OrderStatus, PaymentStatus
from app.domain.errors import InvalidStateError, NotFoundError


def place_order(services, customer_id="cust-1", lines=(("P1", 2), ("P2", 3))):
    cart = services.carts.create_cart(customer_id)
    for product_id, quantity in lines:
        services.carts.add_item(cart.id, product_id, quantity)
    response = services.checkout.create_session(services.carts.checkout_items(cart.id))
    return services.checkout.complete_checkout(response.session_id, customer_id=customer_id)


def event_types(events):
    return [e.event_type.value for e in events]


@pytest.fixture
def order(services, events):
    placed = place_order(services)
    events.clear()
    return placed


class TestPaymentStatus:
    def test_completed_payment_confirms_order(self, services, order, events):
        updated = services.orders.update_payment_status(order.order_id, PaymentStatus.COMPLETED)

        assert updated.status == OrderStatus.CONFIRMED
        assert updated.payment_status == PaymentStatus.COMPLETED
        assert event_types(events) == ["payment.completed"]
        assert events[0].data.payment_status == PaymentStatus.COMPLETED

    def test_failed_payment_cancels_order(self, services, order, events):
        updated = services.orders.update_payment_status(order.order_id, PaymentStatus.FAILED)

        assert updated.status == OrderStatus.CANCELLED
        assert event_types(events) == ["payment.failed"]
        assert events[0].data.order_id == order.order_id

    @pytest.mark.parametrize(
        "status", [PaymentStatus.PENDING, PaymentStatus.PROCESSING, PaymentStatus.REFUNDED]
    )
    def test_other_statuses_are_recorded_without_event(self, services, order, events, status):
        updated = services.orders.update_payment_status(order.order_id, status)

        assert updated.payment_status == status
        assert updated.status == OrderStatus.PENDING_PAYMENT
        assert events == []

    def test_updates_timestamp(self, services, order, clock):
        clock.advance(minutes=3)
        updated = services.orders.update_payment_status(order.order_id, PaymentStatus.PROCESSING)
        assert updated.updated_at == clock.now

    def test_unknown_order(self, services):
        with pytest.raises(NotFoundError):
            services.orders.update_payment_status("missing", PaymentStatus.COMPLETED)


class TestFulfillmentStatus:
    def test_shipped(self, services, order, events):
        updated = services.orders.update_fulfillment_status(order.order_id, FulfillmentStatus.SHIPPED)

        assert updated.status == OrderStatus.SHIPPED
        assert event_types(events) == ["shipment.created"]

    def test_delivered(self, services, order, events):
        updated = services.orders.update_fulfillment_status(
            order.order_id, FulfillmentStatus.DELIVERED
        )

        assert updated.status == OrderStatus.DELIVERED
        assert event_types(events) == ["shipment.delivered"]
        assert events[0].data.fulfillment_status == FulfillmentStatus.DELIVERED

    def test_processing_is_recorded_without_event(self, services, order, events):
        updated = services.orders.update_fulfillment_status(
            order.order_id, FulfillmentStatus.PROCESSING
        )

        assert updated.fulfillment_status == FulfillmentStatus.PROCESSING
        assert updated.status == OrderStatus.PENDING_PAYMENT
        assert events == []

    def test_unknown_order(self, services):
        with pytest.raises(NotFoundError):
            services.orders.update_fulfillment_status("missing", FulfillmentStatus.SHIPPED)


class TestCancelOrder:
    def test_cancel_restores_consumed_stock(self, services, order, events):
        assert services.catalog.get_product("P1").stock_quantity == 3
        assert services.catalog.get_product("P2").stock_quantity == 7

        cancelled = services.orders.cancel_order(order.order_id)

        assert cancelled.status == OrderStatus.CANCELLED
        assert services.catalog.get_product("P1").stock_quantity == 5
        assert services.catalog.get_product("P2").stock_quantity == 10
        assert event_types(events) == ["order.cancelled"]

    def test_cancel_brings_sold_out_product_back_in_stock(self, services, events):
        placed = place_order(services, lines=(("P1", 5),))
        assert services.catalog.get_product("P1").in_stock is False

        services.orders.cancel_order(placed.order_id)

        product = services.catalog.get_product("P1")
        assert product.in_stock is True
        assert product.stock_quantity == 5

    @pytest.mark.parametrize("status", [FulfillmentStatus.SHIPPED, FulfillmentStatus.DELIVERED])
    def test_shipped_or_delivered_order_cannot_be_cancelled(self, services, order, events, status):
        services.orders.update_fulfillment_status(order.order_id, status)
        events.clear()

        with pytest.raises(InvalidStateError):
            services.orders.cancel_order(order.order_id)

        assert services.orders.get_order(order.order_id).status.value == status.value
        assert services.catalog.get_product("P1").stock_quantity == 3
        assert events == []

    def test_unknown_order(self, services):
        with pytest.raises(NotFoundError):
            services.orders.cancel_order("missing")


class TestQueries:
    def test_get_order(self, services, order):
        assert services.orders.get_order(order.order_id) is order

    def test_customer_orders_newest_first(self, services, clock):
        first = place_order(services, lines=(("P2", 1),))
        clock.advance(minutes=1)
        other = place_order(services, customer_id="cust-2", lines=(("P2", 1),))
        clock.advance(minutes=1)
        second = place_order(services, lines=(("P2", 1),))

        orders = services.orders.get_customer_orders("cust-1")

        assert [o.order_id for o in orders] == [second.order_id, first.order_id]
        assert other.order_id not in [o.order_id for o in orders]

    def test_customer_without_orders(self, services):
        assert services.orders.get_customer_orders("nobody") == []
