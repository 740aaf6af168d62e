import json
import logging
from datetime import datetime, timezone

import pytest
import requests

from app.api.deps import build_services
from app.domain.enums import OrderStatus, WebhookEventType
from app.domain.schemas import WebhookEvent, WebhookEventData
from app.services.webhook_client import HttpWebhookForwarder
from app.main import create_app
from app.services.webhook_service import WebhookDispatcher, log_webhook_event


def make_event(event_type=WebhookEventType.ORDER_CREATED):
    return WebhookEvent(
        event_id="evt-1",
        event_type=event_type,
        timestamp=datetime(2026, 1, 15, 8, 0, tzinfo=timezone.utc),
        data=WebhookEventData(order_id="order-1", status=OrderStatus.PENDING_PAYMENT),
    )


class TestWebhookDispatcher:
    def test_listeners_called_in_registration_order(self):
        dispatcher = WebhookDispatcher()
        calls = []
        dispatcher.subscribe(lambda e: calls.append(("first", e.event_id)))
        dispatcher.subscribe(lambda e: calls.append(("second", e.event_id)))

        dispatcher.publish(make_event())

        assert calls == [("first", "evt-1"), ("second", "evt-1")]

    def test_failing_listener_is_isolated_and_kept(self, caplog):
        dispatcher = WebhookDispatcher()
        received = []

        def broken(event):
            raise RuntimeError("listener down")

        dispatcher.subscribe(broken)
        dispatcher.subscribe(received.append)

        with caplog.at_level(logging.ERROR):
            dispatcher.publish(make_event())
            dispatcher.publish(make_event(WebhookEventType.ORDER_CANCELLED))

        assert len(received) == 2
        assert broken in dispatcher.listeners
        assert "listener down" in caplog.text

    def test_emit_stamps_event_with_clock(self, clock):
        dispatcher = WebhookDispatcher(clock=clock)
        received = []
        dispatcher.subscribe(received.append)

        event = dispatcher.emit(
            WebhookEventType.ORDER_CREATED, order_id="order-9", status=OrderStatus.PENDING_PAYMENT
        )

        assert received == [event]
        assert event.timestamp == clock.now
        assert event.data.order_id == "order-9"
        assert event.event_id

    def test_failing_listener_does_not_fail_order_operation(self, services, events):
        def broken(event):
            raise RuntimeError("boom")

        services.webhooks.subscribe(broken)
        cart = services.carts.create_cart()
        services.carts.add_item(cart.id, "P1", 1)
        response = services.checkout.create_session(services.carts.checkout_items(cart.id))

        order = services.checkout.complete_checkout(response.session_id)

        assert order.order_id
        assert [e.event_type for e in events] == [WebhookEventType.ORDER_CREATED]

    def test_log_listener_writes_camel_case_json(self, caplog):
        with caplog.at_level(logging.INFO):
            log_webhook_event(make_event())

        assert '"eventType":"order.created"' in caplog.text
        assert '"orderId":"order-1"' in caplog.text


class FakeResponse:
    def __init__(self, status_code=200):
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


@pytest.fixture
def no_retry_sleep(monkeypatch):
    monkeypatch.setattr(HttpWebhookForwarder.send.retry, "sleep", lambda seconds: None)


class TestHttpWebhookForwarder:
    def test_posts_event_json(self, monkeypatch):
        sent = []

        def fake_post(url, data, headers, timeout):
            sent.append((url, json.loads(data), headers, timeout))
            return FakeResponse()

        monkeypatch.setattr(requests, "post", fake_post)

        HttpWebhookForwarder("http://hooks.test/ucp", timeout=1)(make_event())

        [(url, body, headers, timeout)] = sent
        assert url == "http://hooks.test/ucp"
        assert body["eventType"] == "order.created"
        assert body["data"] == {"orderId": "order-1", "status": "pending_payment"}
        assert headers["Content-Type"] == "application/json"
        assert timeout == 1

    def test_retries_transport_errors_then_raises(self, monkeypatch, no_retry_sleep):
        attempts = []

        def failing_post(*args, **kwargs):
            attempts.append(1)
            raise requests.ConnectionError("unreachable")

        monkeypatch.setattr(requests, "post", failing_post)

        with pytest.raises(requests.ConnectionError):
            HttpWebhookForwarder("http://hooks.test/ucp").send(make_event())
        assert len(attempts) == 3

    def test_recovers_after_transient_error(self, monkeypatch, no_retry_sleep):
        responses = [requests.ConnectionError("blip"), FakeResponse()]

        def flaky_post(*args, **kwargs):
            result = responses.pop(0)
            if isinstance(result, Exception):
                raise result
            return result

        monkeypatch.setattr(requests, "post", flaky_post)

        HttpWebhookForwarder("http://hooks.test/ucp").send(make_event())
        assert responses == []

    def test_dispatcher_swallows_forwarder_failure(self, monkeypatch, no_retry_sleep):
        monkeypatch.setattr(requests, "post", lambda *a, **k: FakeResponse(503))
        dispatcher = WebhookDispatcher()
        dispatcher.subscribe(HttpWebhookForwarder("http://hooks.test/ucp"))

        dispatcher.publish(make_event())

    def test_requires_url(self, monkeypatch):
        monkeypatch.setattr("app.services.webhook_client.UCP_WEBHOOK_FORWARD_URL", None)
        with pytest.raises(ValueError):
            HttpWebhookForwarder()


class TestListenerWiring:
    def test_log_listener_registered_once_per_services(self):
        services = build_services(seed=False, forward_url=None)

        assert services.webhooks.listeners == [log_webhook_event]

    def test_forwarder_registered_when_url_given(self):
        services = build_services(seed=False, forward_url="http://hooks.test/ucp")

        [logging_listener, forwarder] = services.webhooks.listeners
        assert logging_listener is log_webhook_event
        assert isinstance(forwarder, HttpWebhookForwarder)
        assert forwarder.url == "http://hooks.test/ucp"

    def test_creating_app_twice_does_not_duplicate_listeners(self, services):
        before = services.webhooks.listeners

        create_app(services)
        create_app(services)

        assert services.webhooks.listeners == before
