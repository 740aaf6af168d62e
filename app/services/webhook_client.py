# app/services/webhook_client.py
import requests

from app.domain.schemas import WebhookEvent
from app.utils.retry import http_retry
from app.utils.settings import UCP_WEBHOOK_FORWARD_URL, WEBHOOK_TIMEOUT_SECONDS
from app.utils.logging import get_logger

logger = get_logger(__name__)


class HttpWebhookForwarder:
    """
    Listener wysylajacy zdarzenia UCP POSTem na zewnetrzny endpoint.
    Bledy transportu ponawiane przez tenacity, po wyczerpaniu prob
    wyjatek leci do dispatchera, ktory go loguje.
    """

    def __init__(self, url: str | None = None, timeout: int = WEBHOOK_TIMEOUT_SECONDS):
        if not (url or UCP_WEBHOOK_FORWARD_URL):
            raise ValueError("Webhook forward URL is not configured")
        self.url = url or UCP_WEBHOOK_FORWARD_URL
        self.timeout = timeout

    def __call__(self, event: WebhookEvent) -> None:
        self.send(event)

    @http_retry()
    def send(self, event: WebhookEvent) -> None:
        logger.info(f"WebhookForwarder POST {self.url} {event.event_type.value}")

        resp = requests.post(
            self.url,
            data=event.model_dump_json(by_alias=True, exclude_none=True),
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )
        resp.raise_for_status()
