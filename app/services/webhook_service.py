# app/services/webhook_service.py
import uuid
from typing import Callable, List

from app.domain.enums import WebhookEventType
from app.domain.schemas import WebhookEvent, WebhookEventData
from app.utils.clock import Clock, utcnow
from app.utils.logging import get_logger

logger = get_logger(__name__)

WebhookListener = Callable[[WebhookEvent], None]


def _listener_name(listener: WebhookListener) -> str:
    return getattr(listener, "__name__", type(listener).__name__)


class WebhookDispatcher:
    """
    Rozsylanie zdarzen UCP w obrebie procesu.
    Listenery wolane synchronicznie, w kolejnosci rejestracji.
    Wyjatek listenera jest logowany i nie przerywa operacji ani reszty listenerow.
    """

    def __init__(self, clock: Clock = utcnow):
        self.clock = clock
        self._listeners: List[WebhookListener] = []

    @property
    def listeners(self) -> List[WebhookListener]:
        return list(self._listeners)

    def subscribe(self, listener: WebhookListener) -> None:
        self._listeners.append(listener)
        logger.info(f"Zarejestrowano listener webhookow {_listener_name(listener)}")

    def publish(self, event: WebhookEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as e:
                logger.error(
                    f"Listener webhookow {_listener_name(listener)} "
                    f"nie obsluzyl {event.event_type.value} {event.event_id}: {e}"
                )

    def emit(self, event_type: WebhookEventType, **data) -> WebhookEvent:
        """Buduje zdarzenie z biezacym czasem i publikuje je."""
        event = WebhookEvent(
            event_id=str(uuid.uuid4()),
            event_type=event_type,
            timestamp=self.clock(),
            data=WebhookEventData(**data),
        )
        self.publish(event)
        return event


def log_webhook_event(event: WebhookEvent) -> None:
    logger.info(f"[WEBHOOK] {event.model_dump_json(by_alias=True, exclude_none=True)}")
