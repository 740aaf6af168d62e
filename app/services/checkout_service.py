# app/services/checkout_service.py
import threading
import uuid
from datetime import timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List

from app.domain.enums import SessionStatus
from app.domain.errors import (
    InvalidInputError,
    InvalidStateError,
    NotFoundError,
    SessionExpiredError,
)
from app.domain.schemas import (
    Address,
    CheckoutItem,
    CheckoutResponse,
    CheckoutSession,
    Order,
)
from app.repos.session_repo import SessionRepo
from app.services.order_service import OrderService
from app.tasks.expire import SessionExpiryScheduler
from app.utils.clock import Clock, utcnow
from app.utils.settings import (
    CHECKOUT_SESSION_TTL_SECONDS,
    DEFAULT_CURRENCY,
    SHIPPING_COST,
    TAX_RATE,
    UCP_MERCHANT_ID,
)
from app.utils.logging import get_logger

logger = get_logger(__name__)

CENT = Decimal("0.01")

#stany z ktorych mozna zakonczyc checkout
COMPLETABLE = {SessionStatus.PENDING, SessionStatus.ACTIVE}


def to_cents(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


class CheckoutService:
    """
    Cykl zycia sesji checkout UCP.

    pending --complete--> completed
    pending --cancel----> cancelled
    pending --ttl-------> expired
    active  --complete--> completed

    Stany completed/cancelled/expired sa koncowe. Przejscia sa chronione lockiem,
    bo timer wygasania odpala sie na osobnym watku.
    """

    def __init__(
        self,
        repo: SessionRepo,
        orders: OrderService,
        scheduler: SessionExpiryScheduler,
        clock: Clock = utcnow,
        merchant_id: str = UCP_MERCHANT_ID,
        tax_rate: Decimal = TAX_RATE,
        shipping_cost: Decimal = SHIPPING_COST,
        ttl_seconds: int = CHECKOUT_SESSION_TTL_SECONDS,
    ):
        self.repo = repo
        self.orders = orders
        self.scheduler = scheduler
        self.clock = clock
        self.merchant_id = merchant_id
        self.tax_rate = tax_rate
        self.shipping_cost = shipping_cost
        self.ttl_seconds = ttl_seconds
        self._lock = threading.RLock()

    def _require_session(self, session_id: str) -> CheckoutSession:
        session = self.repo.get_session(session_id)
        if not session:
            raise NotFoundError("Checkout session not found")
        return session

    #query
    def get_session(self, session_id: str) -> CheckoutSession:
        return self._require_session(session_id)

    #commands
    def create_session(
        self,
        items: List[CheckoutItem],
        currency: str | None = None,
        metadata: Dict[str, Any] | None = None,
        return_url: str | None = None,
        cancel_url: str | None = None,
    ) -> CheckoutResponse:
        if not items:
            raise InvalidInputError("Checkout requires at least one item")

        subtotal = to_cents(sum((i.total_price for i in items), Decimal("0")))
        tax = to_cents(subtotal * self.tax_rate)
        shipping = to_cents(self.shipping_cost)
        total = to_cents(subtotal + tax + shipping)

        now = self.clock()
        session = CheckoutSession(
            session_id=str(uuid.uuid4()),
            merchant_id=self.merchant_id,
            status=SessionStatus.PENDING,
            #sesja trzyma wlasna kopie pozycji, nie referencje do koszyka
            cart_items=[i.model_copy(deep=True) for i in items],
            subtotal=subtotal,
            tax=tax,
            shipping=shipping,
            total=total,
            currency=currency or DEFAULT_CURRENCY,
            created_at=now,
            expires_at=now + timedelta(seconds=self.ttl_seconds),
            return_url=return_url,
            cancel_url=cancel_url,
            metadata=metadata,
        )
        self.repo.save_session(session)

        self.scheduler.schedule(session.session_id, self.ttl_seconds, self.expire_session)

        logger.info(
            f"Utworzono sesje checkout {session.session_id}, suma {total} "
            f"{session.currency}, wygasa {session.expires_at.isoformat()}"
        )

        return CheckoutResponse(
            session_id=session.session_id,
            checkout_url=f"/checkout/{session.session_id}",
            expires_at=session.expires_at,
        )

    def complete_checkout(
        self,
        session_id: str,
        customer_id: str | None = None,
        shipping_address: Address | None = None,
        billing_address: Address | None = None,
    ) -> Order:
        with self._lock:
            session = self._require_session(session_id)

            if session.status not in COMPLETABLE:
                raise InvalidStateError(
                    f"Cannot complete checkout in status: {session.status.value}"
                )

            if self.clock() > session.expires_at:
                session.status = SessionStatus.EXPIRED
                self.repo.save_session(session)
                self.scheduler.cancel(session_id)
                logger.info(f"Sesja checkout {session_id} wygasla przy probie zakonczenia")
                raise SessionExpiredError("Checkout session has expired")

            session.status = SessionStatus.COMPLETED
            self.repo.save_session(session)
            self.scheduler.cancel(session_id)

            logger.info(f"Sesja checkout {session_id} zakonczona")

            order = self.orders.place_order_from_session(
                session,
                customer_id=customer_id,
                shipping_address=shipping_address,
                billing_address=billing_address,
            )

        # listenery wolane juz poza lockiem
        self.orders.notify_order_created(order)
        return order

    def cancel_session(self, session_id: str) -> bool:
        """
        Nadpisuje status na cancelled, takze dla sesji w stanie koncowym.
        False tylko gdy sesja nie istnieje.
        """
        with self._lock:
            session = self.repo.get_session(session_id)
            if not session:
                return False

            session.status = SessionStatus.CANCELLED
            self.repo.save_session(session)
            self.scheduler.cancel(session_id)

        logger.info(f"Sesja checkout {session_id} anulowana")
        return True

    def expire_session(self, session_id: str) -> bool:
        # wolane z timera, sesja mogla zostac juz zakonczona albo anulowana
        with self._lock:
            session = self.repo.get_session(session_id)
            if not session or session.status != SessionStatus.PENDING:
                return False

            session.status = SessionStatus.EXPIRED
            self.repo.save_session(session)

        logger.info(f"Sesja checkout {session_id} wygasla")
        return True
