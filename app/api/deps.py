# app/api/deps.py
from dataclasses import dataclass

from fastapi import Request

from app.data.seed import seed_catalog
from app.data.store import InMemoryStore
from app.repos.cart_repo import CartRepo
from app.repos.order_repo import OrderRepo
from app.repos.product_repo import ProductRepo
from app.repos.session_repo import SessionRepo
from app.services.cart_service import CartService
from app.services.catalog_service import CatalogService
from app.services.checkout_service import CheckoutService
from app.services.order_service import OrderService
from app.services.webhook_client import HttpWebhookForwarder
from app.services.webhook_service import WebhookDispatcher, log_webhook_event
from app.tasks.expire import SessionExpiryScheduler
from app.utils.clock import Clock, utcnow
from app.utils.settings import UCP_WEBHOOK_FORWARD_URL


@dataclass
class Services:
    catalog: CatalogService
    carts: CartService
    checkout: CheckoutService
    orders: OrderService
    webhooks: WebhookDispatcher
    scheduler: SessionExpiryScheduler


def build_services(
    clock: Clock = utcnow,
    scheduler: SessionExpiryScheduler | None = None,
    seed: bool = True,
    forward_url: str | None = UCP_WEBHOOK_FORWARD_URL,
) -> Services:
    """Sklada serwisy na magazynach w pamieci, jeden zestaw na aplikacje."""
    products = ProductRepo(InMemoryStore())
    if seed:
        seed_catalog(products.store)

    scheduler = scheduler or SessionExpiryScheduler()
    webhooks = WebhookDispatcher(clock=clock)
    # listener logujacy zawsze, forwarder HTTP tylko gdy jest skonfigurowany URL
    webhooks.subscribe(log_webhook_event)
    if forward_url:
        webhooks.subscribe(HttpWebhookForwarder(forward_url))
    catalog = CatalogService(products, clock=clock)
    carts = CartService(CartRepo(InMemoryStore()), catalog, clock=clock)
    orders = OrderService(OrderRepo(InMemoryStore()), catalog, webhooks, clock=clock)
    checkout = CheckoutService(SessionRepo(InMemoryStore()), orders, scheduler, clock=clock)

    return Services(
        catalog=catalog,
        carts=carts,
        checkout=checkout,
        orders=orders,
        webhooks=webhooks,
        scheduler=scheduler,
    )


def get_services(request: Request) -> Services:
    return request.app.state.services
