# app/services/cart_service.py
import uuid
from decimal import Decimal
from typing import List

from app.domain.errors import InvalidInputError, NotFoundError, UnavailableError
from app.domain.schemas import Cart, CartLine, CartSnapshot, CheckoutItem, PricedCartItem
from app.repos.cart_repo import CartRepo
from app.services.catalog_service import CatalogService
from app.utils.clock import Clock, utcnow
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Prosta implementacja cqrs dla domeny cart
    commands (create, add, set, remove, clear) modyfikuja stan
    query (price_snapshot) tylko odczyt, ceny zawsze aktualne z katalogu
    """

    def __init__(self, repo: CartRepo, catalog: CatalogService, clock: Clock = utcnow):
        self.repo = repo
        self.catalog = catalog
        self.clock = clock

    def _require_cart(self, cart_id: str) -> Cart:
        cart = self.repo.get_cart(cart_id)
        if not cart:
            raise NotFoundError("Cart not found")
        return cart

    #query - odczyt
    def get_cart(self, cart_id: str) -> Cart:
        return self._require_cart(cart_id)

    def price_snapshot(self, cart_id: str) -> CartSnapshot:
        cart = self._require_cart(cart_id)

        items: List[PricedCartItem] = []
        for line in cart.items:
            product = self.catalog.find_product(line.product_id)
            #produkt zniknal z katalogu, pomijamy pozycje
            if not product:
                continue
            items.append(
                PricedCartItem(
                    product_id=line.product_id,
                    product=product,
                    quantity=line.quantity,
                    unit_price=product.price,
                    total_price=product.price * line.quantity,
                    added_at=line.added_at,
                )
            )

        return CartSnapshot(
            cart=cart,
            items=items,
            subtotal=sum((i.total_price for i in items), Decimal("0.00")),
            item_count=sum(i.quantity for i in items),
        )

    def checkout_items(self, cart_id: str) -> List[CheckoutItem]:
        """Zamienia wyceniony koszyk na pozycje sesji checkout."""
        snapshot = self.price_snapshot(cart_id)
        return [
            CheckoutItem(
                product_id=i.product_id,
                name=i.product.name,
                description=i.product.description,
                quantity=i.quantity,
                unit_price=i.unit_price,
                total_price=i.total_price,
                image_url=i.product.image_url,
                metadata={
                    "category": i.product.category.value,
                    "tags": list(i.product.tags),
                },
            )
            for i in snapshot.items
        ]

    #commands
    def create_cart(self, user_id: str | None = None) -> Cart:
        now = self.clock()
        cart = Cart(
            id=str(uuid.uuid4()),
            user_id=user_id,
            items=[],
            created_at=now,
            updated_at=now,
        )
        created = self.repo.save_cart(cart)
        logger.info(f"Utworzono nowy koszyk {created.id} dla uzytkownika {user_id}")
        return created

    def add_item(self, cart_id: str, product_id: str, quantity: int) -> Cart:
        if quantity <= 0:
            raise InvalidInputError("Quantity must be greater than 0")

        cart = self._require_cart(cart_id)
        self.catalog.get_product(product_id)

        existing_item = self.repo.get_cart_item(cart, product_id)
        wanted = quantity + (existing_item.quantity if existing_item else 0)

        #sprawdzamy laczna ilosc w koszyku, nie tylko dokladana
        if not self.catalog.check_availability(product_id, wanted):
            raise UnavailableError("Product not available in requested quantity")

        now = self.clock()
        if existing_item:
            logger.info(
                f"Produkt {product_id} jest juz w koszyku {cart_id}, "
                f"ilosc {existing_item.quantity} -> {wanted}"
            )
            existing_item.quantity = wanted
        else:
            logger.info(f"Dodaje nowy produkt {product_id} do koszyka {cart_id}")
            cart.items.append(CartLine(product_id=product_id, quantity=quantity, added_at=now))

        cart.updated_at = now
        return self.repo.save_cart(cart)

    def set_quantity(self, cart_id: str, product_id: str, quantity: int) -> Cart:
        cart = self._require_cart(cart_id)

        item = self.repo.get_cart_item(cart, product_id)
        if not item:
            raise NotFoundError("Cart item not found")

        if quantity <= 0:
            return self.remove_item(cart_id, product_id)

        if not self.catalog.check_availability(product_id, quantity):
            raise UnavailableError("Product not available in requested quantity")

        item.quantity = quantity
        cart.updated_at = self.clock()
        return self.repo.save_cart(cart)

    def remove_item(self, cart_id: str, product_id: str) -> Cart:
        cart = self._require_cart(cart_id)

        if self.repo.delete_cart_item(cart, product_id):
            logger.info(f"Usunieto produkt {product_id} z koszyka {cart_id}")

        cart.updated_at = self.clock()
        return self.repo.save_cart(cart)

    def clear_cart(self, cart_id: str) -> Cart:
        cart = self._require_cart(cart_id)
        cart.items = []
        cart.updated_at = self.clock()
        logger.info(f"Wyczyszczono koszyk {cart_id}")
        return self.repo.save_cart(cart)
