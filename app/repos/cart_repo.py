# app/repos/cart_repo.py
from app.data.store import KeyValueStore
from app.domain.schemas import Cart, CartLine


class CartRepo:
    def __init__(self, store: KeyValueStore[Cart]):
        self.store = store

    def get_cart(self, cart_id: str) -> Cart | None:
        return self.store.get(cart_id)

    def save_cart(self, cart: Cart) -> Cart:
        self.store.put(cart.id, cart)
        return cart

    def get_cart_item(self, cart: Cart, product_id: str) -> CartLine | None:
        return next((i for i in cart.items if i.product_id == product_id), None)

    def delete_cart_item(self, cart: Cart, product_id: str) -> bool:
        before = len(cart.items)
        cart.items = [i for i in cart.items if i.product_id != product_id]
        self.save_cart(cart)
        return len(cart.items) != before
