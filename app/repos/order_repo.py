# app/repos/order_repo.py
from typing import List

from app.data.store import KeyValueStore
from app.domain.schemas import Order


class OrderRepo:
    def __init__(self, store: KeyValueStore[Order]):
        self.store = store

    def create_order(self, order: Order) -> Order:
        self.store.put(order.order_id, order)
        return order

    def get_order(self, order_id: str) -> Order | None:
        return self.store.get(order_id)

    def save_order(self, order: Order) -> Order:
        self.store.put(order.order_id, order)
        return order

    def get_orders_by_customer(self, customer_id: str) -> List[Order]:
        return [o for o in self.store.values() if o.customer_id == customer_id]
