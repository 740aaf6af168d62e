# app/repos/product_repo.py
from typing import List

from app.data.store import KeyValueStore
from app.domain.schemas import Product


class ProductRepo:
    def __init__(self, store: KeyValueStore[Product]):
        self.store = store

    def get_product(self, product_id: str) -> Product | None:
        return self.store.get(product_id)

    def list_products(self) -> List[Product]:
        return self.store.values()

    def save_product(self, product: Product) -> Product:
        self.store.put(product.id, product)
        return product
