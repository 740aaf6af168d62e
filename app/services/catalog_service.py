# app/services/catalog_service.py
from typing import List

from app.domain.enums import ProductCategory
from app.domain.errors import NotFoundError
from app.domain.schemas import Product
from app.repos.product_repo import ProductRepo
from app.utils.clock import Clock, utcnow
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CatalogService:
    """
    Katalog produktow. Jedyny wlasciciel stanow magazynowych,
    koszyk i checkout tylko odwoluja sie do product_id.
    """

    def __init__(self, repo: ProductRepo, clock: Clock = utcnow):
        self.repo = repo
        self.clock = clock

    #query
    def list_products(
        self,
        category: ProductCategory | None = None,
        search: str | None = None,
        tags: List[str] | None = None,
    ) -> List[Product]:
        products = [p for p in self.repo.list_products() if p.in_stock]

        #dziala tylko jeden filtr: search > category > tags
        if search:
            term = search.lower()
            return [p for p in products if self._matches(p, term)]
        if category:
            return [p for p in products if p.category == category]
        if tags:
            wanted = set(tags)
            return [p for p in products if wanted.intersection(p.tags)]
        return products

    @staticmethod
    def _matches(product: Product, term: str) -> bool:
        return (
            term in product.name.lower()
            or term in product.description.lower()
            or any(term in tag.lower() for tag in product.tags)
            or any(term in ing.lower() for ing in product.ingredients)
        )

    def find_product(self, product_id: str) -> Product | None:
        return self.repo.get_product(product_id)

    def get_product(self, product_id: str) -> Product:
        product = self.find_product(product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product

    def check_availability(self, product_id: str, quantity: int) -> bool:
        product = self.find_product(product_id)
        if not product:
            return False
        return product.in_stock and product.stock_quantity >= quantity

    #commands
    def adjust_stock(self, product_id: str, delta: int) -> bool:
        """
        Odejmuje delta od stanu (ujemna delta = zwrot na magazyn).
        Stan nigdy nie schodzi ponizej 0, brak produktu to False a nie wyjatek.
        """
        product = self.repo.get_product(product_id)
        if not product:
            logger.warning(f"Pominieto korekte stanu, brak produktu {product_id}")
            return False

        before = product.stock_quantity
        product.stock_quantity = max(before - delta, 0)
        product.in_stock = product.stock_quantity > 0
        product.updated_at = self.clock()
        self.repo.save_product(product)

        logger.info(f"Stan magazynowy {product_id}: {before} -> {product.stock_quantity}")
        return True
