import pytest

from app.data.seed import PRODUCTS, seed_catalog
from app.data.store import InMemoryStore
from app.domain.enums import ProductCategory
from app.domain.errors import NotFoundError


def ids(products):
    return [p.id for p in products]


class TestListProducts:
    def test_lists_only_in_stock_products(self, services):
        assert ids(services.catalog.list_products()) == ["P1", "P2"]

    def test_search_is_case_insensitive_across_fields(self, services):
        catalog = services.catalog
        assert ids(catalog.list_products(search="ACAI")) == ["P1"]
        assert ids(catalog.list_products(search="oat milk")) == ["P2"]
        assert ids(catalog.list_products(search="bestSeller")) == ["P1"]
        assert ids(catalog.list_products(search="granola")) == ["P1"]

    def test_search_never_returns_out_of_stock_products(self, services):
        assert services.catalog.list_products(search="nut granola") == []

    def test_filter_by_category(self, services):
        result = services.catalog.list_products(category=ProductCategory.BEVERAGES)
        assert ids(result) == ["P2"]

    def test_filter_by_tags_matches_any_tag(self, services):
        result = services.catalog.list_products(tags=["caffeine", "bestseller"])
        assert ids(result) == ["P1", "P2"]

    def test_search_takes_precedence_over_category(self, services):
        result = services.catalog.list_products(
            search="matcha", category=ProductCategory.SMOOTHIE_BOWL
        )
        assert ids(result) == ["P2"]


class TestProductLookup:
    def test_get_product(self, services):
        assert services.catalog.get_product("P1").name == "Acai Bowl"

    def test_missing_product_raises_not_found(self, services):
        with pytest.raises(NotFoundError):
            services.catalog.get_product("nope")

    @pytest.mark.parametrize(
        "product_id, quantity, expected",
        [("P1", 5, True), ("P1", 6, False), ("P3", 1, False), ("nope", 1, False)],
    )
    def test_check_availability(self, services, product_id, quantity, expected):
        assert services.catalog.check_availability(product_id, quantity) is expected


class TestAdjustStock:
    def test_consumption_decrements_stock(self, services, clock):
        clock.advance(minutes=5)
        assert services.catalog.adjust_stock("P1", 2) is True

        product = services.catalog.get_product("P1")
        assert product.stock_quantity == 3
        assert product.in_stock is True
        assert product.updated_at == clock.now

    def test_stock_is_clamped_at_zero(self, services):
        services.catalog.adjust_stock("P1", 50)

        product = services.catalog.get_product("P1")
        assert product.stock_quantity == 0
        assert product.in_stock is False

    def test_negative_delta_restocks(self, services):
        services.catalog.adjust_stock("P3", -4)

        product = services.catalog.get_product("P3")
        assert product.stock_quantity == 4
        assert product.in_stock is True

    def test_missing_product_is_ignored(self, services):
        assert services.catalog.adjust_stock("nope", 1) is False


class TestSeedCatalog:
    def test_seed_covers_every_category(self):
        store = InMemoryStore()
        seed_catalog(store)

        assert len(store) == len(PRODUCTS)
        assert {p.category for p in store.values()} == set(ProductCategory)
        assert all(p.in_stock == (p.stock_quantity > 0) for p in store.values())

    def test_seed_does_not_overwrite_existing_data(self, services):
        store = services.catalog.repo.store
        seed_catalog(store)
        assert len(store) == 3
