"""
Unit tests for CartItemService and CartItemRepository against a bare store.
"""
import threading

import pytest

from app.core.errors import CartItemNotFound
from app.database import CartItemStore
from app.models.cart_item import CartItem
from app.repositories.cart_item_repo import CartItemRepository
from app.schemas.cart_item import CartItemCreate
from app.services.cart_item_service import CartItemService


@pytest.fixture
def service() -> CartItemService:
    return CartItemService(CartItemRepository())


def _ids(items: list[CartItem]) -> list[int]:
    return [it.id for it in items]


class TestBuildFilters:

    def test_no_values_gives_empty_filters(self, service):
        filters = service.build_filters()

        assert filters.max_price is None
        assert filters.prefix is None
        assert filters.exact_quantity is None
        assert filters.valid

    def test_values_are_parsed_and_normalised(self, service):
        filters = service.build_filters(max_price="5.5", prefix="  HaIr ", page_size="3")

        assert filters.max_price == 5.5
        assert filters.prefix == "hair"
        assert filters.exact_quantity == 3

    def test_blank_values_are_ignored(self, service):
        filters = service.build_filters(max_price="  ", prefix=" ", page_size="")

        assert filters.max_price is None
        assert filters.prefix is None
        assert filters.exact_quantity is None
        assert filters.valid

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_price": "abc"},
            {"max_price": "1_0"},
            {"max_price": "nan"},
            {"page_size": "1.5"},
            {"page_size": "2_0"},
            {"page_size": "٢٠"},
        ],
    )
    def test_unparseable_numbers_invalidate(self, service, kwargs):
        assert not service.build_filters(**kwargs).valid


class TestParseId:

    @pytest.mark.parametrize("raw, expected", [("3", 3), (" 3 ", 3), ("+3", 3), ("-1", -1)])
    def test_plain_integers(self, service, raw, expected):
        assert service._parse_id(raw) == expected

    @pytest.mark.parametrize("raw", ["0_3", "٣", "3.0", "", "abc", "0x3"])
    def test_everything_else_is_none(self, service, raw):
        assert service._parse_id(raw) is None


class TestListItems:

    def test_every_result_is_in_the_collection(self, service, store):
        everything = service.list_items(store, service.build_filters())

        for kwargs in (
            {"max_price": "7"},
            {"prefix": "l"},
            {"page_size": "1"},
            {"max_price": "6", "page_size": "1"},
            {"max_price": "0"},
        ):
            result = service.list_items(store, service.build_filters(**kwargs))
            assert all(item in everything for item in result)

    def test_max_price_scenario(self, service, store):
        result = service.list_items(store, service.build_filters(max_price="5"))

        assert _ids(result) == [2, 4]

    def test_listing_has_no_side_effects(self, service, store):
        service.list_items(store, service.build_filters(prefix="hair"))

        assert len(store) == 5
        assert store.next_id == 6

    def test_invalid_filters_match_nothing(self, service, store):
        assert service.list_items(store, service.build_filters(page_size="many")) == []


class TestMutations:

    def test_create_then_get(self, service, store):
        created = service.create_item(
            store, CartItemCreate(product="Soap", price=2, quantity=5)
        )

        assert created.id == 6
        assert service.get_item(store, "6") == created
        assert store.next_id == 7

    def test_get_unknown_raises(self, service, store):
        with pytest.raises(CartItemNotFound) as exc_info:
            service.get_item(store, "99")

        assert exc_info.value.message == "ID Not Found"
        assert exc_info.value.item_id == "99"

    def test_integer_price_stays_integer(self, service, store):
        created = service.create_item(
            store, CartItemCreate(product="Soap", price=2, quantity=5)
        )

        assert isinstance(created.price, int)
        assert isinstance(store.items[0].price, int)

    def test_replace_pins_id(self, service, store):
        replaced = service.replace_item(
            store, "3", CartItemCreate(product="Comb", price=2, quantity=2)
        )

        assert replaced.id == 3
        assert store.items[2].product == "Comb"

    def test_replace_non_numeric_id_raises(self, service, store):
        with pytest.raises(CartItemNotFound) as exc_info:
            service.replace_item(store, "x", CartItemCreate(product="Comb", price=2, quantity=2))

        assert exc_info.value.message == "No item found with id: x"

    def test_delete_then_get_raises(self, service, store):
        service.delete_item(store, "3")

        with pytest.raises(CartItemNotFound):
            service.get_item(store, "3")
        assert _ids(store.items) == [1, 2, 4, 5]

    def test_delete_unknown_leaves_store_untouched(self, service, store):
        before = list(store.items)

        with pytest.raises(CartItemNotFound):
            service.delete_item(store, "99")

        assert store.items == before


class TestStore:

    def test_empty_store_counter_starts_at_one(self, empty_store):
        assert len(empty_store) == 0
        assert empty_store.next_id == 1

    def test_counter_is_seeded_above_existing_ids(self):
        store = CartItemStore([CartItem(id=10, product="X", price=1, quantity=1)])

        assert store.next_id == 11

    def test_concurrent_creates_get_unique_ids(self, empty_store):
        repo = CartItemRepository()

        def worker():
            for _ in range(50):
                repo.create(empty_store, product="P", price=1, quantity=1)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ids = _ids(empty_store.items)
        assert len(ids) == 400
        assert len(set(ids)) == 400
        assert empty_store.next_id == 401
