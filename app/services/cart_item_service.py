import logging
import re

from app.core.errors import CartItemNotFound
from app.database import CartItemStore
from app.models.cart_item import CartItem
from app.repositories.cart_item_repo import CartItemRepository
from app.schemas.cart_item import CartItemCreate, CartItemFilters

logger = logging.getLogger(__name__)

GET_NOT_FOUND_MESSAGE = "ID Not Found"

# ASCII digits only: int() and float() also accept "1_0" and non-ASCII digits
INTEGER_RE = re.compile(r"[+-]?[0-9]+")
NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


class CartItemService:
    """
    Business logic for the cart item collection.

    Responsibilities:
      - parse raw query/path values (lenient, never raises on bad input)
      - compose listing filters conjunctively
      - assign ids on create, pin ids on replace
      - raise CartItemNotFound for unknown ids
    """

    def __init__(self, repo: CartItemRepository):
        self.repo = repo

    # ---- internal helpers ----

    @staticmethod
    def _parse_id(raw: str) -> int | None:
        """
        Path ids are integers; anything else matches no item.
        """
        if raw is None or not INTEGER_RE.fullmatch(raw.strip()):
            return None
        return int(raw.strip())

    @staticmethod
    def build_filters(
        max_price: str | None = None,
        prefix: str | None = None,
        page_size: str | None = None,
    ) -> CartItemFilters:
        """
        Turn raw query strings into CartItemFilters.

        - Empty or missing values are ignored.
        - A value that is not a number marks the filters invalid.
        - `page_size` is the `pageSize` query param; it is an exact
          quantity match, not a limit on the number of results.
        """
        filters = CartItemFilters()

        if max_price is not None and max_price.strip():
            if NUMBER_RE.fullmatch(max_price.strip()):
                filters.max_price = float(max_price)
            else:
                filters.valid = False

        if prefix is not None and prefix.strip():
            filters.prefix = prefix.strip().lower()

        if page_size is not None and page_size.strip():
            if INTEGER_RE.fullmatch(page_size.strip()):
                filters.exact_quantity = int(page_size)
            else:
                filters.valid = False

        return filters

    @staticmethod
    def _matches(item: CartItem, filters: CartItemFilters) -> bool:
        if filters.max_price is not None and not item.price <= filters.max_price:
            return False
        if filters.prefix is not None and not item.product.lower().startswith(filters.prefix):
            return False
        if filters.exact_quantity is not None and item.quantity != filters.exact_quantity:
            return False
        return True

    # ---- public operations ----

    def list_items(self, store: CartItemStore, filters: CartItemFilters) -> list[CartItem]:
        """
        Return the items passing every supplied filter, in insertion order.
        """
        if not filters.valid:
            return []
        return [it for it in self.repo.list_all(store) if self._matches(it, filters)]

    def get_item(self, store: CartItemStore, raw_id: str) -> CartItem:
        item_id = self._parse_id(raw_id)
        item = self.repo.get_by_id(store, item_id) if item_id is not None else None
        if item is None:
            logger.debug("Cart item %r not found", raw_id)
            raise CartItemNotFound(raw_id, GET_NOT_FOUND_MESSAGE)
        return item

    def create_item(self, store: CartItemStore, payload: CartItemCreate) -> CartItem:
        """
        Store a new item under the next counter value and return it.
        """
        item = self.repo.create(
            store,
            product=payload.product,
            price=payload.price,
            quantity=payload.quantity,
        )
        logger.info("Created cart item %d (%s)", item.id, item.product)
        return item

    def replace_item(
        self,
        store: CartItemStore,
        raw_id: str,
        payload: CartItemCreate,
    ) -> CartItem:
        """
        Full replacement of an item. The id always comes from the path.
        """
        item_id = self._parse_id(raw_id)
        replaced = None
        if item_id is not None:
            replaced = self.repo.replace(
                store,
                CartItem(
                    id=item_id,
                    product=payload.product,
                    price=payload.price,
                    quantity=payload.quantity,
                ),
            )
        if replaced is None:
            raise CartItemNotFound(raw_id, f"No item found with id: {raw_id}")
        logger.info("Replaced cart item %d", item_id)
        return replaced

    def delete_item(self, store: CartItemStore, raw_id: str) -> None:
        item_id = self._parse_id(raw_id)
        if item_id is None or not self.repo.delete(store, item_id):
            raise CartItemNotFound(raw_id, f"No item found with id: {raw_id}")
        logger.info("Deleted cart item %d", item_id)
