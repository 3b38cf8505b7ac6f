from app.database import CartItemStore
from app.models.cart_item import CartItem


class CartItemRepository:
    """
    Data access layer for CartItem.

    - Pure store operations, each one atomic under the store lock.
    - No FastAPI, no filtering logic.
    """

    def list_all(self, store: CartItemStore) -> list[CartItem]:
        with store.lock:
            return list(store.items)

    def get_by_id(self, store: CartItemStore, item_id: int) -> CartItem | None:
        with store.lock:
            return next((it for it in store.items if it.id == item_id), None)

    # CRUD
    def create(self, store: CartItemStore, product: str, price: float, quantity: int) -> CartItem:
        with store.lock:
            item = CartItem(
                id=store.next_id,
                product=product,
                price=price,
                quantity=quantity,
            )
            store.next_id += 1
            store.items.append(item)
            return item

    def replace(self, store: CartItemStore, item: CartItem) -> CartItem | None:
        """
        Overwrite the stored item with the same id, keeping its position.

        Returns None if no item has that id.
        """
        with store.lock:
            index = self._index_of(store, item.id)
            if index is None:
                return None
            store.items[index] = item
            return item

    def delete(self, store: CartItemStore, item_id: int) -> bool:
        with store.lock:
            index = self._index_of(store, item_id)
            if index is None:
                return False
            del store.items[index]
            return True

    @staticmethod
    def _index_of(store: CartItemStore, item_id: int) -> int | None:
        # caller holds store.lock
        for i, it in enumerate(store.items):
            if it.id == item_id:
                return i
        return None
