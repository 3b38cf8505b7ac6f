import threading

from fastapi import Request

from app.models.cart_item import CartItem

# ---------------------------------------------------------
# In-memory cart item store
#
# - items    : ordered list, insertion order is the listing order
# - next_id  : monotonically increasing, never reused after delete
# - lock     : guards every read-modify-write on items/next_id
#
# Reason:
# FastAPI runs sync endpoints in a thread pool, so two requests can
# touch the store at the same time. State is volatile and resets on
# restart.
# ---------------------------------------------------------

SAMPLE_ITEMS: list[dict] = [
    {"id": 1, "product": "Vaseline", "price": 7, "quantity": 4},
    {"id": 2, "product": "Water", "price": 3, "quantity": 20},
    {"id": 3, "product": "Hairbrush", "price": 6, "quantity": 1},
    {"id": 4, "product": "Toothpicks", "price": 1, "quantity": 1},
    {"id": 5, "product": "Lysol", "price": 30, "quantity": 20},
]


class CartItemStore:
    """
    Process-local collection of cart items plus the id counter.
    """

    def __init__(self, items: list[CartItem] | None = None):
        self.items: list[CartItem] = list(items or [])
        self.next_id: int = max((it.id for it in self.items), default=0) + 1
        self.lock = threading.Lock()

    def __len__(self) -> int:
        return len(self.items)


def create_store(seed: bool = True) -> CartItemStore:
    """
    Build a fresh store, optionally loaded with SAMPLE_ITEMS.

    This is called once on application startup (and once per test).
    """
    items = [CartItem(**row) for row in SAMPLE_ITEMS] if seed else []
    return CartItemStore(items)


def get_store(request: Request) -> CartItemStore:
    """
    FastAPI dependency that returns the store owned by the app.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(store: CartItemStore = Depends(get_store)):
            ...
    """
    return request.app.state.cart_item_store
