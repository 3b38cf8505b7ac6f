from fastapi import APIRouter, Depends, Query, Response, status

from app.database import CartItemStore, get_store
from app.repositories.cart_item_repo import CartItemRepository
from app.schemas.cart_item import CartItemCreate, CartItemRead
from app.services.cart_item_service import CartItemService

router = APIRouter(prefix="/cart-items", tags=["Cart Items"])

repo = CartItemRepository()
service = CartItemService(repo)


@router.get("", response_model=list[CartItemRead])
def list_cart_items(
    store: CartItemStore = Depends(get_store),
    max_price: str | None = Query(default=None, alias="maxPrice"),
    prefix: str | None = None,
    page_size: str | None = Query(default=None, alias="pageSize"),
):
    """
    List cart items.

    - `maxPrice`: only items at or below this price.
    - `prefix`: only items whose product starts with it (case-insensitive).
    - `pageSize`: only items whose quantity equals it exactly.

    Filters combine; none given returns the whole collection.
    """
    filters = service.build_filters(max_price=max_price, prefix=prefix, page_size=page_size)
    return service.list_items(store, filters)


@router.get("/{item_id}", response_model=CartItemRead)
def get_cart_item(
    item_id: str,
    store: CartItemStore = Depends(get_store),
):
    """
    Get a single cart item by id.

    Unknown or non-numeric ids => 404 "ID Not Found".
    """
    return service.get_item(store, item_id)


@router.post(
    "",
    response_model=CartItemRead,
    status_code=status.HTTP_201_CREATED,
)
def create_cart_item(
    payload: CartItemCreate,
    store: CartItemStore = Depends(get_store),
):
    """
    Add a cart item. The id is assigned by the server.
    """
    return service.create_item(store, payload)


@router.put("/{item_id}", response_model=CartItemRead)
def replace_cart_item(
    item_id: str,
    payload: CartItemCreate,
    store: CartItemStore = Depends(get_store),
):
    """
    Replace a cart item with the request body, keeping the path id.
    """
    return service.replace_item(store, item_id, payload)


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_cart_item(
    item_id: str,
    store: CartItemStore = Depends(get_store),
):
    """
    Delete a cart item.
    """
    service.delete_item(store, item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
