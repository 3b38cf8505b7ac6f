from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


class CartItemBase(SQLModel):
    """
    Fields a client supplies for create/replace payloads.

    `price` keeps integers as integers so 6 is echoed back as 6, not 6.0.
    """

    product: str = Field(min_length=1, max_length=255)
    price: int | float
    quantity: int

    @field_validator("product")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("product cannot be empty")
        return v

    @field_validator("price")
    @classmethod
    def not_negative(cls, v: int | float) -> int | float:
        if v < 0:
            raise ValueError("price cannot be negative")
        return v


class CartItemCreate(CartItemBase):
    """
    Payload for POST and PUT.

    Unknown fields (including any client `id`) are ignored.
    """

    model_config = ConfigDict(extra="ignore")


class CartItemRead(SQLModel):
    """
    Cart item representation for clients, `id` first.
    """

    id: int
    product: str
    price: int | float
    quantity: int


class CartItemFilters(SQLModel):
    """
    Parsed listing filters. `None` means the filter is not applied.

    `valid` is False when a supplied value could not be parsed; such a
    filter matches no items.
    """

    max_price: float | None = None
    prefix: str | None = None
    # Sent as `pageSize` on the wire but compared against quantity.
    exact_quantity: int | None = None
    valid: bool = True
