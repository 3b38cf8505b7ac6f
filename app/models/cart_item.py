from pydantic import field_validator
from sqlmodel import SQLModel, Field


class CartItem(SQLModel):
    """
    A single cart item held in the in-memory store.

    `id` is assigned by the store and never taken from the client.
    """

    id: int = Field(description="Assigned from the store counter")
    product: str
    price: int | float
    quantity: int

    @field_validator("price")
    @classmethod
    def not_negative(cls, v: int | float) -> int | float:
        if v < 0:
            raise ValueError("price cannot be negative")
        return v
