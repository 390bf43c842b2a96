"""Catalog Models - Pydantic models for shop entities."""
from decimal import Decimal, InvalidOperation
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class Product(BaseModel):
    """Product model."""
    id: int
    name: str
    description: Optional[str] = None
    price: Decimal = Field(ge=0)
    stock: int = Field(0, ge=0)  # Units available across all carts
    image_url: Optional[str] = None

    model_config = {"extra": "ignore"}

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        # Strict: a malformed price must fail the row, never load as 0
        if isinstance(v, Decimal):
            return v
        if v is None or isinstance(v, bool):
            raise ValueError("price is required")
        try:
            return Decimal(str(v))
        except InvalidOperation as e:
            raise ValueError(f"invalid price: {v!r}") from e
