"""
Cart API Pydantic Models

Request bodies use the camelCase field names the shop frontend sends.
Ids and quantities must be JSON integers; ``true`` or ``"2"`` are not coerced.
"""
from pydantic import BaseModel, ConfigDict, Field, StrictInt


class CartItemRequest(BaseModel):
    """Body for POST /api/cart and PUT /api/cart."""
    model_config = ConfigDict(populate_by_name=True)

    product_id: StrictInt = Field(alias="productId")
    # Range checks happen in CartManager so the shopper gets the cart's own message
    quantity: StrictInt = 1


class RemoveCartItemRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: StrictInt = Field(alias="productId")


class LoginRequest(BaseModel):
    username: str = Field(min_length=1, max_length=64)
