"""
Cart Router

Shopping cart endpoints for the shop frontend.

Response format:
- ``cart``: list of lines ``{productId, productName, quantity, unitPrice, totalPrice}``
- ``subtotal``: sum of line totals
- ``itemCount``: number of units (header cart counter)

Errors are raised as ``CartError`` and rendered as ``{"message": ...}`` by the
application's exception handler.
"""
from typing import Optional

from fastapi import APIRouter, Depends

from shopcart.auth import get_session_token
from shopcart.cart import Cart, CartManager, get_cart_manager
from shopcart.errors import MESSAGE_ITEM_ADDED, MESSAGE_CHECKOUT_READY
from shopcart.services.money import to_float
from .models import CartItemRequest, RemoveCartItemRequest

router = APIRouter(tags=["cart"])


def _format_cart_lines(cart: Cart) -> list[dict]:
    return [
        {
            "productId": item.product_id,
            "productName": item.product_name,
            "quantity": item.quantity,
            "unitPrice": to_float(item.unit_price),
            "totalPrice": to_float(item.total_price),
        }
        for item in cart.items
    ]


def _format_cart_response(cart: Cart, message: Optional[str] = None) -> dict:
    response = {
        "cart": _format_cart_lines(cart),
        "subtotal": to_float(cart.subtotal),
        "itemCount": cart.total_items,
    }
    if message:
        response["message"] = message
    return response


@router.get("/cart")
async def get_cart(
    session_token: Optional[str] = Depends(get_session_token),
    cart_manager: CartManager = Depends(get_cart_manager),
):
    """Get the shopper's cart."""
    cart = await cart_manager.get_cart(session_token)
    return _format_cart_response(cart)


@router.post("/cart")
async def add_to_cart(
    request: CartItemRequest,
    session_token: Optional[str] = Depends(get_session_token),
    cart_manager: CartManager = Depends(get_cart_manager),
):
    """Add item to cart (increments the line if already present)."""
    cart = await cart_manager.add_item(session_token, request.product_id, request.quantity)
    return _format_cart_response(cart, MESSAGE_ITEM_ADDED)


@router.put("/cart")
async def update_cart_item(
    request: CartItemRequest,
    session_token: Optional[str] = Depends(get_session_token),
    cart_manager: CartManager = Depends(get_cart_manager),
):
    """Replace the quantity of a line in the cart."""
    cart = await cart_manager.update_item_quantity(session_token, request.product_id, request.quantity)
    return _format_cart_response(cart)


@router.delete("/cart")
async def remove_cart_item(
    request: RemoveCartItemRequest,
    session_token: Optional[str] = Depends(get_session_token),
    cart_manager: CartManager = Depends(get_cart_manager),
):
    """Remove item from cart (product id in the body)."""
    cart = await cart_manager.remove_item(session_token, request.product_id)
    return _format_cart_response(cart)


@router.delete("/cart/{product_id}")
async def remove_cart_item_by_path(
    product_id: int,
    session_token: Optional[str] = Depends(get_session_token),
    cart_manager: CartManager = Depends(get_cart_manager),
):
    """Remove item from cart (product id in the path)."""
    cart = await cart_manager.remove_item(session_token, product_id)
    return _format_cart_response(cart)


@router.post("/cart/clear")
async def clear_cart(
    session_token: Optional[str] = Depends(get_session_token),
    cart_manager: CartManager = Depends(get_cart_manager),
):
    """Empty the cart."""
    cart = await cart_manager.clear_cart(session_token)
    return _format_cart_response(cart)


@router.post("/cart/checkout")
async def checkout_cart(
    session_token: Optional[str] = Depends(get_session_token),
    cart_manager: CartManager = Depends(get_cart_manager),
):
    """Hand the cart's lines over to the checkout page and reset the cart."""
    cart = await cart_manager.checkout(session_token)
    return {
        "message": MESSAGE_CHECKOUT_READY,
        "items": _format_cart_lines(cart),
        "subtotal": to_float(cart.subtotal),
        "itemCount": cart.total_items,
    }
