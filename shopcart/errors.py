"""
Cart errors.

Message constants are shared by the service layer, the HTTP layer and the
tests, so the wording shown to shoppers lives in one place.
"""

# Session errors
ERROR_LOGIN_TO_ADD = "Please log in to add items to the cart"
ERROR_LOGIN_TO_VIEW = "Please log in to view the cart"
ERROR_INVALID_SESSION = "Invalid session token"

# Cart errors
ERROR_INVALID_QUANTITY = "Quantity must be at least 1"
ERROR_OUT_OF_STOCK = "Requested quantity not available"
ERROR_ITEM_NOT_IN_CART = "Item not found in the cart"
ERROR_CART_EMPTY = "Cart is empty"

# Product errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"

# Generic errors
ERROR_INVALID_REQUEST = "Invalid request"
ERROR_INTERNAL = "Internal server error"

# Confirmations
MESSAGE_ITEM_ADDED = "Item added to cart"
MESSAGE_CHECKOUT_READY = "Cart handed over to checkout"
MESSAGE_LOGGED_OUT = "Logged out"


class CartError(Exception):
    """Base class for request-local cart failures.

    Carries the HTTP status and the human-readable message the API returns
    as ``{"message": ...}``.
    """

    status_code = 400
    default_message = ERROR_INVALID_REQUEST

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidQuantity(CartError):
    """Quantity below 1 (or not an integer)."""

    status_code = 400
    default_message = ERROR_INVALID_QUANTITY


class OutOfStock(CartError):
    """Resulting line quantity exceeds available stock."""

    status_code = 400
    default_message = ERROR_OUT_OF_STOCK

    def __init__(self, message: str | None = None, *, requested: int = 0, available: int = 0):
        super().__init__(message)
        self.requested = requested
        self.available = available


class ItemNotFound(CartError):
    """Operation targets a product that is not in the cart."""

    status_code = 404
    default_message = ERROR_ITEM_NOT_IN_CART


class ProductNotFound(CartError):
    status_code = 404
    default_message = ERROR_PRODUCT_NOT_FOUND


class Unauthenticated(CartError):
    """No valid session supplied."""

    status_code = 401
    default_message = ERROR_LOGIN_TO_VIEW


class EmptyCart(CartError):
    status_code = 400
    default_message = ERROR_CART_EMPTY


__all__ = [
    "CartError",
    "InvalidQuantity",
    "OutOfStock",
    "ItemNotFound",
    "ProductNotFound",
    "Unauthenticated",
    "EmptyCart",
    "ERROR_LOGIN_TO_ADD",
    "ERROR_LOGIN_TO_VIEW",
    "ERROR_INVALID_SESSION",
    "ERROR_INVALID_QUANTITY",
    "ERROR_OUT_OF_STOCK",
    "ERROR_ITEM_NOT_IN_CART",
    "ERROR_CART_EMPTY",
    "ERROR_PRODUCT_NOT_FOUND",
    "ERROR_INVALID_REQUEST",
    "ERROR_INTERNAL",
    "MESSAGE_ITEM_ADDED",
    "MESSAGE_CHECKOUT_READY",
    "MESSAGE_LOGGED_OUT",
]
