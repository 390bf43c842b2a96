"""Cart package: models, storage, and manager facade."""
from .models import CartItem, Cart
from .storage import CartStorage
from .service import CartManager, get_cart_manager

__all__ = [
    "CartItem",
    "Cart",
    "CartStorage",
    "CartManager",
    "get_cart_manager",
]
