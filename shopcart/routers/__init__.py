"""API Routers.

Combines the cart, session and product routers under the /api prefix.
"""

from fastapi import APIRouter

from .cart import router as cart_router
from .products import router as products_router
from .session import router as session_router

router = APIRouter(prefix="/api")

router.include_router(session_router)
router.include_router(products_router)
router.include_router(cart_router)

__all__ = ["router"]
