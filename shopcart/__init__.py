"""
Shopcart Core Package

Per-session shopping cart service for the online shop:
- cart: cart models, in-memory storage and the CartManager facade
- auth: opaque session tokens
- services: product catalog and money helpers
- routers: FastAPI routers for /api/cart, /api/session, /api/products
"""

__version__ = "1.0.0"
