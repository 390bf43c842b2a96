"""
Service configuration.

Read from the environment once at import time.
"""

import os

SHOPCART_ENV = os.environ.get("SHOPCART_ENV", "development")

# Web sessions expire after this many hours (7 days by default)
SESSION_TTL_HOURS = int(os.environ.get("SESSION_TTL_HOURS", "168"))

# Optional JSON file with the product catalog: [{"id": 1, "name": ..., "price": ..., "stock": ...}]
CATALOG_PATH = os.environ.get("CATALOG_PATH", "")

# Comma-separated list of origins or "*"
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("ALLOWED_ORIGINS", "*").split(",")
    if origin.strip()
] or ["*"]

# Name of the cookie carrying the session token for browser clients
SESSION_COOKIE_NAME = "session"
