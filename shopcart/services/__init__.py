"""Services: product catalog and money helpers."""
from .catalog import ProductCatalog, get_catalog
from .models import Product

__all__ = [
    "Product",
    "ProductCatalog",
    "get_catalog",
]
