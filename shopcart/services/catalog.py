"""Product Catalog - in-memory product lookups for the cart."""
import json
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from shopcart.config import CATALOG_PATH
from shopcart.logging import get_logger
from .models import Product

logger = get_logger(__name__)

# Seed used when CATALOG_PATH is not configured
DEFAULT_PRODUCTS = [
    {"id": 1, "name": "Classic T-Shirt", "price": "10.00", "stock": 10},
    {"id": 2, "name": "Canvas Tote Bag", "price": "10.00", "stock": 10},
    {"id": 3, "name": "Ceramic Mug", "price": "7.50", "stock": 25},
]


class ProductCatalog:
    """Product lookups by id.

    Stock is modelled per product and is not reserved by carts; the cart
    only checks a line against the current stock level.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._products: Dict[int, Product] = {}
        for product in products or []:
            self._products[product.id] = product

    @classmethod
    def from_dicts(cls, rows: Iterable[dict]) -> "ProductCatalog":
        """Build a catalog from raw dicts (validated through Product)."""
        return cls(Product(**row) for row in rows)

    @classmethod
    def from_file(cls, path: str | Path) -> "ProductCatalog":
        """Load catalog from a JSON list of products."""
        with open(path, "r", encoding="utf-8") as f:
            rows = json.load(f)
        if not isinstance(rows, list):
            raise ValueError(f"Catalog file {path} must contain a JSON list")
        catalog = cls.from_dicts(rows)
        logger.info(f"Loaded {len(catalog)} products from {path}")
        return catalog

    def __len__(self) -> int:
        return len(self._products)

    async def get_all(self) -> List[Product]:
        """Get all products ordered by id."""
        return [self._products[pid] for pid in sorted(self._products)]

    async def get_by_id(self, product_id: int) -> Optional[Product]:
        """Get product by ID."""
        return self._products.get(product_id)

    async def set_stock(self, product_id: int, stock: int) -> Product:
        """Replace the available stock for a product."""
        if stock < 0:
            raise ValueError("stock must be a non-negative integer")
        product = self._products.get(product_id)
        if product is None:
            raise KeyError(product_id)
        updated = product.model_copy(update={"stock": stock})
        self._products[product_id] = updated
        return updated


# Singleton instance
_catalog: Optional[ProductCatalog] = None


def get_catalog() -> ProductCatalog:
    """Get ProductCatalog singleton (CATALOG_PATH or built-in seed)."""
    global _catalog
    if _catalog is None:
        if CATALOG_PATH:
            _catalog = ProductCatalog.from_file(CATALOG_PATH)
        else:
            _catalog = ProductCatalog.from_dicts(DEFAULT_PRODUCTS)
    return _catalog
