"""Products Router - catalog lookups for product pages."""
from fastapi import APIRouter, Depends

from shopcart.errors import ProductNotFound
from shopcart.services.catalog import ProductCatalog, get_catalog
from shopcart.services.models import Product
from shopcart.services.money import to_float

router = APIRouter(tags=["products"])


def _format_product(product: Product) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "price": to_float(product.price),
        "stock": product.stock,
        "imageUrl": product.image_url,
    }


@router.get("/products")
async def list_products(catalog: ProductCatalog = Depends(get_catalog)):
    """List all products."""
    return [_format_product(p) for p in await catalog.get_all()]


@router.get("/products/{product_id}")
async def get_product(product_id: int, catalog: ProductCatalog = Depends(get_catalog)):
    """Get a single product."""
    product = await catalog.get_by_id(product_id)
    if product is None:
        raise ProductNotFound()
    return _format_product(product)
