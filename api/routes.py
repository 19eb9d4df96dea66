"""
REST API routes for the product catalog.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, status

from api.dependencies import get_catalog
from core.catalog import CatalogService
from utils.schemas import (
    MessageResponse,
    ProductList,
    ProductOut,
    ProductRequest,
    RateRequest,
)

router = APIRouter(tags=["products"])


@router.get("/")
async def welcome() -> Dict[str, Any]:
    return {"message": "Welcome to OnlineBk API!"}


@router.post(
    "/api/products",
    response_model=ProductOut,
    status_code=status.HTTP_201_CREATED,
)
async def create_product(
    req: ProductRequest,
    catalog: CatalogService = Depends(get_catalog),
) -> ProductOut:
    return await catalog.create(req)


@router.get("/api/products", response_model=ProductList)
async def list_products(
    hotel: Optional[str] = None,
    catalog: CatalogService = Depends(get_catalog),
) -> Dict[str, Any]:
    """All products, optionally filtered by hotel."""
    products = await catalog.list_products(hotel)
    return {"products": products, "count": len(products)}


@router.get("/api/best-deals", response_model=List[ProductOut])
async def best_deals(catalog: CatalogService = Depends(get_catalog)) -> List[ProductOut]:
    return await catalog.best_deals()


@router.get("/api/featured-products", response_model=List[ProductOut])
async def featured_products(catalog: CatalogService = Depends(get_catalog)) -> List[ProductOut]:
    return await catalog.featured()


@router.get("/api/products/category/{category}", response_model=List[ProductOut])
async def products_by_category(
    category: str,
    catalog: CatalogService = Depends(get_catalog),
) -> List[ProductOut]:
    return await catalog.by_category(category)


@router.get("/api/products/{product_id}", response_model=ProductOut)
async def get_product(
    product_id: str,
    catalog: CatalogService = Depends(get_catalog),
) -> ProductOut:
    return await catalog.get(product_id)


@router.put("/api/products/{product_id}", response_model=ProductOut)
async def update_product(
    product_id: str,
    req: ProductRequest,
    catalog: CatalogService = Depends(get_catalog),
) -> ProductOut:
    return await catalog.update(product_id, req)


@router.post("/api/products/{product_id}/rate", response_model=ProductOut)
async def rate_product(
    product_id: str,
    req: RateRequest,
    catalog: CatalogService = Depends(get_catalog),
) -> ProductOut:
    """Fold one 1–5 rating into the product's running average."""
    return await catalog.rate(product_id, req.new_rating)


@router.delete("/api/products/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: str,
    catalog: CatalogService = Depends(get_catalog),
) -> Dict[str, Any]:
    await catalog.delete(product_id)
    return {"message": "Product deleted successfully"}
