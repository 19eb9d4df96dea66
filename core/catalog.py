"""
Catalog service — product validation, lookups and rating aggregation.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from database.models import Product
from database.products import ProductStore
from utils.errors import NotFoundError, ValidationError
from utils.schemas import ProductOut, ProductRequest, Rating
from utils.validators import INVALID_TEXT, require_fields, require_text, validate_rating

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "Product not found"
REQUIRED_FIELDS = "Name, price, category, and description are required"

_OPTIONAL_FIELDS = ("img_url", "hotel", "is_featured", "is_best_deal")


def running_average(average: float, count: int, new_value: float) -> tuple[float, int]:
    """Fold ``new_value`` into an average taken over ``count`` samples."""
    new_count = count + 1
    return (average * count + new_value) / new_count, new_count


def product_view(product: Product) -> ProductOut:
    return ProductOut(
        id=str(product.product_id),
        name=product.name,
        price=product.price,
        category=product.category,
        description=product.description or "",
        img_url=product.img_url or "",
        hotel=product.hotel or "",
        is_featured=bool(product.is_featured),
        is_best_deal=bool(product.is_best_deal),
        rating=Rating(
            average_rating=product.average_rating or 0.0,
            number_of_ratings=product.number_of_ratings or 0,
        ),
    )


class CatalogService:
    def __init__(self, store: ProductStore) -> None:
        self.store = store

    @staticmethod
    def _fields(req: ProductRequest, message: str) -> Dict[str, Any]:
        require_fields((req.name, req.price, req.category, req.description), message)
        if req.price <= 0:
            raise ValidationError(message)
        require_text(
            (req.name, req.category, req.description, req.img_url, req.hotel),
            INVALID_TEXT,
        )

        fields: Dict[str, Any] = {
            "name": req.name,
            "price": req.price,
            "category": req.category,
            "description": req.description,
        }
        for attr in _OPTIONAL_FIELDS:
            value = getattr(req, attr)
            if value is not None:
                fields[attr] = value
        return fields

    async def create(self, req: ProductRequest) -> ProductOut:
        fields = {
            "img_url": "",
            "hotel": "",
            "is_featured": False,
            "is_best_deal": False,
            "average_rating": 0.0,
            "number_of_ratings": 0,
        }
        fields.update(self._fields(req, REQUIRED_FIELDS))
        product = await self.store.insert(fields)
        logger.info("Created product %s (%s)", product.product_id, product.name)
        return product_view(product)

    async def list_products(self, hotel: Optional[str] = None) -> List[ProductOut]:
        filters = {"hotel": hotel} if hotel else {}
        return [product_view(p) for p in await self.store.find(**filters)]

    async def best_deals(self) -> List[ProductOut]:
        return [product_view(p) for p in await self.store.find(is_best_deal=True)]

    async def featured(self) -> List[ProductOut]:
        return [product_view(p) for p in await self.store.find(is_featured=True)]

    async def by_category(self, category: str) -> List[ProductOut]:
        products = await self.store.find(category=category)
        if not products:
            raise NotFoundError(f"No products found for category: {category}")
        return [product_view(p) for p in products]

    async def get(self, product_id: str) -> ProductOut:
        product = await self.store.get(product_id)
        if product is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        return product_view(product)

    async def update(self, product_id: str, req: ProductRequest) -> ProductOut:
        fields = self._fields(req, f"{REQUIRED_FIELDS} for update")
        product = await self.store.update(product_id, fields)
        if product is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        return product_view(product)

    async def rate(self, product_id: str, new_rating: Any) -> ProductOut:
        rating = validate_rating(new_rating)
        product = await self.store.get(product_id, for_update=True)
        if product is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)

        product.average_rating, product.number_of_ratings = running_average(
            product.average_rating or 0.0,
            product.number_of_ratings or 0,
            rating,
        )
        await self.store.save(product)
        return product_view(product)

    async def delete(self, product_id: str) -> None:
        if not await self.store.delete(product_id):
            raise NotFoundError(PRODUCT_NOT_FOUND)
        logger.info("Deleted product %s", product_id)
