"""
Product store — find / insert / update / delete by filter.
"""

from __future__ import annotations

import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Product


def _to_uuid(value: str | uuid.UUID) -> Optional[uuid.UUID]:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(value)
    except ValueError:
        return None


class ProductStore:
    """Product rows; every write commits before returning."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find(self, **filters: Any) -> List[Product]:
        """Return every product whose columns equal ``filters``."""
        stmt = select(Product).filter_by(**filters).order_by(Product.name.asc())
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def get(self, product_id: str | uuid.UUID, *, for_update: bool = False) -> Optional[Product]:
        pid = _to_uuid(product_id)
        if pid is None:
            return None
        stmt = select(Product).where(Product.product_id == pid)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def insert(self, fields: Dict[str, Any]) -> Product:
        product = Product(**fields)
        self._session.add(product)
        await self._session.commit()
        return product

    async def save(self, product: Product) -> Product:
        await self._session.commit()
        return product

    async def update(self, product_id: str | uuid.UUID, fields: Dict[str, Any]) -> Optional[Product]:
        product = await self.get(product_id, for_update=True)
        if product is None:
            return None
        for key, value in fields.items():
            setattr(product, key, value)
        await self._session.commit()
        return product

    async def delete(self, product_id: str | uuid.UUID) -> bool:
        product = await self.get(product_id)
        if product is None:
            return False
        await self._session.delete(product)
        await self._session.commit()
        return True
