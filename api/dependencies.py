"""
FastAPI dependencies (shared across routes).
"""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from core.catalog import CatalogService
from database.products import ProductStore
from database.session import get_db_session


async def get_catalog(session: AsyncSession = Depends(get_db_session)) -> CatalogService:
    """Catalog service bound to the request's DB session."""
    return CatalogService(ProductStore(session))
