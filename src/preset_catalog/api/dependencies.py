"""
Preset Catalog API Dependencies
Per-request store session and catalog service
"""

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..database.connection import database_manager
from ..services.catalog_service import CatalogService


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """One session per request; repositories commit their own writes"""
    async with database_manager.get_session() as session:
        yield session


def get_catalog_service(session: AsyncSession = Depends(get_session)) -> CatalogService:
    return CatalogService(session)
