"""
API Dependency Injection Module

Provides the dependencies required by FastAPI routes.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from scaffold.db.session import get_db as _get_db
from scaffold.repositories.sqlalchemy import SQLAlchemyCategoryRepository
from scaffold.services import CategoryService


async def get_db():
    """
    Get database session dependency

    Yields:
        AsyncSession: Async database session
    """
    async for session in _get_db():
        yield session


# Database session dependency type
DbSession = Annotated[AsyncSession, Depends(get_db)]


# ============ Service Dependencies ============

def get_category_service(db: DbSession) -> CategoryService:
    """Get Category Service"""
    return CategoryService(SQLAlchemyCategoryRepository(db))
