"""
SQLAlchemy Repository Implementation Module Initialization
"""

from scaffold.repositories.sqlalchemy.base import SQLAlchemyBaseRepository
from scaffold.repositories.sqlalchemy.category_repo import SQLAlchemyCategoryRepository

__all__ = [
    "SQLAlchemyBaseRepository",
    "SQLAlchemyCategoryRepository",
]
