"""
Database Module Initialization
"""

from scaffold.db.session import get_db, init_db, AsyncSessionLocal
from scaffold.db.models import Base, BaseEntityMixin, Category

__all__ = [
    "get_db",
    "init_db",
    "AsyncSessionLocal",
    "Base",
    "BaseEntityMixin",
    "Category",
]
