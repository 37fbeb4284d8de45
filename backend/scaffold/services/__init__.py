"""
Service Layer Module Initialization
"""

from scaffold.services.base import BaseService
from scaffold.services.category_service import CategoryService

__all__ = [
    "BaseService",
    "CategoryService",
]
