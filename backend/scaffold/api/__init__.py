"""
API Module Initialization
"""

from scaffold.api.categories import router as categories_router
from scaffold.api.crud import build_crud_router

__all__ = [
    "categories_router",
    "build_crud_router",
]
