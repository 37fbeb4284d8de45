"""
Data Access Layer Module Initialization
"""

from scaffold.repositories.base import BaseRepository
from scaffold.repositories.category_repo import CategoryRepository
from scaffold.repositories.specification import (
    Specification,
    condition_specification,
    name_like,
    status_equals,
)

__all__ = [
    "BaseRepository",
    "CategoryRepository",
    "Specification",
    "condition_specification",
    "name_like",
    "status_equals",
]
