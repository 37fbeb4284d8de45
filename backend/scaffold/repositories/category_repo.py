"""
Category Repository Interface

Defines the data access interface for Categories.
"""

from abc import abstractmethod
from typing import Optional

from scaffold.domain.category import Category
from scaffold.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category, int]):
    """Category Repository Interface"""

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Category]:
        """Get Category by exact Name"""
        pass
