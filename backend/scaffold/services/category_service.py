"""
Category Service Module

Provides business logic processing for Categories.
"""

from scaffold.common.errors import ConflictError
from scaffold.domain.category import Category
from scaffold.repositories.category_repo import CategoryRepository
from scaffold.services.base import BaseService


class CategoryService(BaseService[Category, int]):
    """
    Category Service

    Inherits CRUD and pagination from BaseService and enforces unique names.
    """

    def __init__(self, repo: CategoryRepository):
        """
        Initialize Service

        Args:
            repo: Category Repository
        """
        self.repo = repo

    def get_repo(self) -> CategoryRepository:
        return self.repo

    async def _check_name(self, entity: Category) -> None:
        """
        Raises:
            ConflictError: Name already used by another category
        """
        if not entity.name:
            return
        existing = await self.repo.get_by_name(entity.name)
        if existing and existing.id != entity.id:
            raise ConflictError(
                message=f"Category with name '{entity.name}' already exists",
                code="duplicate_name",
            )

    async def save(self, entity: Category) -> Category:
        await self._check_name(entity)
        return await super().save(entity)

    async def update(self, entity: Category) -> Category:
        await self._check_name(entity)
        return await super().update(entity)
