"""
Category Repository SQLAlchemy Implementation
"""

from typing import Optional

from sqlalchemy import select

from scaffold.db.models import Category as CategoryORM
from scaffold.domain.category import Category
from scaffold.repositories.category_repo import CategoryRepository
from scaffold.repositories.sqlalchemy.base import SQLAlchemyBaseRepository


class SQLAlchemyCategoryRepository(SQLAlchemyBaseRepository[Category, int], CategoryRepository):
    """Category Repository SQLAlchemy Implementation"""

    orm_model = CategoryORM
    domain_model = Category

    async def get_by_name(self, name: str) -> Optional[Category]:
        """Get Category by Name"""
        result = await self.session.execute(
            select(CategoryORM).where(CategoryORM.name == name)
        )
        entity = result.scalar_one_or_none()
        return self._to_domain(entity) if entity else None
