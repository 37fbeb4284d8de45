"""
Base Repository SQLAlchemy Implementation

Implements the generic CRUD and pagination operations once; concrete repositories
only bind the ORM class and the domain model.
"""

from typing import Any, Optional

from sqlalchemy import func, inspect, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from scaffold.common.errors import ConflictError
from scaffold.common.time import utc_now_naive
from scaffold.domain.entity import E, ID
from scaffold.domain.page import Page, PageRequest
from scaffold.repositories.base import BaseRepository
from scaffold.repositories.specification import Specification

# Columns maintained by the database layer, never taken from the caller
MANAGED_COLUMNS = frozenset({"id", "created_at", "updated_at"})


class SQLAlchemyBaseRepository(BaseRepository[E, ID]):
    """
    Base Repository SQLAlchemy Implementation

    Subclasses set:
        orm_model: SQLAlchemy mapped class (must provide id and name columns)
        domain_model: Pydantic model built from ORM rows (from_attributes=True)
    """

    orm_model: Any
    domain_model: type[E]

    def __init__(self, session: AsyncSession):
        """
        Initialize Repository

        Args:
            session: Async database session
        """
        self.session = session

    def _to_domain(self, entity: Any) -> E:
        """Convert ORM entity to domain model"""
        return self.domain_model.model_validate(entity)

    def _writable_columns(self) -> list[str]:
        return [
            attr.key
            for attr in inspect(self.orm_model).column_attrs
            if attr.key not in MANAGED_COLUMNS
        ]

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError(
                message=f"{self.orm_model.__name__} violates a uniqueness or integrity constraint",
                code="integrity_error",
                details={"reason": str(e.orig)},
            ) from e

    async def save(self, entity: E) -> E:
        """
        Insert, or replace every writable column of the row with the same ID

        An ID that matches no row is ignored and the entity is inserted with a
        generated ID.
        """
        columns = self._writable_columns()
        data = entity.model_dump(include=set(columns))

        row = None
        if entity.id is not None:
            row = await self.session.get(self.orm_model, entity.id)

        if row is None:
            # Leave unset columns to their ORM defaults; the database assigns the ID
            row = self.orm_model(**{k: v for k, v in data.items() if v is not None})
            self.session.add(row)
        else:
            for key in columns:
                setattr(row, key, data.get(key))
            row.updated_at = utc_now_naive()

        await self._commit()
        await self.session.refresh(row)
        return self._to_domain(row)

    async def save_and_flush(self, entity: E) -> E:
        """Save; every save is committed, so the change is already flushed"""
        return await self.save(entity)

    async def find_by_id(self, id: ID) -> Optional[E]:
        """Get entity by ID"""
        result = await self.session.execute(
            select(self.orm_model).where(self.orm_model.id == id)
        )
        entity = result.scalar_one_or_none()
        return self._to_domain(entity) if entity else None

    async def exists_by_id(self, id: ID) -> bool:
        result = await self.session.execute(
            select(self.orm_model.id).where(self.orm_model.id == id).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def find_all(self) -> list[E]:
        """Get all entities"""
        result = await self.session.execute(
            select(self.orm_model).order_by(self.orm_model.id.asc())
        )
        return [self._to_domain(e) for e in result.scalars().all()]

    async def find_page(
        self,
        page_request: PageRequest,
        specification: Optional[Specification] = None,
    ) -> Page[E]:
        """Get one page of entities"""
        # Build query
        query = select(self.orm_model)
        count_query = select(func.count()).select_from(self.orm_model)

        predicate = specification.to_predicate(self.orm_model) if specification else None
        if predicate is not None:
            query = query.where(predicate)
            count_query = count_query.where(predicate)

        # Get total count
        total_result = await self.session.execute(count_query)
        total = total_result.scalar() or 0

        # Pagination
        query = query.order_by(self.orm_model.id.asc())
        query = query.offset(page_request.offset).limit(page_request.size)

        result = await self.session.execute(query)
        entities = result.scalars().all()

        return Page(
            content=[self._to_domain(e) for e in entities],
            number=page_request.page,
            size=page_request.size,
            total_elements=total,
        )

    async def find_all_by_name_like(self, pattern: str) -> list[E]:
        result = await self.session.execute(
            select(self.orm_model)
            .where(self.orm_model.name.like(pattern))
            .order_by(self.orm_model.id.asc())
        )
        return [self._to_domain(e) for e in result.scalars().all()]

    async def count(self, specification: Optional[Specification] = None) -> int:
        query = select(func.count()).select_from(self.orm_model)
        predicate = specification.to_predicate(self.orm_model) if specification else None
        if predicate is not None:
            query = query.where(predicate)
        result = await self.session.execute(query)
        return result.scalar() or 0

    async def delete_by_id(self, id: ID) -> bool:
        """Delete entity by ID"""
        result = await self.session.execute(
            select(self.orm_model).where(self.orm_model.id == id)
        )
        entity = result.scalar_one_or_none()

        if not entity:
            return False

        await self.session.delete(entity)
        await self._commit()
        return True

    async def delete(self, entity: E) -> bool:
        if entity.id is None:
            return False
        return await self.delete_by_id(entity.id)

    async def flush(self) -> None:
        await self.session.flush()
