"""
Base Service Module

Provides the CRUD and conditional pagination operations shared by every entity service.
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, Optional

from scaffold.domain.entity import E, ID
from scaffold.domain.page import Page, PageBean, PageRequest, PageVO
from scaffold.repositories.base import BaseRepository
from scaffold.repositories.specification import Specification, condition_specification

logger = logging.getLogger(__name__)


class BaseService(ABC, Generic[E, ID]):
    """
    Base Service

    Concrete services only provide the repository through get_repo(); every
    operation below delegates to it.
    """

    @abstractmethod
    def get_repo(self) -> BaseRepository[E, ID]:
        """Return the repository backing this service"""
        pass

    def _entity_name(self, entity: object) -> str:
        return type(entity).__name__

    async def save(self, entity: E) -> E:
        """
        Add an entity

        Args:
            entity: Entity to persist; an existing ID replaces that row

        Returns:
            E: Persisted entity with its generated ID
        """
        saved = await self.get_repo().save(entity)
        logger.info("Saved %s: id=%s", self._entity_name(saved), saved.id)
        return saved

    async def delete_by_id(self, id: ID) -> None:
        """
        Delete by ID

        Missing IDs are ignored.
        """
        repo = self.get_repo()
        if await repo.exists_by_id(id):
            await repo.delete_by_id(id)
            logger.info("Deleted entity via %s: id=%s", type(self).__name__, id)

    async def delete(self, entity: E) -> None:
        """Delete the stored row of the given entity"""
        deleted = await self.get_repo().delete(entity)
        if deleted:
            logger.info("Deleted %s: id=%s", self._entity_name(entity), entity.id)

    async def update(self, entity: E) -> E:
        """
        Update an entity

        This is a replacement, not a patch: fields left unset on `entity` are
        stored as their defaults.

        Args:
            entity: Complete new state of the entity

        Returns:
            E: Stored entity
        """
        updated = await self.get_repo().save_and_flush(entity)
        logger.info("Updated %s: id=%s", self._entity_name(updated), updated.id)
        return updated

    async def find_all(self) -> list[E]:
        """Get all entities"""
        return await self.get_repo().find_all()

    async def find_by_condition(
        self,
        page_vo: Optional[PageVO] = None,
        condition: Optional[E] = None,
    ) -> PageBean[E]:
        """
        Conditional query with pagination

        Args:
            page_vo: Page to return, defaults to the first page of 10
            condition: Entity whose name (LIKE %name%) and status (exact)
                fields filter the result; None returns every entity

        Returns:
            PageBean[E]: Requested page
        """
        if page_vo is None:
            page_vo = PageVO()

        page_request = page_vo.to_page_request()

        if condition is None:
            return self.page_to_page_bean(await self.get_repo().find_page(page_request))

        page = await self.get_repo().find_page(
            page_request, condition_specification(condition)
        )
        return self.page_to_page_bean(page)

    def page_to_page_bean(self, page: Page[E]) -> PageBean[E]:
        """Convert a 0-based query page into the 1-based PageBean returned to callers"""
        return PageBean(
            page_number=page.number + 1,
            page_size=page.size,
            total_records=page.total_elements,
            bean_list=page.content,
        )

    async def find_all_by_name_like(self, name: str) -> list[E]:
        """Fuzzy query by name"""
        return await self.get_repo().find_all_by_name_like(f"%{name}%")

    async def find_by_id(self, id: ID) -> Optional[E]:
        """Get by ID, None if it does not exist"""
        return await self.get_repo().find_by_id(id)

    # Lower-level repository operations; the generic CRUD router only uses count()

    async def save_and_flush(self, entity: E) -> E:
        """Add and flush immediately"""
        return await self.get_repo().save_and_flush(entity)

    async def find_page(
        self,
        page_request: PageRequest,
        specification: Optional[Specification] = None,
    ) -> Page[E]:
        return await self.get_repo().find_page(page_request, specification)

    async def flush(self) -> None:
        await self.get_repo().flush()

    async def count(self, specification: Optional[Specification] = None) -> int:
        return await self.get_repo().count(specification)
