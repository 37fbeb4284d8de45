"""
Base Repository Interface Module

Defines the generic interface for data access, decoupling business logic from specific database implementations.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional

from scaffold.domain.entity import E, ID
from scaffold.domain.page import Page, PageRequest
from scaffold.repositories.specification import Specification


class BaseRepository(ABC, Generic[E, ID]):
    """
    Base Repository Interface

    Defines standard CRUD operations over an entity type E identified by ID.
    """

    @abstractmethod
    async def save(self, entity: E) -> E:
        """Insert the entity, or replace the stored row with the same ID"""
        pass

    @abstractmethod
    async def save_and_flush(self, entity: E) -> E:
        """Save and push the change to the database immediately"""
        pass

    @abstractmethod
    async def find_by_id(self, id: ID) -> Optional[E]:
        """Get entity by ID, None when missing"""
        pass

    @abstractmethod
    async def exists_by_id(self, id: ID) -> bool:
        """Check whether an entity with this ID exists"""
        pass

    @abstractmethod
    async def find_all(self) -> List[E]:
        """Get all entities"""
        pass

    @abstractmethod
    async def find_page(
        self,
        page_request: PageRequest,
        specification: Optional[Specification] = None,
    ) -> Page[E]:
        """Get one page of entities matching the specification"""
        pass

    @abstractmethod
    async def find_all_by_name_like(self, pattern: str) -> List[E]:
        """Get entities whose name matches a LIKE pattern"""
        pass

    @abstractmethod
    async def count(self, specification: Optional[Specification] = None) -> int:
        """Count entities matching the specification"""
        pass

    @abstractmethod
    async def delete_by_id(self, id: ID) -> bool:
        """Delete entity by ID, False when missing"""
        pass

    @abstractmethod
    async def delete(self, entity: E) -> bool:
        """Delete the stored row of this entity"""
        pass

    @abstractmethod
    async def flush(self) -> None:
        """Push pending changes to the database"""
        pass
