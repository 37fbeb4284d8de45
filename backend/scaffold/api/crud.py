"""
Generic CRUD API

Builds the standard endpoint set for any entity served by a BaseService.
"""

from typing import Any, Callable, Optional

from fastapi import APIRouter, Depends, Query, status

from scaffold.common.errors import NotFoundError
from scaffold.domain.entity import BaseEntity
from scaffold.domain.page import PageBean, PageVO
from scaffold.services.base import BaseService


def build_crud_router(
    prefix: str,
    tags: list[str],
    entity_model: type[BaseEntity],
    service_dependency: Callable[..., BaseService],
    id_type: type = int,
) -> APIRouter:
    """
    Build a CRUD router

    Args:
        prefix: URL prefix, e.g. "/categories"
        tags: OpenAPI tags
        entity_model: Domain model used for request bodies and responses
        service_dependency: FastAPI dependency returning the entity service
        id_type: Type of the path identifier

    Returns:
        APIRouter: Router exposing save/update/delete/find/page/search/count
    """
    router = APIRouter(prefix=prefix, tags=tags)
    entity_label = entity_model.__name__

    @router.post("", response_model=entity_model, status_code=status.HTTP_201_CREATED)
    async def save(
        data: entity_model,  # type: ignore[valid-type]
        service: BaseService = Depends(service_dependency),
    ):
        """Create entity"""
        return await service.save(data)

    @router.get("", response_model=list[entity_model])  # type: ignore[valid-type]
    async def find_all(service: BaseService = Depends(service_dependency)):
        """Get all entities"""
        return await service.find_all()

    @router.get("/page", response_model=PageBean[entity_model])  # type: ignore[valid-type]
    async def find_by_condition(
        service: BaseService = Depends(service_dependency),
        page_number: int = Query(1, ge=1, description="Page number"),
        page_size: int = Query(10, ge=1, le=1000, description="Items per page"),
        name: Optional[str] = Query(None, description="Filter by name (fuzzy)"),
        status_: Optional[int] = Query(None, alias="status", description="Filter by status"),
    ):
        """
        Conditional query with pagination

        Without name and status every entity is paged.
        """
        condition = None
        if name or status_ is not None:
            condition = entity_model.model_construct(name=name, status=status_)
        return await service.find_by_condition(
            PageVO(page_number=page_number, page_size=page_size), condition
        )

    @router.get("/search", response_model=list[entity_model])  # type: ignore[valid-type]
    async def find_all_by_name_like(
        name: str = Query(..., min_length=1, description="Name fragment"),
        service: BaseService = Depends(service_dependency),
    ):
        """Fuzzy search by name"""
        return await service.find_all_by_name_like(name)

    @router.get("/count")
    async def count(service: BaseService = Depends(service_dependency)) -> dict[str, Any]:
        """Count entities"""
        return {"count": await service.count()}

    @router.post("/delete", status_code=status.HTTP_204_NO_CONTENT)
    async def delete(
        data: entity_model,  # type: ignore[valid-type]
        service: BaseService = Depends(service_dependency),
    ):
        """Delete the given entity"""
        await service.delete(data)

    @router.get("/{entity_id}", response_model=entity_model)
    async def find_by_id(
        entity_id: id_type,  # type: ignore[valid-type]
        service: BaseService = Depends(service_dependency),
    ):
        """Get single entity"""
        entity = await service.find_by_id(entity_id)
        if entity is None:
            raise NotFoundError(
                message=f"{entity_label} with id {entity_id} not found",
                code=f"{entity_label.lower()}_not_found",
            )
        return entity

    @router.put("/{entity_id}", response_model=entity_model)
    async def update(
        entity_id: id_type,  # type: ignore[valid-type]
        data: entity_model,  # type: ignore[valid-type]
        service: BaseService = Depends(service_dependency),
    ):
        """
        Update entity

        Replaces the stored entity; the path ID takes precedence over any ID in the body.
        """
        return await service.update(data.model_copy(update={"id": entity_id}))

    @router.delete("/{entity_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_by_id(
        entity_id: id_type,  # type: ignore[valid-type]
        service: BaseService = Depends(service_dependency),
    ):
        """Delete entity, missing IDs are ignored"""
        await service.delete_by_id(entity_id)

    return router
