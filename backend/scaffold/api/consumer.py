"""
Consumer Category API

Exposes the Category operations of the provider service through CategoryClient.
"""

from typing import Annotated, Any, Optional

from fastapi import APIRouter, Depends, Query, Request, status

from scaffold.common.errors import NotFoundError
from scaffold.domain.category import Category
from scaffold.domain.page import PageBean, PageVO
from scaffold.remote import CategoryClient


def get_category_client(request: Request) -> CategoryClient:
    """
    Get Category Client

    One client per application, resolving the provider through the registry
    started in the application lifecycle.
    """
    state = request.app.state
    client = getattr(state, "category_client", None)
    if client is None:
        client = CategoryClient(registry=getattr(state, "registry", None))
        state.category_client = client
        if not hasattr(state, "remote_clients"):
            state.remote_clients = []
        state.remote_clients.append(client)
    return client


CategoryClientDep = Annotated[CategoryClient, Depends(get_category_client)]

router = APIRouter(prefix="/consumer/categories", tags=["Consumer - Categories"])


@router.get("", response_model=list[Category])
async def list_categories(client: CategoryClientDep):
    """Get all Categories"""
    return await client.find_all()


@router.get("/page", response_model=PageBean[Category])
async def page_categories(
    client: CategoryClientDep,
    page_number: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(10, ge=1, le=1000, description="Items per page"),
    name: Optional[str] = Query(None, description="Filter by name (fuzzy)"),
    status_: Optional[int] = Query(None, alias="status", description="Filter by status"),
):
    """Conditional query with pagination"""
    condition = None
    if name or status_ is not None:
        condition = Category(name=name, status=status_)
    return await client.find_by_condition(
        PageVO(page_number=page_number, page_size=page_size), condition
    )


@router.get("/count")
async def count_categories(client: CategoryClientDep) -> dict[str, Any]:
    """Count Categories"""
    return {"count": await client.count()}


@router.get("/{category_id}", response_model=Category)
async def get_category(category_id: int, client: CategoryClientDep):
    """Get single Category"""
    category = await client.find_by_id(category_id)
    if category is None:
        raise NotFoundError(
            message=f"Category with id {category_id} not found",
            code="category_not_found",
        )
    return category


@router.post("", response_model=Category, status_code=status.HTTP_201_CREATED)
async def create_category(data: Category, client: CategoryClientDep):
    """Create Category"""
    return await client.save(data)


@router.put("/{category_id}", response_model=Category)
async def update_category(category_id: int, data: Category, client: CategoryClientDep):
    """Replace Category"""
    return await client.update(data.model_copy(update={"id": category_id}))


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(category_id: int, client: CategoryClientDep):
    """Delete Category"""
    await client.delete_by_id(category_id)
