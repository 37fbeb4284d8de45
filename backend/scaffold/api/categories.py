"""
Category Management API

Provides CRUD endpoints for Categories.
"""

from scaffold.api.crud import build_crud_router
from scaffold.api.deps import get_category_service
from scaffold.domain.category import Category

router = build_crud_router(
    prefix="/categories",
    tags=["Categories"],
    entity_model=Category,
    service_dependency=get_category_service,
)
