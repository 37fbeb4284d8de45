"""
Category Service Tests
"""

import pytest

from scaffold.common.errors import ConflictError
from scaffold.domain.category import Category
from scaffold.repositories.sqlalchemy.category_repo import SQLAlchemyCategoryRepository
from scaffold.services.category_service import CategoryService


@pytest.mark.asyncio
async def test_save_rejects_duplicate_name(db_session):
    service = CategoryService(SQLAlchemyCategoryRepository(db_session))
    await service.save(Category(name="books"))

    with pytest.raises(ConflictError) as exc_info:
        await service.save(Category(name="books"))

    assert exc_info.value.code == "duplicate_name"
    assert exc_info.value.status_code == 409


@pytest.mark.asyncio
async def test_update_keeps_own_name(db_session):
    service = CategoryService(SQLAlchemyCategoryRepository(db_session))
    saved = await service.save(Category(name="books", description="paper"))

    updated = await service.update(Category(id=saved.id, name="books", status=0))

    assert updated.status == 0
    assert updated.description is None


@pytest.mark.asyncio
async def test_update_rejects_name_of_other_category(db_session):
    service = CategoryService(SQLAlchemyCategoryRepository(db_session))
    await service.save(Category(name="books"))
    pens = await service.save(Category(name="pens"))

    with pytest.raises(ConflictError):
        await service.update(Category(id=pens.id, name="books"))
