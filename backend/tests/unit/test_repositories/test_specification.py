"""
Query Specification Tests
"""

from scaffold.db.models import Category as CategoryORM
from scaffold.domain.category import Category
from scaffold.repositories.specification import (
    Specification,
    condition_specification,
    name_like,
    status_equals,
)


def _sql(spec: Specification) -> str:
    predicate = spec.to_predicate(CategoryORM)
    assert predicate is not None
    return str(predicate.compile(compile_kwargs={"literal_binds": True}))


def test_condition_with_name_and_status():
    sql = _sql(condition_specification(Category(name="book", status=1)))

    assert "categories.name LIKE '%book%'" in sql
    assert "categories.status = 1" in sql
    assert " AND " in sql


def test_condition_with_empty_name_uses_status_only():
    sql = _sql(condition_specification(Category(name="", status=0)))

    assert "LIKE" not in sql
    assert "categories.status = 0" in sql


def test_condition_with_name_only():
    sql = _sql(condition_specification(Category(name="pen")))

    assert "categories.name LIKE '%pen%'" in sql
    assert "status" not in sql


def test_empty_condition_matches_everything():
    assert condition_specification(Category()).to_predicate(CategoryORM) is None


def test_and_drops_unrestricted_side():
    sql = _sql(Specification.all() & status_equals(2))
    assert sql == "categories.status = 2"


def test_or_with_unrestricted_side_matches_everything():
    spec = Specification.all() | status_equals(2)
    assert spec.to_predicate(CategoryORM) is None


def test_or_combines_predicates():
    sql = _sql(name_like("a") | status_equals(2))
    assert " OR " in sql


def test_where_builds_custom_predicate():
    spec = Specification.where(lambda model: model.description.is_(None))
    assert _sql(spec) == "categories.description IS NULL"
