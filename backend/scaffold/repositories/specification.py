"""
Query Specification Module

Builds SQLAlchemy WHERE clauses from composable predicates, so that services can
describe a filter once and repositories can apply it to both the row query and the
count query.
"""

from typing import Any, Callable, Optional

from sqlalchemy import and_, or_
from sqlalchemy.sql.elements import ColumnElement

from scaffold.domain.entity import BaseEntity

PredicateFn = Callable[[Any], Optional[ColumnElement[bool]]]


class Specification:
    """
    Query Specification

    Wraps a function that receives the ORM model class and returns a boolean
    clause, or None when it does not restrict the query.
    """

    def __init__(self, fn: PredicateFn):
        self._fn = fn

    @classmethod
    def where(cls, fn: PredicateFn) -> "Specification":
        return cls(fn)

    @classmethod
    def all(cls) -> "Specification":
        """Specification matching every row"""
        return cls(lambda model: None)

    def to_predicate(self, model: Any) -> Optional[ColumnElement[bool]]:
        return self._fn(model)

    def __and__(self, other: "Specification") -> "Specification":
        def combined(model: Any) -> Optional[ColumnElement[bool]]:
            clauses = [
                clause
                for clause in (self.to_predicate(model), other.to_predicate(model))
                if clause is not None
            ]
            if not clauses:
                return None
            if len(clauses) == 1:
                return clauses[0]
            return and_(*clauses)

        return Specification(combined)

    def __or__(self, other: "Specification") -> "Specification":
        def combined(model: Any) -> Optional[ColumnElement[bool]]:
            left = self.to_predicate(model)
            right = other.to_predicate(model)
            # An unrestricted side matches everything
            if left is None or right is None:
                return None
            return or_(left, right)

        return Specification(combined)


def name_like(name: str) -> Specification:
    """Match rows whose name contains `name`"""
    return Specification.where(lambda model: model.name.like(f"%{name}%"))


def status_equals(status: int) -> Specification:
    """Match rows with exactly this status"""
    return Specification.where(lambda model: model.status == status)


def condition_specification(condition: BaseEntity) -> Specification:
    """
    Build the default search condition from an entity used as a filter

    - non-empty name: name LIKE %name%
    - status set: status = status

    Args:
        condition: Entity whose name/status fields describe the filter

    Returns:
        Specification: ANDed predicates, unrestricted when no field is set
    """
    spec = Specification.all()
    if condition.name:
        spec = spec & name_like(condition.name)
    if condition.status is not None:
        spec = spec & status_equals(condition.status)
    return spec
