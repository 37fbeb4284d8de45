"""
Pagination Domain Model

Three page types are used on the way from an HTTP request to a query and back:

- `PageVO`: 1-based page request received from clients.
- `PageRequest` / `Page`: 0-based types used between services and repositories.
- `PageBean`: 1-based page result returned to clients and remote callers.

`Page` is a plain dataclass with no defaults and is not meant to leave the process.
`PageBean` has a default for every field, so any JSON produced by a provider
decodes back into a `PageBean` on the consumer side with plain `model_validate`.
"""

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel, Field, computed_field

T = TypeVar("T")


class PageVO(BaseModel):
    """Page Request (1-based)"""

    page_number: int = Field(1, ge=1, description="Page number, starting at 1")
    page_size: int = Field(10, ge=1, le=1000, description="Items per page")

    def to_page_request(self) -> "PageRequest":
        return PageRequest.of(self.page_number - 1, self.page_size)


@dataclass(frozen=True)
class PageRequest:
    """Page Request (0-based)"""

    page: int
    size: int

    @classmethod
    def of(cls, page: int, size: int) -> "PageRequest":
        """
        Create a page request

        Raises:
            ValueError: page is negative or size is smaller than 1
        """
        if page < 0:
            raise ValueError("Page index must not be less than zero")
        if size < 1:
            raise ValueError("Page size must not be less than one")
        return cls(page=page, size=size)

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class Page(Generic[T]):
    """Query Result Page (0-based)"""

    content: list[T]
    number: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return math.ceil(self.total_elements / self.size)


class PageBean(BaseModel, Generic[T]):
    """Page Result (1-based, JSON safe)"""

    page_number: int = Field(1, description="Page number, starting at 1")
    page_size: int = Field(10, description="Items per page")
    total_records: int = Field(0, description="Total matching records")
    bean_list: list[T] = Field(default_factory=list, description="Items on this page")

    @computed_field
    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_records / self.page_size)
