"""
Domain Model Module Initialization
"""

from scaffold.domain.entity import BaseEntity
from scaffold.domain.page import Page, PageBean, PageRequest, PageVO
from scaffold.domain.category import Category

__all__ = [
    "BaseEntity",
    "Page",
    "PageBean",
    "PageRequest",
    "PageVO",
    "Category",
]
