"""
SQLAlchemy ORM Model Definitions

Defines the shared entity columns and the concrete tables of the service:
- categories: Category Table
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from scaffold.common.time import utc_now_naive


class Base(DeclarativeBase):
    """SQLAlchemy ORM Base Class"""
    pass


class BaseEntityMixin:
    """
    Base Entity Columns

    Every table served through the generic repository carries these columns.
    `name` and `status` back the default search condition.
    """

    # Primary Key ID
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Display name, searched with LIKE
    name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, index=True)
    # Status flag, matched exactly
    status: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, default=1)
    # Creation Time
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now_naive, nullable=False
    )
    # Update Time
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now_naive, onupdate=utc_now_naive, nullable=False
    )


class Category(BaseEntityMixin, Base):
    """
    Category Table

    Sample resource served by the provider application.
    """
    __tablename__ = "categories"

    # Category Name, unique
    name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, unique=True)
    # Free-form description
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
