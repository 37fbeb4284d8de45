"""
Base Entity Domain Model

Defines the fields shared by every entity handled through the generic service layer.
"""

from datetime import datetime
from typing import Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from scaffold.common.time import ensure_utc


class BaseEntity(BaseModel):
    """
    Base Entity Model

    An instance with only some fields set is also used as a query condition
    for paginated searches (see `condition_specification`).
    """

    # Entity ID, None until persisted
    id: Optional[int] = Field(None, description="Entity ID")
    # Display name
    name: Optional[str] = Field(None, max_length=100, description="Name")
    # Status flag
    status: Optional[int] = Field(None, description="Status")
    created_at: Optional[datetime] = Field(None, description="Creation Time")
    updated_at: Optional[datetime] = Field(None, description="Update Time")

    model_config = ConfigDict(from_attributes=True)

    @field_validator("created_at", "updated_at")
    @classmethod
    def _as_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(v)


# Entity type handled by generic repositories and services
E = TypeVar("E", bound=BaseEntity)
# Identifier type
ID = TypeVar("ID")
