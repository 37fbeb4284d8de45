"""
Category Domain Model
"""

from typing import Optional

from pydantic import Field

from scaffold.domain.entity import BaseEntity


class Category(BaseEntity):
    """Category Complete Model"""

    # Free-form description
    description: Optional[str] = Field(None, max_length=2000, description="Description")
