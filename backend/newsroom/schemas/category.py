from datetime import datetime
from typing import Optional

from pydantic import UUID4, Field

from newsroom.schemas.common import CamelModel

CATEGORY_NAME_MAX_LENGTH = 100


class CategoryCreate(CamelModel):
    category_name: str = Field(min_length=1, max_length=CATEGORY_NAME_MAX_LENGTH)
    # Accepted for client compatibility; categories do not store a description
    description: Optional[str] = None


class CategoryUpdate(CamelModel):
    id: UUID4
    category_name: str = Field(max_length=CATEGORY_NAME_MAX_LENGTH)


class Category(CamelModel):
    id: str
    category_name: str
    created_at: datetime
    updated_at: datetime
