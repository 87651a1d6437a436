from datetime import datetime
from typing import Optional

from pydantic import UUID4, Field

from newsroom.schemas.category import Category
from newsroom.schemas.common import CamelModel, NoCodeDescription

TITLE_MAX_LENGTH = 200


class NewsCreate(CamelModel):
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    description: NoCodeDescription
    category_id: UUID4


class NewsUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=TITLE_MAX_LENGTH)
    description: Optional[NoCodeDescription] = None


class News(CamelModel):
    id: str
    title: str
    description: str
    category: Optional[Category] = None
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None
