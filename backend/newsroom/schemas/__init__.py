from newsroom.schemas.common import PaginationMeta, NoCodeDescription
from newsroom.schemas.category import Category, CategoryCreate, CategoryUpdate
from newsroom.schemas.news import News, NewsCreate, NewsUpdate

__all__ = [
    "PaginationMeta",
    "NoCodeDescription",
    "Category",
    "CategoryCreate",
    "CategoryUpdate",
    "News",
    "NewsCreate",
    "NewsUpdate",
]
