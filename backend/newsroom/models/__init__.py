from .category import Category
from .news import News

__all__ = [
    "Category",
    "News",
]
