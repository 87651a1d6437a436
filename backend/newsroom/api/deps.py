"""
Request-scoped dependencies: database session, cache and services.
"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from newsroom.core.cache import CacheBackend
from newsroom.core.config import settings
from newsroom.core.database import get_db
from newsroom.services.cache_aside import CacheAside
from newsroom.services.category_service import CategoryService
from newsroom.services.news_service import NewsService

CATEGORY_LIST_KEY = "all_categories"
NEWS_LIST_KEY = "all_news"


def get_cache(request: Request) -> CacheBackend:
    """The cache client opened in the application lifespan."""
    return request.app.state.cache


def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    return CategoryService(db)


def get_news_service(
    db: Session = Depends(get_db),
    category_service: CategoryService = Depends(get_category_service),
) -> NewsService:
    return NewsService(db, category_service)


def get_category_cache(cache: CacheBackend = Depends(get_cache)) -> CacheAside:
    return CacheAside(
        cache,
        resource="category",
        list_key=CATEGORY_LIST_KEY,
        item_ttl=settings.ITEM_CACHE_TTL,
        list_ttl=settings.REDIS_TTL,
    )


def get_news_cache(cache: CacheBackend = Depends(get_cache)) -> CacheAside:
    return CacheAside(
        cache,
        resource="news",
        list_key=NEWS_LIST_KEY,
        item_ttl=settings.ITEM_CACHE_TTL,
        list_ttl=settings.REDIS_TTL,
        max_variants=settings.MAX_CACHED_PAGES,
    )
