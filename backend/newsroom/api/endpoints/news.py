from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from newsroom.api import validation
from newsroom.api.deps import get_news_cache, get_news_service
from newsroom.api.responses import api_response
from newsroom.core.config import settings
from newsroom.models.news import News
from newsroom.schemas.news import News as NewsSchema
from newsroom.services.cache_aside import CacheAside
from newsroom.services.news_service import NewsService


def serialize_news(news: News) -> Dict[str, Any]:
    return NewsSchema.model_validate(news).model_dump(mode="json", by_alias=True)


def create_news(
    payload: Any = Body(None),
    service: NewsService = Depends(get_news_service),
    cached: CacheAside = Depends(get_news_cache),
):
    news_in = validation.ensure_valid(validation.news_create(payload))
    news = service.create(news_in)

    cached.invalidate()

    return api_response(status.HTTP_201_CREATED, {"news": serialize_news(news)})


def list_news(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    service: NewsService = Depends(get_news_service),
    cached: CacheAside = Depends(get_news_cache),
):
    """Get a page of active news, newest first.

    ``page`` and ``limit`` fall back to their defaults when missing, not
    numeric or out of range (``limit`` is at most ``MAX_PAGE_SIZE``). Pages
    are cached under ``all_news``.
    """
    page_num = validation.parse_positive_int(page, settings.DEFAULT_PAGE)
    limit_num = validation.parse_positive_int(
        limit, settings.DEFAULT_PAGE_SIZE, maximum=settings.MAX_PAGE_SIZE
    )

    def load_page() -> Dict[str, Any]:
        result = service.find_all(page_num, limit_num)
        return {
            "news": [serialize_news(news) for news in result.items],
            "pagination": result.meta.model_dump(mode="json", by_alias=True),
        }

    payload = cached.read_list(load_page, variant=f"{page_num}:{limit_num}")
    return api_response(status.HTTP_200_OK, payload)


def list_deleted_news(service: NewsService = Depends(get_news_service)):
    deleted = [serialize_news(news) for news in service.find_deleted()]
    return api_response(status.HTTP_200_OK, {"news": deleted})


def get_news(
    news_id: str,
    service: NewsService = Depends(get_news_service),
    cached: CacheAside = Depends(get_news_cache),
):
    news, from_cache = cached.read_item(
        news_id, lambda: serialize_news(service.find_one(news_id))
    )
    return api_response(status.HTTP_200_OK, {"news": news, "fromCache": from_cache})


def update_news(
    news_id: str,
    payload: Any = Body(None),
    service: NewsService = Depends(get_news_service),
    cached: CacheAside = Depends(get_news_cache),
):
    news_in = validation.ensure_valid(validation.news_update(payload))
    updated = service.update(news_id, news_in)

    cached.invalidate(news_id)

    return api_response(status.HTTP_200_OK, {"updated": serialize_news(updated)})


def delete_news(
    news_id: str,
    service: NewsService = Depends(get_news_service),
    cached: CacheAside = Depends(get_news_cache),
):
    """Soft delete: the row stays and shows up under ``/news/deleted``."""
    service.remove(news_id)

    cached.invalidate(news_id)

    return api_response(status.HTTP_200_OK, {"message": "News deleted successfully"})


def restore_news(
    news_id: str,
    service: NewsService = Depends(get_news_service),
    cached: CacheAside = Depends(get_news_cache),
):
    service.restore(news_id)

    cached.invalidate()

    return api_response(status.HTTP_200_OK, {"message": "News restored successfully"})


# (method, path, handler, success status)
# Literal paths come before "/{news_id}" so they are matched first.
ROUTES = [
    ("POST", "", create_news, status.HTTP_201_CREATED),
    ("GET", "", list_news, status.HTTP_200_OK),
    ("GET", "/deleted", list_deleted_news, status.HTTP_200_OK),
    ("POST", "/restore/{news_id}", restore_news, status.HTTP_200_OK),
    ("GET", "/{news_id}", get_news, status.HTTP_200_OK),
    ("PATCH", "/{news_id}", update_news, status.HTTP_200_OK),
    ("DELETE", "/{news_id}", delete_news, status.HTTP_200_OK),
]

router = APIRouter()
for method, path, endpoint, status_code in ROUTES:
    router.add_api_route(path, endpoint, methods=[method], status_code=status_code)
