from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status

from newsroom.api import validation
from newsroom.api.deps import get_category_cache, get_category_service, get_news_cache
from newsroom.api.responses import api_response
from newsroom.models.category import Category
from newsroom.schemas.category import Category as CategorySchema
from newsroom.services.cache_aside import CacheAside
from newsroom.services.category_service import CategoryService


def serialize_category(category: Category) -> Dict[str, Any]:
    return CategorySchema.model_validate(category).model_dump(mode="json", by_alias=True)


def create_category(
    payload: Any = Body(None),
    service: CategoryService = Depends(get_category_service),
    cached: CacheAside = Depends(get_category_cache),
):
    category_in = validation.ensure_valid(validation.category_create(payload))
    category = service.create(category_in)

    cached.invalidate()

    return api_response(
        status.HTTP_201_CREATED, {"category": serialize_category(category)}
    )


def list_categories(
    service: CategoryService = Depends(get_category_service),
    cached: CacheAside = Depends(get_category_cache),
):
    """Get all categories. The payload is cached under ``all_categories``."""
    categories = cached.read_list(
        lambda: [serialize_category(category) for category in service.find_all()]
    )
    return api_response(status.HTTP_200_OK, {"categories": categories})


def get_category(
    category_id: str,
    service: CategoryService = Depends(get_category_service),
    cached: CacheAside = Depends(get_category_cache),
):
    category, from_cache = cached.read_item(
        category_id, lambda: serialize_category(service.find_one(category_id))
    )
    return api_response(
        status.HTTP_200_OK, {"category": category, "fromCache": from_cache}
    )


def update_category(
    category_id: str,
    payload: Any = Body(None),
    service: CategoryService = Depends(get_category_service),
    cached: CacheAside = Depends(get_category_cache),
    news_cached: CacheAside = Depends(get_news_cache),
):
    """Rename a category. The id comes from the path, not the body."""
    data = {**payload, "id": category_id} if isinstance(payload, dict) else payload
    category_in = validation.ensure_valid(validation.category_update(data))
    updated = service.update(category_id, category_in)

    cached.invalidate(category_id)
    # Cached news embed their category
    news_cached.invalidate(*service.news_ids(category_id))

    return api_response(status.HTTP_200_OK, {"updated": serialize_category(updated)})


def delete_category(
    category_id: str,
    service: CategoryService = Depends(get_category_service),
    cached: CacheAside = Depends(get_category_cache),
    news_cached: CacheAside = Depends(get_news_cache),
):
    """Delete a category and, through the cascade, all of its news."""
    news_ids = service.news_ids(category_id)
    service.remove(category_id)

    cached.invalidate(category_id)
    news_cached.invalidate(*news_ids)

    return api_response(
        status.HTTP_200_OK, {"message": "Category deleted successfully"}
    )


# (method, path, handler, success status)
ROUTES = [
    ("POST", "", create_category, status.HTTP_201_CREATED),
    ("GET", "", list_categories, status.HTTP_200_OK),
    ("GET", "/{category_id}", get_category, status.HTTP_200_OK),
    ("PATCH", "/{category_id}", update_category, status.HTTP_200_OK),
    ("DELETE", "/{category_id}", delete_category, status.HTTP_200_OK),
]

router = APIRouter()
for method, path, endpoint, status_code in ROUTES:
    router.add_api_route(path, endpoint, methods=[method], status_code=status_code)
