"""
News service - CRUD over news items with pagination, soft delete and restore.

Soft-deleted news keep their row with ``deleted_at`` set. Every query here
filters them out except ``find_deleted`` and ``restore``.
"""

import logging
import math
from dataclasses import dataclass
from datetime import datetime
from typing import List

from sqlalchemy import desc
from sqlalchemy.orm import Session, joinedload

from newsroom.core.errors import BadRequestError, NotFoundError
from newsroom.models.news import News
from newsroom.schemas.common import PaginationMeta
from newsroom.schemas.news import NewsCreate, NewsUpdate
from newsroom.services.category_service import CategoryService

logger = logging.getLogger(__name__)


@dataclass
class NewsPage:
    items: List[News]
    meta: PaginationMeta


class NewsService:
    """Service for managing news items."""

    def __init__(self, db: Session, category_service: CategoryService):
        self.db = db
        self.category_service = category_service

    def _active(self):
        return (
            self.db.query(News)
            .options(joinedload(News.category))
            .filter(News.deleted_at.is_(None))
        )

    def create(self, news_in: NewsCreate) -> News:
        # Raises NotFoundError before anything is written
        category = self.category_service.find_one(str(news_in.category_id))

        news = News(
            title=news_in.title,
            description=news_in.description,
            category=category,
        )
        self.db.add(news)
        self.db.commit()
        self.db.refresh(news)

        logger.info(f"Created news {news.id} in category {category.id}")
        return news

    def find_all(self, page: int = 1, limit: int = 10) -> NewsPage:
        """
        Get one page of active news, newest first.

        Args:
            page: 1-based page number
            limit: Page size

        Returns:
            NewsPage with the items and total/page/perPage/totalPages
        """
        total = self.db.query(News).filter(News.deleted_at.is_(None)).count()
        items = (
            self._active()
            .order_by(desc(News.created_at))
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )

        return NewsPage(
            items=items,
            meta=PaginationMeta(
                total=total,
                page=page,
                per_page=limit,
                total_pages=math.ceil(total / limit),
            ),
        )

    def find_one(self, news_id: str) -> News:
        news = self._active().filter(News.id == news_id).first()
        if not news:
            raise NotFoundError(f'News with ID "{news_id}" not found')
        return news

    def update(self, news_id: str, news_in: NewsUpdate) -> News:
        news = self.find_one(news_id)

        update_data = news_in.model_dump(exclude_unset=True)
        for key, value in update_data.items():
            if value is not None:
                setattr(news, key, value)

        self.db.commit()
        self.db.refresh(news)
        return news

    def remove(self, news_id: str) -> None:
        news = self.find_one(news_id)
        news.deleted_at = datetime.utcnow()
        self.db.commit()

        logger.info(f"Soft-deleted news {news_id}")

    def find_deleted(self) -> List[News]:
        return (
            self.db.query(News)
            .options(joinedload(News.category))
            .filter(News.deleted_at.isnot(None))
            .order_by(desc(News.deleted_at))
            .all()
        )

    def restore(self, news_id: str) -> None:
        """
        Bring a soft-deleted news item back.

        Raises:
            NotFoundError: If no row exists with ``news_id``
            BadRequestError: If the news item is not soft-deleted
        """
        news = self.db.query(News).filter(News.id == news_id).first()
        if not news:
            raise NotFoundError(f'News with ID "{news_id}" not found')
        if not news.is_deleted:
            raise BadRequestError(f'News with ID "{news_id}" is not deleted')

        news.deleted_at = None
        self.db.commit()

        logger.info(f"Restored news {news_id}")
