"""
Category service - CRUD over news categories.
"""

import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from newsroom.core.errors import BadRequestError, NotFoundError
from newsroom.models.category import Category
from newsroom.models.news import News
from newsroom.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)


class CategoryService:
    """Service for creating, reading, renaming and deleting categories."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, category_in: CategoryCreate) -> Category:
        category = Category(category_name=category_in.category_name)
        self.db.add(category)
        self._commit_unique(category_in.category_name)
        self.db.refresh(category)

        logger.info(f"Created category {category.id} ({category.category_name})")
        return category

    def find_all(self) -> List[Category]:
        return self.db.query(Category).all()

    def find_one(self, category_id: str) -> Category:
        category = self.db.query(Category).filter(Category.id == category_id).first()
        if not category:
            raise NotFoundError(f'Category with ID "{category_id}" not found')
        return category

    def update(self, category_id: str, category_in: CategoryUpdate) -> Category:
        category = self.find_one(category_id)

        update_data = category_in.model_dump(exclude_unset=True, exclude={"id"})
        for key, value in update_data.items():
            setattr(category, key, value)

        self._commit_unique(category.category_name)
        self.db.refresh(category)
        return category

    def news_ids(self, category_id: str) -> List[str]:
        """Ids of every news item in the category, soft-deleted ones included."""
        rows = self.db.query(News.id).filter(News.category_id == category_id).all()
        return [row.id for row in rows]

    def remove(self, category_id: str) -> None:
        """
        Delete a category row.

        This is a physical delete; the foreign key cascades it to every news
        item in the category, soft-deleted ones included.

        Raises:
            NotFoundError: If no row matched ``category_id``
        """
        affected = (
            self.db.query(Category)
            .filter(Category.id == category_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()

        if affected == 0:
            raise NotFoundError(f'Category with ID "{category_id}" not found')

        logger.info(f"Deleted category {category_id}")

    def _commit_unique(self, category_name: str) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise BadRequestError(
                f'Category with name "{category_name}" already exists'
            )
