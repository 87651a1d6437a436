from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
import uuid
from newsroom.core.database import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class Category(Base):
    __tablename__ = "category"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    category_name = Column(String(100), unique=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    # Relationships
    # The database cascades deletes, so the ORM must not null out news.category_id first
    news = relationship("News", back_populates="category", passive_deletes=True)

    def __repr__(self):
        return f"<Category {self.category_name}>"
