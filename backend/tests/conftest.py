"""
Pytest configuration and fixtures for Newsroom tests.
"""

import json
import time
import pytest
from typing import Any, Dict, Generator, Optional, Tuple
from datetime import datetime, timedelta
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from newsroom.core.database import Base, get_db, enable_sqlite_foreign_keys
from newsroom.models.category import Category
from newsroom.models.news import News


# Use in-memory SQLite database for tests
TEST_DATABASE_URL = "sqlite:///:memory:"


class MemoryCache:
    """In-process stand-in for RedisCache.

    Values go through a JSON round trip like they would in Redis, and every
    call is recorded so tests can assert on cache traffic.
    """

    def __init__(self):
        self.store: Dict[str, Tuple[str, float]] = {}
        self.calls = []

    def get(self, key: str) -> Optional[Any]:
        self.calls.append(("get", key))
        entry = self.store.get(key)
        if entry is None:
            return None
        raw, expires_at = entry
        if expires_at < time.monotonic():
            del self.store[key]
            return None
        return json.loads(raw)

    def set(self, key: str, value: Any, ttl: int) -> bool:
        self.calls.append(("set", key, ttl))
        self.store[key] = (json.dumps(value, default=str), time.monotonic() + ttl)
        return True

    def delete(self, key: str) -> bool:
        self.calls.append(("delete", key))
        return self.store.pop(key, None) is not None

    def peek(self, key: str) -> Optional[Any]:
        """Read a value without recording a call."""
        entry = self.store.get(key)
        return json.loads(entry[0]) if entry else None


class BrokenCache:
    """Cache whose every operation fails, as when Redis is unreachable."""

    def get(self, key):
        raise ConnectionError("cache down")

    def set(self, key, value, ttl):
        raise ConnectionError("cache down")

    def delete(self, key):
        raise ConnectionError("cache down")


@pytest.fixture(scope="function")
def db_engine():
    """Create a test database engine."""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine) -> Generator[Session, None, None]:
    """Create a test database session."""
    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=db_engine
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def memory_cache() -> MemoryCache:
    return MemoryCache()


@pytest.fixture(scope="function")
def broken_cache() -> BrokenCache:
    return BrokenCache()


@pytest.fixture(scope="function")
def test_app(db_session, memory_cache):
    """Create a FastAPI test app without lifespan events."""
    from fastapi import FastAPI
    from newsroom.api.endpoints import categories, news
    from newsroom.api.error_handlers import register_exception_handlers

    # Create app without lifespan so no Redis connection is attempted
    test_app = FastAPI(title="Newsroom - Test", version="1.0.0")
    register_exception_handlers(test_app)

    test_app.include_router(categories.router, prefix="/category", tags=["category"])
    test_app.include_router(news.router, prefix="/news", tags=["news"])

    test_app.state.cache = memory_cache

    # Override database dependency
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    test_app.dependency_overrides[get_db] = override_get_db

    return test_app


@pytest.fixture(scope="function")
def client(test_app) -> TestClient:
    """Create a test client without entering context manager."""
    return TestClient(test_app, raise_server_exceptions=False)


@pytest.fixture(scope="function")
def test_category(db_session) -> Category:
    """Create a test category."""
    category = Category(category_name="Technology")
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture(scope="function")
def test_news(db_session, test_category) -> News:
    """Create an active news item."""
    news = News(
        title="Chip makers report record quarter",
        description="Breaking news: markets rally",
        category_id=test_category.id,
    )
    db_session.add(news)
    db_session.commit()
    db_session.refresh(news)
    return news


@pytest.fixture(scope="function")
def deleted_news(db_session, test_category) -> News:
    """Create a soft-deleted news item."""
    news = News(
        title="Retracted story",
        description="Story withdrawn by the editors",
        category_id=test_category.id,
        deleted_at=datetime.utcnow(),
    )
    db_session.add(news)
    db_session.commit()
    db_session.refresh(news)
    return news


@pytest.fixture(scope="function")
def multiple_news(db_session, test_category) -> list[News]:
    """Create 12 active news items, one hour apart, oldest first."""
    base_time = datetime(2025, 1, 1, 8, 0, 0)

    items = []
    for i in range(12):
        news = News(
            title=f"Headline {i + 1}",
            description=f"Summary number {i + 1}",
            category_id=test_category.id,
            created_at=base_time + timedelta(hours=i),
        )
        db_session.add(news)
        items.append(news)

    db_session.commit()
    for news in items:
        db_session.refresh(news)

    return items
