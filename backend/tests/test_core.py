"""Tests for settings and structured logging."""

import json
import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from newsroom.core.config import Settings
from newsroom.core.logging_config import (
    CorrelationIdFilter,
    NewsroomJsonFormatter,
    correlation_id_var,
)


@pytest.mark.unit
class TestSettings:
    """Test Settings."""

    def test_database_url_names_psycopg2_driver(self):
        settings = Settings(
            _env_file=None,
            DATABASE_URL_OVERRIDE=None,
            POSTGRES_USER="editor",
            POSTGRES_PASSWORD="secret",
            POSTGRES_HOST="db",
            POSTGRES_PORT=5433,
            POSTGRES_DB="newsroom",
        )

        assert (
            settings.DATABASE_URL
            == "postgresql+psycopg2://editor:secret@db:5433/newsroom"
        )

    def test_database_url_override(self):
        settings = Settings(_env_file=None, DATABASE_URL_OVERRIDE="sqlite:///./test.db")

        assert settings.DATABASE_URL == "sqlite:///./test.db"

    def test_cors_origins_from_comma_separated_string(self):
        settings = Settings(_env_file=None, CORS_ORIGINS="http://a.test, http://b.test")

        assert settings.CORS_ORIGINS == ["http://a.test", "http://b.test"]

    def test_pagination_bounds(self):
        settings = Settings(_env_file=None)

        assert settings.DEFAULT_PAGE == 1
        assert settings.DEFAULT_PAGE_SIZE == 10
        assert settings.MAX_PAGE_SIZE == 100
        assert settings.MAX_CACHED_PAGES == 20


@pytest.mark.unit
class TestJsonLogging:
    """Test NewsroomJsonFormatter."""

    def test_formatter_uses_json_module(self):
        assert issubclass(NewsroomJsonFormatter, JsonFormatter)

    def test_record_fields(self):
        formatter = NewsroomJsonFormatter("%(message)s")
        record = logging.LogRecord(
            name="newsroom.test",
            level=logging.WARNING,
            pathname=__file__,
            lineno=42,
            msg="Cache read failed",
            args=(),
            exc_info=None,
        )
        token = correlation_id_var.set("req-123")
        try:
            CorrelationIdFilter().filter(record)
        finally:
            correlation_id_var.reset(token)

        data = json.loads(formatter.format(record))

        assert data["message"] == "Cache read failed"
        assert data["level"] == "WARNING"
        assert data["logger"] == "newsroom.test"
        assert data["correlation_id"] == "req-123"
        assert data["source"]["line"] == 42
        assert "timestamp" in data
