from pydantic_settings import BaseSettings
from typing import List, Union, Optional
from pydantic import field_validator


class Settings(BaseSettings):
    # Database
    POSTGRES_USER: str = "newsroom"
    POSTGRES_PASSWORD: str = "newsroom"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "newsroom"
    DATABASE_URL_OVERRIDE: Optional[str] = None  # e.g. sqlite:///./newsroom.db
    AUTO_CREATE_TABLES: bool = False  # Alembic owns the schema in production

    @property
    def DATABASE_URL(self) -> str:
        """Construct database URL from components."""
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return f"postgresql+psycopg2://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # Cache
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_DB: int = 0
    REDIS_PASSWORD: Optional[str] = None
    REDIS_TTL: int = 300  # seconds, list endpoints
    ITEM_CACHE_TTL: int = 300  # seconds, single-item reads

    # Pagination
    DEFAULT_PAGE: int = 1
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100
    MAX_CACHED_PAGES: int = 20  # page:limit entries kept under all_news

    # Application
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000"]
    RATE_LIMIT: str = "100/minute"

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            # Split by comma or keep as single item
            return [origin.strip() for origin in v.split(",")]
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields in .env


settings = Settings()
