from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from newsroom.core.config import settings
from newsroom.core.cache import RedisCache
from newsroom.core.database import engine, Base
from newsroom.core.logging_config import setup_logging, CorrelationIdMiddleware
from newsroom.api.error_handlers import register_exception_handlers
from newsroom.api.endpoints import categories, news
import newsroom.models  # noqa: F401 - registers tables on Base.metadata
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
import logging

# Configure structured JSON logging
setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Initialize rate limiter
limiter = Limiter(key_func=get_remote_address, default_limits=[settings.RATE_LIMIT])


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    # Startup
    logger.info("Starting Newsroom API...")

    if settings.AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created")

    app.state.cache = RedisCache.from_settings()
    if app.state.cache.ping():
        logger.info(f"Redis cache ready at {settings.REDIS_HOST}:{settings.REDIS_PORT}")

    yield

    # Shutdown
    logger.info("Shutting down Newsroom API...")
    app.state.cache.close()


app = FastAPI(
    title="Newsroom API",
    description="Categories and news articles with cached reads and soft delete",
    version="1.0.0",
    lifespan=lifespan,
)

# Add correlation ID middleware (first, so all logs have correlation IDs)
app.add_middleware(CorrelationIdMiddleware)

# Add rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(categories.router, prefix="/category", tags=["category"])
app.include_router(news.router, prefix="/news", tags=["news"])


@app.get("/")
def root():
    return {
        "name": "Newsroom API",
        "version": "1.0.0",
        "description": "Categories and news articles",
    }


@app.get("/health")
def health_check():
    return {"status": "healthy"}
