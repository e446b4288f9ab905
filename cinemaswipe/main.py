"""
CinemaSwipe Backend

FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from .config import get_settings
from .core.logging import setup_logging, get_logger
from .core.exceptions import register_exception_handlers
from .routers import onboarding_router, movies_router, sessions_router
from .routers.sessions import limiter
from .services.catalog import get_catalog

# Initialize
settings = get_settings()
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Load the catalog up front instead of on the first request
    catalog = get_catalog()
    logger.info(
        "app_startup",
        environment=settings.environment,
        debug=settings.debug,
        catalog_size=len(catalog)
    )

    yield

    logger.info("app_shutdown")


app = FastAPI(
    title="CinemaSwipe Backend",
    description="Swipe-to-rate movie recommendations over a local catalog",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(onboarding_router)
app.include_router(movies_router)
app.include_router(sessions_router)


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "service": "CinemaSwipe Backend",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs" if settings.debug else "disabled",
    }


@app.get("/health")
async def health():
    """Health check for load balancers."""
    return {"status": "healthy", "catalog_size": len(get_catalog())}
