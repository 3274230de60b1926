"""FastAPI application factory and main entry point."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import APP_VERSION, get_settings
from app.core.logging import get_logger, setup_logging
from app.newsletter.infrastructure.validation import get_email_syntax_check
from app.newsletter.presentation.api import health, subscriber_emails

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown events."""
    # Startup
    setup_logging(level="DEBUG" if settings.debug else settings.log_level)
    logger.info("Newsletter service starting up...")
    logger.info(f"Environment: {settings.app_env}")

    # Build the predicate up front so a bad rule fails at startup
    get_email_syntax_check()

    yield

    # Shutdown
    logger.info("Newsletter service shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Newsletter Subscriber Emails",
        description="Syntactic validation of newsletter subscriber email addresses",
        version=APP_VERSION,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.is_development else None,
        redoc_url="/api/redoc" if settings.is_development else None,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # API routes
    app.include_router(health.router, prefix="/api", tags=["Health"])
    app.include_router(subscriber_emails.router, prefix="/api", tags=["Subscriber Emails"])

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )
