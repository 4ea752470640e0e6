"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from quickexit.api.v1.router import router as api_router
from quickexit.config import get_settings
from quickexit.infrastructure.csv_logger import build_metrics_logger
from quickexit.repositories.excuse_repo import RecentExcuseStore
from quickexit.services.excuse_generator import ExcuseGenerator

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    logger.info("Starting QuickExit application...")
    logger.info(f"Environment: {settings.environment}")
    if not app.state.excuse_generator.provider_available:
        logger.warning("OpenAI API key not configured, serving fallback excuses only")

    yield

    logger.info(
        f"Shutting down QuickExit application "
        f"({app.state.excuse_store.count()} excuses generated)..."
    )


def create_app(
    store: RecentExcuseStore | None = None,
    generator: ExcuseGenerator | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    docs_kwargs = {}
    if settings.is_production:
        docs_kwargs = {"docs_url": None, "redoc_url": None, "openapi_url": None}

    app = FastAPI(
        title="QuickExit",
        description="Believable excuses and fake calls for leaving awkward situations",
        version="0.1.0",
        lifespan=lifespan,
        **docs_kwargs,
    )

    # Process-lifetime state
    app.state.excuse_store = store or RecentExcuseStore()
    app.state.excuse_generator = generator or ExcuseGenerator(
        metrics=build_metrics_logger(settings.generation_metrics_path),
    )

    app.include_router(api_router)

    @app.get("/health")
    async def health_check() -> JSONResponse:
        """Lightweight health check reporting provider configuration."""
        provider = (
            "configured" if app.state.excuse_generator.provider_available else "unconfigured"
        )
        return JSONResponse({"status": "healthy", "provider": provider})

    return app


# Create app instance
app = create_app()
