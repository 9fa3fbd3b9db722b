"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from recipe_manager.api.nutrition import router as nutrition_router
from recipe_manager.app_logging import configure_logging
from recipe_manager.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Recipe manager started (dictionary entries: %s, external lookup: %s)",
            len(app.state.container.matcher.entries),
            "on" if app.state.container.nutrition_service.api_client else "off",
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Recipe Manager", lifespan=lifespan)
    app.state.container = container

    app.include_router(nutrition_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
