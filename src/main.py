"""
FastAPI application for the restaurant back office.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from src.api import directory, menu, orders, tables
from src.config import ConfigValidator
from src.container import Container, get_container
from src.infrastructure.logging.logging_config import options_from_settings, setup_logging

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> FastAPI:
    """Build the app; a prebuilt container replaces the global one"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        active = container or get_container()
        setup_logging(options_from_settings(active.config))
        logger.info("Starting Bistro Back Office...")

        validator = ConfigValidator(active.config)
        if not validator.validate_all():
            logger.error("Configuration errors: %s", validator.errors)

        app.state.container = active
        app.state.board_snapshot = {}
        await active.load_all()
        logger.info(
            "Loaded %d orders, %d categories, %d menu items, %d tables",
            len(active.orders.orders),
            len(active.categories.categories),
            len(active.menu_items.items),
            len(active.tables.tables),
        )

        def remember(snapshot):
            app.state.board_snapshot = snapshot

        async with active.board_ticker(remember):
            yield

        logger.info("Shutting down Bistro Back Office...")
        await active.aclose()

    app = FastAPI(title="Bistro Back Office", lifespan=lifespan)
    app.include_router(directory.router)
    app.include_router(orders.router)
    app.include_router(menu.router)
    app.include_router(tables.router)

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {"message": "Bistro Back Office is running", "status": "active"}

    return app


app = create_app()
