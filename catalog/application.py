"""FastAPI application factory and bootstrap helpers."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.api.routes import include_api_routes
from catalog.config import settings
from catalog.services.stores.gallery_store import GalleryStore
from catalog.services.stores.product_store import ProductStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events."""
    logger.info(
        "Catalog service starting (environment=%s, max_products=%d, "
        "gallery_max_images=%d)",
        settings.ENVIRONMENT,
        settings.MAX_PRODUCTS,
        settings.GALLERY_MAX_IMAGES,
    )

    yield

    logger.info(
        "Catalog service stopping with %d active products",
        app.state.product_store.count(),
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Lozorio Catalog",
        description="In-memory product catalog and gallery service",
        version="1.0.0",
        lifespan=lifespan,
    )

    _configure_stores(app)
    _configure_cors(app)
    include_api_routes(app)

    return app


def _configure_stores(app: FastAPI) -> None:
    """Give each application instance its own in-memory stores."""

    app.state.product_store = ProductStore(max_products=settings.MAX_PRODUCTS)
    app.state.gallery_store = GalleryStore()


def _configure_cors(app: FastAPI) -> None:
    """Allow broad access in non-production environments."""

    origins = settings.cors_origins
    if settings.is_production and origins == ["*"]:
        return

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
