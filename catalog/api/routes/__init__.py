"""API route registration."""

from fastapi import FastAPI

from catalog.api.routes import gallery, products, system

INTERNAL_API_PREFIX = "/api/internal"


def include_api_routes(app: FastAPI) -> None:
    """Attach all API routers to the application."""

    app.include_router(system.router)
    app.include_router(products.router, prefix=INTERNAL_API_PREFIX)
    app.include_router(gallery.router, prefix=INTERNAL_API_PREFIX)
