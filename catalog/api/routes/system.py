"""System-level routes such as health checks."""

from __future__ import annotations

from fastapi import APIRouter

from catalog.api.dependencies import ProductStoreDependency
from catalog.config import settings

router = APIRouter(tags=["system"])


@router.get("/")
async def read_root() -> dict[str, str]:
    """Hello World endpoint used by smoke tests."""

    return {"message": "Hello World"}


@router.get("/health")
async def health_check(store: ProductStoreDependency) -> dict[str, str | int]:
    """Health check reporting the environment and active product count."""

    return {
        "status": "healthy",
        "environment": settings.ENVIRONMENT,
        "products": store.count(),
    }
