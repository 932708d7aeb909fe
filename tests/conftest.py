"""Pytest configuration and fixtures for the catalog service."""

from datetime import UTC, datetime, timedelta

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from catalog.application import create_app
from catalog.services.catalog_assembler import CatalogAssembler
from catalog.services.gallery_assembler import GalleryAssembler
from catalog.services.product_service import ProductService
from catalog.services.stores.gallery_store import GalleryStore
from catalog.services.stores.product_store import ProductStore


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "asyncio: marks tests as async tests")


class FakeClock:
    """Controllable clock; starts at a fixed instant."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2025, 6, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def product_store():
    return ProductStore()


@pytest.fixture()
def gallery_store():
    return GalleryStore()


@pytest.fixture()
def product_service(product_store, clock):
    return ProductService(product_store, clock=clock)


@pytest.fixture()
def catalog_assembler(product_store, clock):
    return CatalogAssembler(product_store, catalog_title="Test Catalog", clock=clock)


@pytest.fixture()
def gallery_assembler(gallery_store):
    return GalleryAssembler(gallery_store)


@pytest.fixture()
def app():
    """A fresh application (and therefore fresh stores) per test."""
    return create_app()


@pytest_asyncio.fixture()
async def client(app):
    """Return an HTTPX async client pointing at the FastAPI app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as test_client:
        yield test_client


def product_payload(code: str = "LZ-0001", **overrides) -> dict:
    payload = {
        "name": "Sofá Retrátil Aurora",
        "code": code,
        "main_image_url": "https://cdn.example.com/products/aurora.jpg",
        "price": 2499.9,
    }
    payload.update(overrides)
    return payload


def image_payload(gallery_id, display_order: int = 1, **overrides) -> dict:
    payload = {
        "gallery_id": str(gallery_id),
        "thumbnail_url": f"https://cdn.example.com/thumb/{display_order}.jpg",
        "full_size_url": f"https://cdn.example.com/full/{display_order}.jpg",
        "display_order": display_order,
        "image_category": "frontal",
        "resolution_urls": {
            "thumbnail": f"https://cdn.example.com/150/{display_order}.jpg",
            "medium": f"https://cdn.example.com/800/{display_order}.jpg",
            "large": f"https://cdn.example.com/1920/{display_order}.jpg",
            "original": f"https://cdn.example.com/orig/{display_order}.jpg",
        },
    }
    payload.update(overrides)
    return payload
