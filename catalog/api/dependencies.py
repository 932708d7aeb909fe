"""FastAPI dependency providers backed by the per-application stores."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from catalog.config import settings
from catalog.services.catalog_assembler import CatalogAssembler
from catalog.services.gallery_assembler import GalleryAssembler
from catalog.services.product_service import ProductService
from catalog.services.stores.gallery_store import GalleryStore
from catalog.services.stores.product_store import ProductStore


def get_product_store(request: Request) -> ProductStore:
    return request.app.state.product_store


def get_gallery_store(request: Request) -> GalleryStore:
    return request.app.state.gallery_store


def get_catalog_assembler(
    store: Annotated[ProductStore, Depends(get_product_store)],
) -> CatalogAssembler:
    return CatalogAssembler(
        store,
        catalog_title=settings.CATALOG_TITLE,
        batch_size=settings.INFINITE_SCROLL_BATCH_SIZE,
        new_product_days=settings.NEW_PRODUCT_DAYS,
    )


def get_product_service(
    store: Annotated[ProductStore, Depends(get_product_store)],
) -> ProductService:
    return ProductService(store, new_product_days=settings.NEW_PRODUCT_DAYS)


def get_gallery_assembler(
    store: Annotated[GalleryStore, Depends(get_gallery_store)],
) -> GalleryAssembler:
    return GalleryAssembler(store, max_images=settings.GALLERY_MAX_IMAGES)


ProductStoreDependency = Annotated[ProductStore, Depends(get_product_store)]
CatalogAssemblerDependency = Annotated[CatalogAssembler, Depends(get_catalog_assembler)]
ProductServiceDependency = Annotated[ProductService, Depends(get_product_service)]
GalleryAssemblerDependency = Annotated[GalleryAssembler, Depends(get_gallery_assembler)]
