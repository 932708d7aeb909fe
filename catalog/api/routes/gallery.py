"""Routes for product galleries, gallery images and product variations."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Query, status

from catalog.api.dependencies import GalleryAssemblerDependency
from catalog.api.errors import to_http_exception
from catalog.models.gallery import (
    GalleryImageCreate,
    GalleryImageRecord,
    GalleryImageUpdate,
    GalleryResponse,
    ProductVariationCreate,
    ProductVariationRecord,
)
from catalog.models.product import MessageResponse
from catalog.services.errors import CatalogError

router = APIRouter(prefix="/gallery", tags=["gallery"])


@router.get(
    "",
    response_model=GalleryResponse,
    summary="Fetch (or lazily create) the gallery of a product",
)
async def get_gallery(
    assembler: GalleryAssemblerDependency,
    product_id: UUID = Query(..., description="Product owning the gallery"),
    variation_id: UUID | None = Query(
        None,
        description="Variation currently selected; does not filter images",
    ),
) -> GalleryResponse:
    return assembler.get(product_id, variation_id)


@router.post(
    "/image",
    response_model=GalleryImageRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Add an image to a gallery",
)
async def create_image(
    payload: GalleryImageCreate,
    assembler: GalleryAssemblerDependency,
) -> GalleryImageRecord:
    try:
        return assembler.create_image(payload)
    except CatalogError as error:
        raise to_http_exception(error) from error


@router.put(
    "/image/{image_id}",
    response_model=GalleryImageRecord,
    summary="Partially update a gallery image",
)
async def update_image(
    image_id: UUID,
    payload: GalleryImageUpdate,
    assembler: GalleryAssemblerDependency,
) -> GalleryImageRecord:
    try:
        return assembler.update_image(image_id, payload)
    except CatalogError as error:
        raise to_http_exception(error) from error


@router.delete(
    "/image/{image_id}",
    response_model=MessageResponse,
    summary="Delete a gallery image",
)
async def delete_image(
    image_id: UUID,
    assembler: GalleryAssemblerDependency,
) -> MessageResponse:
    try:
        return assembler.delete_image(image_id)
    except CatalogError as error:
        raise to_http_exception(error) from error


@router.post(
    "/variation",
    response_model=ProductVariationRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product variation",
)
async def create_variation(
    payload: ProductVariationCreate,
    assembler: GalleryAssemblerDependency,
) -> ProductVariationRecord:
    return assembler.create_variation(payload)
