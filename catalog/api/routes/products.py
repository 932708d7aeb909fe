"""Routes for the product catalog and product management."""

from __future__ import annotations

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from catalog.api.dependencies import CatalogAssemblerDependency, ProductServiceDependency
from catalog.api.errors import to_http_exception
from catalog.models.product import (
    CatalogFilters,
    CatalogResponse,
    InteractionRequest,
    MessageResponse,
    ProductCreate,
    ProductDetail,
    ProductUpdate,
)
from catalog.services.errors import CatalogError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/product", tags=["products"])


@router.get(
    "",
    response_model=CatalogResponse,
    summary="List catalog products with pagination or infinite scroll",
)
async def list_catalog(
    filters: Annotated[CatalogFilters, Query()],
    assembler: CatalogAssemblerDependency,
) -> CatalogResponse:
    return assembler.catalog(filters)


@router.post(
    "",
    response_model=ProductDetail,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product",
)
async def create_product(
    payload: ProductCreate,
    service: ProductServiceDependency,
) -> ProductDetail:
    logger.debug("Received payload: %s", payload.model_dump_json())
    try:
        return service.create(payload)
    except CatalogError as error:
        raise to_http_exception(error) from error


@router.post(
    "/interaction",
    response_model=MessageResponse,
    summary="Record a view, click or interaction for a product",
)
async def record_interaction(
    payload: InteractionRequest,
    service: ProductServiceDependency,
) -> MessageResponse:
    try:
        return service.record_interaction(payload.product_id, payload.interaction_type)
    except CatalogError as error:
        raise to_http_exception(error) from error


@router.post(
    "/popularity/refresh",
    response_model=MessageResponse,
    summary="Recompute popularity scores for every active product",
)
async def refresh_popularity(service: ProductServiceDependency) -> MessageResponse:
    return service.refresh_popularity()


@router.get(
    "/code/{code}",
    response_model=ProductDetail,
    summary="Fetch an active product by its LZ-XXXX code",
)
async def get_product_by_code(
    code: str,
    service: ProductServiceDependency,
) -> ProductDetail:
    try:
        return service.get_by_code(code)
    except CatalogError as error:
        raise to_http_exception(error) from error


@router.get(
    "/{product_id}",
    response_model=ProductDetail,
    summary="Fetch a single product",
)
async def get_product(
    product_id: UUID,
    service: ProductServiceDependency,
) -> ProductDetail:
    try:
        return service.get(product_id)
    except CatalogError as error:
        raise to_http_exception(error) from error


@router.put(
    "/{product_id}",
    response_model=ProductDetail,
    summary="Replace a product's editable fields",
)
async def update_product(
    product_id: UUID,
    payload: ProductUpdate,
    service: ProductServiceDependency,
) -> ProductDetail:
    try:
        return service.update(product_id, payload)
    except CatalogError as error:
        raise to_http_exception(error) from error


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    summary="Soft-delete a product",
)
async def delete_product(
    product_id: UUID,
    service: ProductServiceDependency,
) -> MessageResponse:
    try:
        return service.delete(product_id)
    except CatalogError as error:
        raise to_http_exception(error) from error
