"""Translate domain errors into HTTP responses."""

from __future__ import annotations

from fastapi import HTTPException, status

from catalog.services.errors import (
    CapacityExceededError,
    CatalogError,
    DuplicateCodeError,
    NotFoundError,
)

_STATUS_BY_ERROR: dict[type[CatalogError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateCodeError: status.HTTP_409_CONFLICT,
    CapacityExceededError: status.HTTP_400_BAD_REQUEST,
}


def to_http_exception(error: CatalogError) -> HTTPException:
    status_code = _STATUS_BY_ERROR.get(
        type(error), status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return HTTPException(status_code=status_code, detail=error.to_dict())
