"""Domain errors raised by the catalog services."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for expected, caller-recoverable catalog failures."""

    kind: str = "CatalogError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind, "message": self.message}


class NotFoundError(CatalogError):
    """Referenced entity is absent or soft-deleted."""

    kind = "NotFound"


class DuplicateCodeError(CatalogError):
    """Business code already used by another active product."""

    kind = "DuplicateCode"


class CapacityExceededError(CatalogError):
    """A store or gallery is already at its configured maximum."""

    kind = "CapacityExceeded"
