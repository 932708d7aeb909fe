"""Product domain models and API schemas."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Literal
from uuid import UUID

from pydantic import (
    AnyHttpUrl,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

AvailabilityStatus = Literal["available", "on_request", "out_of_stock"]
SortCriteria = Literal[
    "name_asc",
    "name_desc",
    "price_asc",
    "price_desc",
    "date_newest",
    "date_oldest",
    "popularity",
]
LayoutType = Literal["grid", "list"]
NavigationMode = Literal["pagination", "infinite_scroll"]
InteractionType = Literal["view", "click", "interaction"]

PRODUCT_CODE_PATTERN = r"^LZ-\d{4}$"
ITEMS_PER_PAGE_OPTIONS = (12, 24, 48)
DEFAULT_ITEMS_PER_PAGE = 24


def _check_promotional_price(
    is_promotional: bool,
    price: float | None,
    promotional_price: float | None,
) -> None:
    if not is_promotional:
        return
    if promotional_price is None:
        raise ValueError("Promotional price is required when product is promotional")
    if price is not None and promotional_price >= price:
        raise ValueError("Promotional price must be less than regular price")


class ProductBase(BaseModel):
    """Editable product fields shared by requests and stored records."""

    name: str = Field(..., min_length=1, max_length=100)
    code: str = Field(
        ...,
        pattern=PRODUCT_CODE_PATTERN,
        description="Business code in the LZ-XXXX format",
    )
    main_image_url: AnyHttpUrl
    price: float | None = Field(None, ge=0)
    availability_status: AvailabilityStatus = "available"
    is_featured: bool = False
    is_promotional: bool = False
    promotional_price: float | None = Field(None, ge=0)

    @model_validator(mode="after")
    def _validate_promotional_price(self):
        _check_promotional_price(
            self.is_promotional, self.price, self.promotional_price
        )
        return self


class ProductCreate(ProductBase):
    """Payload accepted when creating a product."""


class ProductUpdate(ProductBase):
    """Full replacement of a product's editable fields."""

    price: float | None = Field(..., ge=0)
    availability_status: AvailabilityStatus
    is_featured: bool
    is_promotional: bool
    promotional_price: float | None = Field(..., ge=0)
    active: bool


class ProductRecord(ProductBase):
    """Internal representation persisted inside the product store."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    view_count: int = 0
    click_count: int = 0
    interaction_count: int = 0
    popularity_score: int = 0
    last_popularity_update: datetime = Field(
        default_factory=lambda: datetime.now(UTC)
    )
    active: bool = True


class ProductDetail(ProductRecord):
    """Full product shape returned by the API, with the derived ``is_new`` flag."""

    is_new: bool


class ProductListItem(BaseModel):
    """Reduced projection used in catalog listings."""

    id: UUID
    name: str
    code: str
    main_image_url: AnyHttpUrl
    price: float | None = None
    availability_status: AvailabilityStatus
    is_featured: bool
    is_new: bool
    is_promotional: bool
    promotional_price: float | None = None


class CatalogFilters(BaseModel):
    """Query parameters accepted by the catalog listing."""

    layout_type: LayoutType = "grid"
    sort_criteria: SortCriteria = "name_asc"
    navigation_mode: NavigationMode = "pagination"
    current_page: int = Field(1, ge=1)
    items_per_page: int = Field(
        DEFAULT_ITEMS_PER_PAGE,
        description="One of 12, 24 or 48",
    )
    loaded_items_count: int = Field(
        0,
        ge=0,
        description="Items already loaded (infinite scroll only)",
    )

    @field_validator("items_per_page")
    @classmethod
    def _validate_items_per_page(cls, value: int) -> int:
        if value not in ITEMS_PER_PAGE_OPTIONS:
            options = ", ".join(str(option) for option in ITEMS_PER_PAGE_OPTIONS)
            raise ValueError(f"Items per page must be one of: {options}")
        return value


class PaginationInfo(BaseModel):
    current_page: int
    items_per_page: int
    total_pages: int
    has_previous: bool
    has_next: bool


class InfiniteScrollInfo(BaseModel):
    loaded_items_count: int
    batch_size: int
    has_more_items: bool
    is_loading: bool = False


class CatalogResponse(BaseModel):
    """Response body of the catalog listing."""

    catalog_title: str
    total_products_count: int
    products: list[ProductListItem] = Field(default_factory=list)
    pagination: PaginationInfo | None = None
    infinite_scroll: InfiniteScrollInfo | None = None


class InteractionRequest(BaseModel):
    """Payload recording a view, click or generic interaction."""

    product_id: UUID
    interaction_type: InteractionType


class MessageResponse(BaseModel):
    message: str
