"""Gallery, gallery image and product variation models."""

from __future__ import annotations

from typing import Literal
from uuid import UUID

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field

ImageCategory = Literal["frontal", "lateral", "detalhes", "ambiente", "perspectiva"]
DisplayMode = Literal["page", "modal"]
VariationType = Literal["color", "finish", "material", "texture"]

CAPTION_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000
COLOR_CODE_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class ResolutionUrls(BaseModel):
    """Image URLs for each served resolution."""

    model_config = ConfigDict(frozen=True)

    thumbnail: AnyHttpUrl
    medium: AnyHttpUrl
    large: AnyHttpUrl
    original: AnyHttpUrl


class GalleryRecord(BaseModel):
    """One gallery per product, created lazily on first read."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    product_id: UUID
    main_image_url: AnyHttpUrl | None = Field(
        None,
        description="Full-size URL of the first image added to the gallery",
    )
    total_images: int = 0
    current_image_index: int = 1
    current_variation_id: UUID | None = None
    display_mode: DisplayMode = "page"


class GalleryImageCreate(BaseModel):
    """Payload accepted when adding an image to a gallery."""

    gallery_id: UUID
    thumbnail_url: AnyHttpUrl
    full_size_url: AnyHttpUrl
    display_order: int = Field(..., gt=0)
    image_category: ImageCategory
    caption_text: str | None = Field(None, max_length=CAPTION_MAX_LENGTH)
    detailed_description: str | None = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    resolution_urls: ResolutionUrls


class GalleryImageUpdate(BaseModel):
    """Partial update of a gallery image; unset fields are left unchanged."""

    display_order: int | None = Field(None, gt=0)
    image_category: ImageCategory | None = None
    caption_text: str | None = Field(None, max_length=CAPTION_MAX_LENGTH)
    detailed_description: str | None = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    show_caption: bool | None = None


class GalleryImageRecord(BaseModel):
    """Internal representation persisted inside the gallery store."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    gallery_id: UUID
    thumbnail_url: AnyHttpUrl
    full_size_url: AnyHttpUrl
    display_order: int
    is_active: bool = False
    image_category: ImageCategory
    lazy_load_priority: int = Field(..., ge=1, le=5)
    caption_text: str | None = None
    detailed_description: str | None = None
    show_caption: bool = True
    resolution_urls: ResolutionUrls


class ProductVariationCreate(BaseModel):
    """Payload accepted when creating a product variation."""

    product_id: UUID
    variation_name: str = Field(..., min_length=1, max_length=100)
    variation_type: VariationType
    color_code: str | None = Field(None, pattern=COLOR_CODE_PATTERN)
    is_default: bool = False


class ProductVariationRecord(ProductVariationCreate):
    model_config = ConfigDict(frozen=True)

    id: UUID


class GalleryResponse(BaseModel):
    """Gallery with its ordered images and the product's variations."""

    gallery: GalleryRecord
    images: list[GalleryImageRecord] = Field(default_factory=list)
    variations: list[ProductVariationRecord] = Field(default_factory=list)
