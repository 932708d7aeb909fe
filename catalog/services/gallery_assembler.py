"""Gallery retrieval and image/variation writes.

Every compound sequence (get-or-create, capacity check + insert + gallery
totals) runs under the gallery store's lock, so concurrent requests cannot
jointly overshoot the image limit or write a stale ``total_images``.
"""

from __future__ import annotations

import logging
from uuid import UUID

from catalog.config import settings
from catalog.models.gallery import (
    GalleryImageCreate,
    GalleryImageRecord,
    GalleryImageUpdate,
    GalleryRecord,
    GalleryResponse,
    ProductVariationCreate,
    ProductVariationRecord,
)
from catalog.models.product import MessageResponse
from catalog.services.errors import CapacityExceededError, NotFoundError
from catalog.services.scoring import lazy_load_priority
from catalog.services.stores.gallery_store import GalleryStore

logger = logging.getLogger(__name__)

_NULLABLE_IMAGE_FIELDS = frozenset({"caption_text", "detailed_description"})


class GalleryAssembler:
    """Maintains galleries and their denormalized main image / image count."""

    def __init__(
        self,
        store: GalleryStore,
        *,
        max_images: int = settings.GALLERY_MAX_IMAGES,
    ):
        self._store = store
        self._max_images = max_images

    def get(self, product_id: UUID, variation_id: UUID | None = None) -> GalleryResponse:
        """Return the product's gallery, creating an empty one on first access.

        ``variation_id`` is recorded on a newly created gallery but does not
        filter the returned images: every image of the gallery is returned.
        """
        with self._store.lock:
            gallery = self._store.get_by_product_id(product_id)
            if gallery is None:
                gallery = self._store.galleries.create(
                    GalleryRecord(
                        id=self._store.galleries.next_id(),
                        product_id=product_id,
                        current_variation_id=variation_id,
                    )
                )
                logger.info(
                    "Created gallery %s for product %s", gallery.id, product_id
                )

            images = self._store.images_for_gallery(gallery.id)
            variations = self._store.variations_for_product(product_id)

        return GalleryResponse(gallery=gallery, images=images, variations=variations)

    def create_image(self, payload: GalleryImageCreate) -> GalleryImageRecord:
        """Add an image to an existing gallery.

        The first image of an empty gallery becomes its main image; later
        images never replace it.

        Raises:
            NotFoundError: If the gallery does not exist.
            CapacityExceededError: If the gallery already holds the maximum.
        """
        image = GalleryImageRecord(
            **payload.model_dump(),
            id=self._store.images.next_id(),
            lazy_load_priority=lazy_load_priority(payload.image_category),
            show_caption=True,
        )

        with self._store.lock:
            gallery = self._store.galleries.get_by_id(payload.gallery_id)
            if gallery is None:
                raise NotFoundError("Gallery not found")

            current = self._store.count_images(gallery.id)
            if current >= self._max_images:
                logger.warning(
                    "Gallery %s is full (%d images), rejecting new image",
                    gallery.id,
                    current,
                )
                raise CapacityExceededError(
                    "Maximum images limit reached for this gallery"
                )

            self._store.images.create(image)

            gallery_updates = {"total_images": self._store.count_images(gallery.id)}
            if current == 0:
                gallery_updates["main_image_url"] = image.full_size_url
            self._store.galleries.update(gallery.id, **gallery_updates)

        logger.info("Added image %s to gallery %s", image.id, image.gallery_id)
        return image

    def update_image(
        self,
        image_id: UUID,
        payload: GalleryImageUpdate,
    ) -> GalleryImageRecord:
        # Only captions may be cleared with an explicit null.
        updates = {
            field: value
            for field, value in payload.model_dump(exclude_unset=True).items()
            if value is not None or field in _NULLABLE_IMAGE_FIELDS
        }
        if "image_category" in updates:
            updates["lazy_load_priority"] = lazy_load_priority(updates["image_category"])

        with self._store.lock:
            if self._store.images.get_by_id(image_id) is None:
                raise NotFoundError("Image not found")
            updated = self._store.images.update(image_id, **updates)

        logger.info("Updated gallery image %s", image_id)
        return updated

    def delete_image(self, image_id: UUID) -> MessageResponse:
        with self._store.lock:
            image = self._store.images.delete(image_id)
            if image is None:
                raise NotFoundError("Image not found")
            self._store.galleries.update(
                image.gallery_id,
                total_images=self._store.count_images(image.gallery_id),
            )

        logger.info("Deleted image %s from gallery %s", image_id, image.gallery_id)
        return MessageResponse(message="Image deleted successfully")

    def create_variation(self, payload: ProductVariationCreate) -> ProductVariationRecord:
        # The product is not looked up; any product id is accepted.
        variation = ProductVariationRecord(
            **payload.model_dump(),
            id=self._store.variations.next_id(),
        )
        self._store.variations.create(variation)
        logger.info(
            "Created %s variation %s for product %s",
            variation.variation_type,
            variation.id,
            variation.product_id,
        )
        return variation
