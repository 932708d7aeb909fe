"""In-memory storage for galleries, their images and product variations."""

from __future__ import annotations

from threading import RLock
from uuid import UUID

from catalog.models.gallery import (
    GalleryImageRecord,
    GalleryRecord,
    ProductVariationRecord,
)
from catalog.services.stores.entity_store import EntityStore


class GalleryStore:
    """Three entity stores sharing one lock so gallery writes serialize together."""

    def __init__(self) -> None:
        self.lock = RLock()
        self.galleries: EntityStore[GalleryRecord] = EntityStore(
            "galleries", lock=self.lock
        )
        self.images: EntityStore[GalleryImageRecord] = EntityStore(
            "gallery images", lock=self.lock
        )
        self.variations: EntityStore[ProductVariationRecord] = EntityStore(
            "product variations", lock=self.lock
        )

    def get_by_product_id(self, product_id: UUID) -> GalleryRecord | None:
        matches = self.galleries.filter(lambda gallery: gallery.product_id == product_id)
        return matches[0] if matches else None

    def images_for_gallery(self, gallery_id: UUID) -> list[GalleryImageRecord]:
        """Images ordered by lazy-load priority, then display order."""

        images = self.images.filter(lambda image: image.gallery_id == gallery_id)
        return sorted(
            images,
            key=lambda image: (image.lazy_load_priority, image.display_order),
        )

    def count_images(self, gallery_id: UUID) -> int:
        return len(self.images.filter(lambda image: image.gallery_id == gallery_id))

    def variations_for_product(self, product_id: UUID) -> list[ProductVariationRecord]:
        return self.variations.filter(
            lambda variation: variation.product_id == product_id
        )

    def clear(self) -> None:
        with self.lock:
            self.galleries.clear()
            self.images.clear()
            self.variations.clear()
