"""Product CRUD and interaction tracking on top of the product store."""

from __future__ import annotations

import logging
from uuid import UUID

from catalog.config import settings
from catalog.models.product import (
    InteractionType,
    MessageResponse,
    ProductCreate,
    ProductDetail,
    ProductRecord,
    ProductUpdate,
)
from catalog.services.catalog_assembler import Clock, to_detail, utc_now
from catalog.services.errors import DuplicateCodeError, NotFoundError
from catalog.services.scoring import popularity_score
from catalog.services.stores.product_store import ProductStore

logger = logging.getLogger(__name__)

_COUNTER_FIELDS: dict[str, str] = {
    "view": "view_count",
    "click": "click_count",
    "interaction": "interaction_count",
}


class ProductService:
    """Create, read, replace, soft-delete and score products."""

    def __init__(
        self,
        store: ProductStore,
        *,
        new_product_days: int = settings.NEW_PRODUCT_DAYS,
        clock: Clock = utc_now,
    ) -> None:
        self._store = store
        self._new_product_days = new_product_days
        self._clock = clock

    def _detail(self, record: ProductRecord) -> ProductDetail:
        return to_detail(record, self._clock(), self._new_product_days)

    def _require(self, product_id: UUID) -> ProductRecord:
        record = self._store.get_by_id(product_id)
        if record is None:
            raise NotFoundError("Product not found")
        return record

    def create(self, payload: ProductCreate) -> ProductDetail:
        """Create a product with zeroed counters.

        Raises:
            DuplicateCodeError: If an active product already uses the code.
            CapacityExceededError: If the store is full.
        """
        now = self._clock()
        record = ProductRecord(
            **payload.model_dump(),
            id=self._store.next_id(),
            created_at=now,
            last_popularity_update=now,
        )

        with self._store.lock:
            if self._store.code_exists(payload.code):
                raise DuplicateCodeError("Product code already exists")
            self._store.create(record)

        logger.info("Created product %s (code=%s)", record.id, record.code)
        logger.debug("Product record: %s", record.model_dump_json())
        return self._detail(record)

    def get(self, product_id: UUID) -> ProductDetail:
        return self._detail(self._require(product_id))

    def get_by_code(self, code: str) -> ProductDetail:
        record = self._store.get_by_code(code)
        if record is None:
            raise NotFoundError("Product not found")
        return self._detail(record)

    def update(self, product_id: UUID, payload: ProductUpdate) -> ProductDetail:
        """Replace the editable fields of an active product.

        The code uniqueness check excludes the product itself, so saving a
        product with its unchanged code always succeeds.
        """
        with self._store.lock:
            self._require(product_id)
            if self._store.code_exists(payload.code, exclude_id=product_id):
                raise DuplicateCodeError("Product code already exists")
            updated = self._store.update(product_id, **payload.model_dump())

        logger.info("Updated product %s", product_id)
        return self._detail(updated)

    def delete(self, product_id: UUID) -> MessageResponse:
        if not self._store.soft_delete(product_id):
            raise NotFoundError("Product not found")
        logger.info("Soft-deleted product %s", product_id)
        return MessageResponse(message="Product deleted successfully")

    def record_interaction(
        self,
        product_id: UUID,
        interaction_type: InteractionType,
    ) -> MessageResponse:
        """Increment one counter and recompute the popularity score."""

        counter = _COUNTER_FIELDS[interaction_type]
        with self._store.lock:
            product = self._require(product_id)
            counters = {
                "view_count": product.view_count,
                "click_count": product.click_count,
                "interaction_count": product.interaction_count,
            }
            counters[counter] += 1
            self._store.update(
                product_id,
                **counters,
                popularity_score=popularity_score(
                    counters["view_count"],
                    counters["click_count"],
                    counters["interaction_count"],
                ),
                last_popularity_update=self._clock(),
            )

        logger.debug(
            "Recorded product interaction",
            extra={"product_id": str(product_id), "interaction_type": interaction_type},
        )
        return MessageResponse(message="Interaction recorded successfully")

    def refresh_popularity(self) -> MessageResponse:
        """Recompute every active product's score from its counters."""

        refreshed = self._store.refresh_popularity_scores(self._clock())
        return MessageResponse(
            message=f"Popularity scores refreshed for {refreshed} products"
        )
