"""In-memory product store."""

from __future__ import annotations

import logging
from datetime import datetime
from uuid import UUID

from catalog.config import settings
from catalog.models.product import ProductRecord
from catalog.services.scoring import popularity_score
from catalog.services.stores.entity_store import EntityStore

logger = logging.getLogger(__name__)


class ProductStore(EntityStore[ProductRecord]):
    """Soft-deletable product store with business-code lookups."""

    def __init__(self, max_products: int = settings.MAX_PRODUCTS) -> None:
        super().__init__("products", max_records=max_products, soft_deletable=True)

    def get_by_code(self, code: str) -> ProductRecord | None:
        matches = self.filter(lambda record: record.code == code)
        return matches[0] if matches else None

    def code_exists(self, code: str, exclude_id: UUID | None = None) -> bool:
        return self.field_exists("code", code, exclude_id=exclude_id)

    def refresh_popularity_scores(self, now: datetime) -> int:
        """Recompute every active product's score from its counters."""

        with self.lock:
            products = self.get_all()
            for product in products:
                self.update(
                    product.id,
                    popularity_score=popularity_score(
                        product.view_count,
                        product.click_count,
                        product.interaction_count,
                    ),
                    last_popularity_update=now,
                )
        logger.info("Refreshed popularity scores for %d products", len(products))
        return len(products)
