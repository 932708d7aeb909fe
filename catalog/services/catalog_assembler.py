"""Catalog retrieval pipeline: derive, sort and page the active products."""

from __future__ import annotations

import logging
import math
import unicodedata
from collections.abc import Callable, Iterable
from datetime import UTC, datetime

from catalog.config import settings
from catalog.models.product import (
    CatalogFilters,
    CatalogResponse,
    InfiniteScrollInfo,
    PaginationInfo,
    ProductDetail,
    ProductListItem,
    ProductRecord,
    SortCriteria,
)
from catalog.services.scoring import is_new
from catalog.services.stores.product_store import ProductStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


def collation_key(name: str) -> tuple[str, str]:
    """Accent- and case-insensitive sort key, so "Água" sorts with the A's.

    The original name breaks ties between names that fold to the same key.
    """

    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(char for char in decomposed if not unicodedata.combining(char))
    return base.casefold(), name


def sort_products(
    products: list[ProductDetail],
    criteria: SortCriteria,
) -> list[ProductDetail]:
    """Stable sort by ``criteria``; ties keep their enumeration order.

    Products without a price always come last, in both price orders.
    """

    if criteria == "name_asc":
        return sorted(products, key=lambda p: collation_key(p.name))
    if criteria == "name_desc":
        return sorted(products, key=lambda p: collation_key(p.name), reverse=True)
    if criteria in ("price_asc", "price_desc"):
        priced = [p for p in products if p.price is not None]
        unpriced = [p for p in products if p.price is None]
        priced.sort(key=lambda p: p.price, reverse=criteria == "price_desc")
        return priced + unpriced
    if criteria == "date_newest":
        return sorted(products, key=lambda p: p.created_at, reverse=True)
    if criteria == "date_oldest":
        return sorted(products, key=lambda p: p.created_at)
    if criteria == "popularity":
        return sorted(products, key=lambda p: p.popularity_score, reverse=True)
    return list(products)


def to_detail(
    product: ProductRecord,
    now: datetime,
    new_product_days: int = settings.NEW_PRODUCT_DAYS,
) -> ProductDetail:
    """Full product shape with ``is_new`` computed against ``now``."""

    return ProductDetail(
        **product.model_dump(),
        is_new=is_new(product.created_at, now, new_product_days),
    )


def to_list_item(product: ProductDetail) -> ProductListItem:
    return ProductListItem(
        id=product.id,
        name=product.name,
        code=product.code,
        main_image_url=product.main_image_url,
        price=product.price,
        availability_status=product.availability_status,
        is_featured=product.is_featured,
        is_new=product.is_new,
        is_promotional=product.is_promotional,
        promotional_price=product.promotional_price,
    )


class CatalogAssembler:
    """Builds paginated or infinite-scroll catalog pages from the product store."""

    def __init__(
        self,
        store: ProductStore,
        *,
        catalog_title: str,
        batch_size: int = settings.INFINITE_SCROLL_BATCH_SIZE,
        new_product_days: int = settings.NEW_PRODUCT_DAYS,
        clock: Clock = utc_now,
    ) -> None:
        self._store = store
        self._catalog_title = catalog_title
        self._batch_size = batch_size
        self._new_product_days = new_product_days
        self._clock = clock

    def with_derived_fields(
        self, products: Iterable[ProductRecord]
    ) -> list[ProductDetail]:
        """Attach a freshly computed ``is_new`` to each record."""

        now = self._clock()
        return [to_detail(product, now, self._new_product_days) for product in products]

    def catalog(self, filters: CatalogFilters) -> CatalogResponse:
        products = self.with_derived_fields(self._store.get_all())
        products = sort_products(products, filters.sort_criteria)
        total = len(products)

        response = CatalogResponse(
            catalog_title=self._catalog_title,
            total_products_count=total,
        )

        if filters.navigation_mode == "pagination":
            per_page = filters.items_per_page
            total_pages = max(1, math.ceil(total / per_page))
            page = min(filters.current_page, total_pages)
            start = (page - 1) * per_page
            selected = products[start : start + per_page]
            response.pagination = PaginationInfo(
                current_page=page,
                items_per_page=per_page,
                total_pages=total_pages,
                has_previous=page > 1,
                has_next=page < total_pages,
            )
        else:
            start = filters.loaded_items_count
            end = start + self._batch_size
            selected = products[start:end]
            response.infinite_scroll = InfiniteScrollInfo(
                loaded_items_count=min(end, total),
                batch_size=self._batch_size,
                has_more_items=end < total,
            )

        response.products = [to_list_item(product) for product in selected]

        logger.debug(
            "Catalog assembled",
            extra={
                "sort_criteria": filters.sort_criteria,
                "navigation_mode": filters.navigation_mode,
                "total": total,
                "returned": len(selected),
            },
        )
        return response
