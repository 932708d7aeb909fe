"""Pure helpers deriving popularity, lazy-load priority and "is new" status."""

from __future__ import annotations

from datetime import datetime

from catalog.config import settings

VIEW_WEIGHT = 1
CLICK_WEIGHT = 3
INTERACTION_WEIGHT = 2

LAZY_LOAD_PRIORITIES: dict[str, int] = {
    "frontal": 1,
    "lateral": 2,
    "detalhes": 3,
    "ambiente": 4,
    "perspectiva": 5,
}
LOWEST_LAZY_LOAD_PRIORITY = 5


def popularity_score(views: int, clicks: int, interactions: int) -> int:
    """Weighted sum of the three interaction counters."""

    return (
        views * VIEW_WEIGHT
        + clicks * CLICK_WEIGHT
        + interactions * INTERACTION_WEIGHT
    )


def lazy_load_priority(category: str) -> int:
    """Map an image category to its lazy-load rank (1 loads first).

    Unknown categories get the lowest priority instead of failing.
    """

    return LAZY_LOAD_PRIORITIES.get(category, LOWEST_LAZY_LOAD_PRIORITY)


def is_new(
    created_at: datetime,
    now: datetime,
    window_days: int = settings.NEW_PRODUCT_DAYS,
) -> bool:
    """Return True when the product was created within ``window_days`` of ``now``."""

    # timedelta.days floors, matching whole elapsed days
    return (now - created_at).days <= window_days
