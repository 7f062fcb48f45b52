from typing import Any, Callable, Dict, List, Optional, TypeVar

from .interfaces import ALL_CATEGORY_ID, Category, IconKey

"""
Product catalogue contracts.

Defines the category/product helpers shared by the REST and local
catalogue clients, e.g.:
- the synthetic "all" category injected in front of remote categories
- the static fallback categories used when the remote source is down
- the icon-key lookup with an explicit default

These contracts must be used by both:
- clients/mocks/local_product_catalogues.py (local data source for development)
- clients/real_http/rest_catalogue.py (REST catalogue source)
"""

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------

def all_category() -> Category:
    return Category(id=ALL_CATEGORY_ID, name="All", icon=IconKey.PACKAGE)


def fallback_categories() -> List[Category]:
    """Static category list shown when the remote source cannot be read."""
    return [
        all_category(),
        Category(id=1, name="Electronics", icon=IconKey.ZAP),
        Category(id=2, name="Home & Garden", icon=IconKey.HOME),
        Category(id=3, name="Fashion", icon=IconKey.TRENDING_UP),
    ]


def with_all_category(categories: List[Category]) -> List[Category]:
    return [all_category(), *categories]


# ---------------------------------------------------------------------------
# Icons
# ---------------------------------------------------------------------------

def parse_icon_key(raw: Any) -> IconKey:
    """Map a remote icon name onto a known key; unknown names become Package."""
    if isinstance(raw, IconKey):
        return raw
    try:
        return IconKey(str(raw))
    except ValueError:
        return IconKey.PACKAGE


def icon_lookup(
    handlers: Dict[IconKey, T],
    key: Optional[IconKey],
    default: Optional[Callable[[], T]] = None,
) -> T:
    """Resolve an icon key against a handler table.

    Falls back to the Package handler, or to ``default()`` when the table
    has no Package entry either.
    """
    if key in handlers:
        return handlers[key]
    if IconKey.PACKAGE in handlers:
        return handlers[IconKey.PACKAGE]
    if default is None:
        raise KeyError(f"No handler for icon {key!r} and no Package default")
    return default()
