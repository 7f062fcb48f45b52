"""
Integrations layer.
This package contains all code used to communicate with external systems:
- The catalogue source (hosted REST database or local sample rows)
- The order-intent sink (an `orders` table insert)

Key rule:
- The catalog pipeline MUST NOT call external APIs directly.
- It calls integration clients (under storefront/integrations/clients).

Switching implementations:
- The selection of mock vs real clients happens in ONE place (storefront/api/main.py).
"""

from .contracts.interfaces import (
    ALL_CATEGORY_ID,
    CatalogueClient,
    Category,
    IconKey,
    OrderIntent,
    OrderIntentSink,
    Product,
)
from .contracts.product_catalogues import fallback_categories, icon_lookup, parse_icon_key
from .policy.response_wrappers import (
    CatalogConfigurationError,
    CatalogFetchError,
    IntegrationResponseError,
)

__all__ = [
    # interfaces
    "ALL_CATEGORY_ID", "CatalogueClient", "Category", "IconKey",
    "OrderIntent", "OrderIntentSink", "Product",
    # catalogues
    "fallback_categories", "icon_lookup", "parse_icon_key",
    # errors
    "CatalogConfigurationError", "CatalogFetchError", "IntegrationResponseError",
]
