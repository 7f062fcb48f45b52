"""
Catalog loader - reads categories and products through a CatalogueClient.

Categories degrade to a static list when the source is unreachable;
products do not (a failed read raises CatalogFetchError to the caller).
"""

import logging
from typing import Any, List, Optional

from storefront.integrations.contracts.interfaces import ALL_CATEGORY_ID, CatalogueClient, Category, CategoryId, Product
from storefront.integrations.contracts.product_catalogues import fallback_categories, with_all_category
from storefront.integrations.policy.response_wrappers import normalize_categories_response, normalize_products_response

logger = logging.getLogger(__name__)


class CatalogLoader:
    def __init__(self, client: CatalogueClient):
        self.client = client
        self._products_in_flight = 0

    @property
    def loading(self) -> bool:
        """True while at least one products request is outstanding."""
        return self._products_in_flight > 0

    async def load_categories(self) -> List[Category]:
        try:
            raw = await self.client.fetch_categories()
            categories = normalize_categories_response(raw)
        except Exception as e:
            logger.warning("Category load failed, using fallback categories: %s", e)
            return fallback_categories()

        logger.info("Loaded %d categories", len(categories))
        return with_all_category(categories)

    async def load_products(self, category_filter: CategoryId = ALL_CATEGORY_ID) -> List[Product]:
        """Load products, narrowed by category unless the filter is "all".

        Raises:
            CatalogFetchError: if the source could not be read
        """
        category_id = None if category_filter == ALL_CATEGORY_ID else category_filter

        self._products_in_flight += 1
        try:
            raw = await self.client.fetch_products(category_id)
        finally:
            self._products_in_flight -= 1

        products = normalize_products_response(raw)
        logger.info("Loaded %d products for category %s", len(products), category_filter)
        return products

    async def find_product(self, product_id: Any) -> Optional[Product]:
        raw = await self.client.fetch_product(product_id)
        matches = [p for p in normalize_products_response(raw) if str(p.id) == str(product_id)]
        return matches[0] if matches else None

