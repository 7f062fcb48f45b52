"""
Real Catalogue HTTP Client.

Purpose:
- Reads `categories` and `products` from the PostgREST-style catalogue API
- Narrows products with equality filters (`category_id=eq.<id>`, `id=eq.<id>`)

Important:
- Returns the decoded JSON body untouched; shaping into contracts happens in
  storefront.integrations.policy.response_wrappers.
- This client should be the ONLY place that reads catalogue data over HTTP.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from storefront.integrations.contracts.interfaces import CatalogueClient, CategoryId
from storefront.integrations.policy.response_wrappers import CatalogConfigurationError, CatalogFetchError
from storefront.utils.config_loader import StorefrontConfig

logger = logging.getLogger(__name__)


class RestCatalogueClient(CatalogueClient):
    def __init__(self, config: StorefrontConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self.config = config
        self._transport = transport

    async def fetch_categories(self) -> Any:
        return await self._select(self.config.categories_table)

    async def fetch_products(self, category_id: Optional[CategoryId] = None) -> Any:
        filters = {"category_id": f"eq.{category_id}"} if category_id is not None else {}
        return await self._select(self.config.products_table, filters)

    async def fetch_product(self, product_id: Any) -> Any:
        try:
            return await self._select(self.config.products_table, {"id": f"eq.{product_id}"})
        except CatalogFetchError as e:
            # PostgREST rejects ids that do not fit the column type; no such product exists.
            if e.status_code == 400:
                logger.info("Catalogue rejected product id %r; treating as not found", product_id)
                return []
            raise

    async def _select(self, table: str, filters: Optional[Dict[str, str]] = None) -> Any:
        if not self.config.credentials_configured:
            raise CatalogConfigurationError("SUPABASE_URL / SUPABASE_ANON_KEY are not configured.")

        url = f"{self.config.rest_base}/{table}"
        params = {"select": "*", **(filters or {})}
        try:
            async with httpx.AsyncClient(timeout=self.config.timeout_seconds, transport=self._transport) as client:
                response = await client.get(url, params=params, headers=self.config.auth_headers())
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("Catalogue API error for %s: %s %s", table, e.response.status_code, e.response.text)
            raise CatalogFetchError(
                f"{table} request failed with HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            logger.error("Request error connecting to catalogue API (%s): %s", table, e)
            raise CatalogFetchError(f"{table} request failed: {e}") from e

        try:
            data = response.json()
        except ValueError:
            logger.warning("Catalogue API returned a non-JSON body for %s", table)
            return None
        logger.debug("Fetched %s with filters %s", table, filters or {})
        return data
