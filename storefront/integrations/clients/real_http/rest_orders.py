"""
Real Order-Intent HTTP Sink.

Inserts one row into the `orders` table per "Buy" click. Used when the
catalogue REST credentials are configured.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from storefront.integrations.contracts.interfaces import OrderIntent, OrderIntentSink
from storefront.integrations.policy.response_wrappers import CatalogConfigurationError
from storefront.utils.config_loader import StorefrontConfig

logger = logging.getLogger(__name__)


class RestOrderSink(OrderIntentSink):
    def __init__(self, config: StorefrontConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self.config = config
        self._transport = transport

    async def record(self, intent: OrderIntent) -> None:
        if not self.config.credentials_configured:
            raise CatalogConfigurationError("SUPABASE_URL / SUPABASE_ANON_KEY are not configured.")

        headers = {
            **self.config.auth_headers(),
            "Content-Type": "application/json",
            "Prefer": "return=minimal",
        }
        url = f"{self.config.rest_base}/{self.config.orders_table}"
        async with httpx.AsyncClient(timeout=self.config.tracking_timeout_seconds, transport=self._transport) as client:
            response = await client.post(url, json=[intent.to_record()], headers=headers)
            response.raise_for_status()
        logger.info("Recorded order intent for product %s", intent.product_id)
