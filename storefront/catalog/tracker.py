"""
Purchase-intent tracking.

A "Buy" action records an OrderIntent in the sink, then always hands the
shopper off to the marketplace URL. Tracking never gates the redirect.
"""

import asyncio
import inspect
import logging
import webbrowser
from dataclasses import dataclass
from typing import Any, Callable, Optional

from storefront.integrations.contracts.interfaces import OrderIntent, OrderIntentSink, Product

logger = logging.getLogger(__name__)

Navigator = Callable[[str], Any]


@dataclass
class PurchaseOutcome:
    redirect_url: Optional[str]
    tracked: bool


class IntentTracker:
    def __init__(
        self,
        sink: OrderIntentSink,
        navigator: Navigator = webbrowser.open_new_tab,
        timeout_seconds: float = 3.0,
    ):
        self.sink = sink
        self.navigator = navigator
        self.timeout_seconds = timeout_seconds

    async def on_purchase_intent(self, product: Product) -> PurchaseOutcome:
        tracked = await self._track(OrderIntent.from_product(product))

        url = product.aliexpress_url
        if not url:
            logger.warning("Product %s has no marketplace URL; nothing to open", product.id)
            return PurchaseOutcome(redirect_url=None, tracked=tracked)

        opened = self.navigator(url)
        if inspect.isawaitable(opened):
            await opened
        return PurchaseOutcome(redirect_url=url, tracked=tracked)

    async def _track(self, intent: OrderIntent) -> bool:
        try:
            await asyncio.wait_for(self.sink.record(intent), timeout=self.timeout_seconds)
            return True
        except Exception as e:
            logger.error("Failed to track order for product %s: %r", intent.product_id, e)
            return False
