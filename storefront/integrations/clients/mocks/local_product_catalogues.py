"""
Local Product Catalogue Client (Mock/Local).

Purpose:
- Acts as a development-time catalogue source when the hosted database is not available.
- Serves rows shaped exactly like the REST API (plain dicts), so the same
  response wrappers run in both modes.

Usage:
- Wired in storefront/api/main.py when INTEGRATIONS_MODE=mock or no SUPABASE_URL is set
- Also used by the test-suite as an in-process catalogue

Swap:
Replace with clients/real_http/rest_catalogue.py once credentials are configured.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Optional

from storefront.integrations.contracts.interfaces import (
    CatalogueClient,
    CategoryId,
    OrderIntent,
    OrderIntentSink,
    category_ids_match,
)

logger = logging.getLogger(__name__)

SAMPLE_CATEGORIES: List[Dict[str, Any]] = [
    {"id": 1, "name": "Electronics", "icon": "Zap"},
    {"id": 2, "name": "Home & Garden", "icon": "Home"},
    {"id": 3, "name": "Fashion", "icon": "TrendingUp"},
]

SAMPLE_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "LED Strip Lights 10m",
        "description": "App-controlled RGB strip that syncs with music",
        "image_url": "https://images.example.com/led-strip.jpg",
        "rating": 4.7,
        "reviews": 12843,
        "price": 12.99,
        "category_id": 1,
        "aliexpress_url": "https://www.aliexpress.com/item/1005001.html",
    },
    {
        "id": 2,
        "name": "Magnetic Phone Mount",
        "description": "Dashboard mount with 360° rotation",
        "image_url": "https://images.example.com/phone-mount.jpg",
        "rating": 4.5,
        "reviews": 5210,
        "price": 6.49,
        "category_id": 1,
        "aliexpress_url": "https://www.aliexpress.com/item/1005002.html",
    },
    {
        "id": 3,
        "name": "Self-Watering Planter",
        "description": "Keeps herbs alive for two weeks unattended",
        "image_url": "https://images.example.com/planter.jpg",
        "rating": 4.6,
        "reviews": 2301,
        "price": 9.8,
        "category_id": 2,
        "aliexpress_url": "https://www.aliexpress.com/item/1005003.html",
    },
    {
        "id": 4,
        "name": "Non-Slip Yoga Mat",
        "description": "6mm TPE mat with alignment lines",
        "image_url": "https://images.example.com/yoga-mat.jpg",
        "rating": 4.8,
        "reviews": 8760,
        "price": 19.99,
        "category_id": 3,
        "aliexpress_url": "https://www.aliexpress.com/item/1005004.html",
    },
]


class LocalCatalogueClient(CatalogueClient):
    def __init__(
        self,
        categories: Optional[List[Dict[str, Any]]] = None,
        products: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        self._categories = copy.deepcopy(SAMPLE_CATEGORIES if categories is None else categories)
        self._products = copy.deepcopy(SAMPLE_PRODUCTS if products is None else products)
        self.requests: List[Dict[str, Any]] = []

    async def fetch_categories(self) -> Any:
        self.requests.append({"table": "categories"})
        return copy.deepcopy(self._categories)

    async def fetch_products(self, category_id: Optional[CategoryId] = None) -> Any:
        self.requests.append({"table": "products", "category_id": category_id})
        rows = self._products
        if category_id is not None:
            rows = [row for row in rows if category_ids_match(row.get("category_id"), category_id)]
        return copy.deepcopy(rows)

    async def fetch_product(self, product_id: Any) -> Any:
        self.requests.append({"table": "products", "id": product_id})
        return [copy.deepcopy(row) for row in self._products if str(row.get("id")) == str(product_id)]


class RecordingOrderSink(OrderIntentSink):
    """Keeps order intents in memory instead of writing them anywhere."""

    def __init__(self) -> None:
        self.intents: List[OrderIntent] = []

    async def record(self, intent: OrderIntent) -> None:
        self.intents.append(intent)
        logger.info("Recorded order intent locally for product %s", intent.product_id)
