"""Pytest fixtures for the storefront catalog tests."""

import pytest

from storefront.integrations.clients.mocks.local_product_catalogues import LocalCatalogueClient, RecordingOrderSink
from storefront.utils.config_loader import StorefrontConfig

SCENARIO_CATEGORIES = [
    {"id": 1, "name": "Electronics", "icon": "Zap"},
    {"id": 3, "name": "Fashion", "icon": "TrendingUp"},
]

SCENARIO_PRODUCTS = [
    {"id": 1, "name": "LED Strip", "category_id": 1, "price": 12, "aliexpress_url": "https://ali.example/1"},
    {"id": 2, "name": "Yoga Mat", "category_id": 3, "price": 20, "aliexpress_url": "https://ali.example/2"},
]


@pytest.fixture
def scenario_rows():
    return SCENARIO_CATEGORIES, SCENARIO_PRODUCTS


@pytest.fixture
def catalogue():
    """In-memory catalogue holding the LED Strip / Yoga Mat scenario."""
    return LocalCatalogueClient(categories=SCENARIO_CATEGORIES, products=SCENARIO_PRODUCTS)


@pytest.fixture
def sink():
    return RecordingOrderSink()


@pytest.fixture
def rest_config():
    return StorefrontConfig(supabase_url="https://shop.example.co", api_key="anon-key", integrations_mode="real")
