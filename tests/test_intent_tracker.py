import asyncio

import pytest

from storefront.catalog.tracker import IntentTracker
from storefront.integrations.contracts.interfaces import OrderIntent, Product

PRODUCT = Product(id=7, name="LED Strip", price=12.5, aliexpress_url="https://ali.example/7")


class FakeNavigator:
    def __init__(self):
        self.opened = []

    def __call__(self, url):
        self.opened.append(url)


class OutageSink:
    async def record(self, intent):
        raise ConnectionError("sink down")


class HangingSink:
    async def record(self, intent):
        await asyncio.sleep(3600)


@pytest.mark.asyncio
async def test_records_intent_then_redirects(sink):
    nav = FakeNavigator()
    outcome = await IntentTracker(sink, navigator=nav).on_purchase_intent(PRODUCT)

    assert sink.intents == [OrderIntent(product_id=7, product_name="LED Strip", price=12.5)]
    assert nav.opened == ["https://ali.example/7"]
    assert outcome.tracked is True
    assert outcome.redirect_url == "https://ali.example/7"


@pytest.mark.asyncio
async def test_sink_outage_still_redirects_exactly_once(caplog):
    nav = FakeNavigator()
    outcome = await IntentTracker(OutageSink(), navigator=nav).on_purchase_intent(PRODUCT)

    assert nav.opened == ["https://ali.example/7"]
    assert outcome.tracked is False
    assert "Failed to track order" in caplog.text


@pytest.mark.asyncio
async def test_hung_sink_is_bounded_by_timeout():
    nav = FakeNavigator()
    tracker = IntentTracker(HangingSink(), navigator=nav, timeout_seconds=0.01)

    outcome = await tracker.on_purchase_intent(PRODUCT)

    assert outcome.tracked is False
    assert nav.opened == ["https://ali.example/7"]


@pytest.mark.asyncio
async def test_async_navigator_is_awaited(sink):
    opened = []

    async def navigate(url):
        opened.append(url)

    await IntentTracker(sink, navigator=navigate).on_purchase_intent(PRODUCT)
    assert opened == ["https://ali.example/7"]


@pytest.mark.asyncio
async def test_missing_url_is_tracked_but_not_opened(sink):
    nav = FakeNavigator()
    outcome = await IntentTracker(sink, navigator=nav).on_purchase_intent(Product(id=8, name="Mystery"))

    assert nav.opened == []
    assert outcome.redirect_url is None
    assert sink.intents[0].product_id == 8


@pytest.mark.asyncio
async def test_each_click_is_a_separate_intent(sink):
    nav = FakeNavigator()
    tracker = IntentTracker(sink, navigator=nav)

    await tracker.on_purchase_intent(PRODUCT)
    await tracker.on_purchase_intent(PRODUCT)

    assert len(sink.intents) == 2
    assert len(nav.opened) == 2
