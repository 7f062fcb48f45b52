import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import RedirectResponse

from storefront.catalog.loader import CatalogLoader
from storefront.catalog.product_cards import ProductCardGenerator
from storefront.catalog.tracker import IntentTracker
from storefront.catalog.view_state import ViewStateController
from storefront.integrations.contracts.interfaces import ALL_CATEGORY_ID, CatalogueClient, CategoryId, OrderIntentSink
from storefront.integrations.policy.response_wrappers import CatalogFetchError

logger = logging.getLogger(__name__)

api = APIRouter()
storefront_api = api


def get_catalogue_client(request: Request) -> CatalogueClient:
    return request.app.state.catalogue_client


def get_order_sink(request: Request) -> OrderIntentSink:
    return request.app.state.order_sink


def get_tracking_timeout(request: Request) -> float:
    return request.app.state.config.tracking_timeout_seconds


def _parse_category(value: Optional[str]) -> CategoryId:
    raw = (value or "").strip()
    if not raw or raw.lower() == ALL_CATEGORY_ID:
        return ALL_CATEGORY_ID
    return int(raw) if raw.isdigit() else raw


async def _load_view(client: CatalogueClient, category: Optional[str], search: str) -> ViewStateController:
    controller = ViewStateController(CatalogLoader(client))
    controller.set_search(search)
    await controller.select_category(_parse_category(category))
    return controller


@api.get("/storefront", tags=["Storefront"])
async def storefront_page(
    category: Optional[str] = Query(default=ALL_CATEGORY_ID),
    search: str = Query(default=""),
    client: CatalogueClient = Depends(get_catalogue_client),
) -> Dict[str, Any]:
    controller = await _load_view(client, category, search)
    return ProductCardGenerator().generate_page(controller)


@api.get("/categories", tags=["Storefront"])
async def list_categories(client: CatalogueClient = Depends(get_catalogue_client)) -> List[Dict[str, Any]]:
    categories = await CatalogLoader(client).load_categories()
    return ProductCardGenerator().generate_category_controls(categories, ALL_CATEGORY_ID)


@api.get("/products", tags=["Storefront"])
async def list_products(
    category: Optional[str] = Query(default=ALL_CATEGORY_ID),
    search: str = Query(default=""),
    client: CatalogueClient = Depends(get_catalogue_client),
) -> Dict[str, Any]:
    controller = await _load_view(client, category, search)
    snapshot = controller.snapshot()
    return {
        "selected_category": snapshot["selected_category"],
        "search": snapshot["search"],
        "loading": snapshot["loading"],
        "error": snapshot["error"],
        "products": snapshot["products"],
    }


@api.get("/products/{product_id}/buy", tags=["Storefront"])
@api.post("/products/{product_id}/buy", tags=["Storefront"])
async def buy_product(
    product_id: str,
    client: CatalogueClient = Depends(get_catalogue_client),
    sink: OrderIntentSink = Depends(get_order_sink),
    tracking_timeout: float = Depends(get_tracking_timeout),
):
    try:
        product = await CatalogLoader(client).find_product(product_id)
    except CatalogFetchError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=f"Catalogue unavailable: {e}") from e

    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown product '{product_id}'")

    # The HTTP redirect is the "new browsing context" here; the navigator only captures the target.
    tracker = IntentTracker(sink, navigator=lambda url: None, timeout_seconds=tracking_timeout)
    outcome = await tracker.on_purchase_intent(product)
    if outcome.redirect_url is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Product '{product_id}' has no marketplace link")

    logger.info("Redirecting product %s (tracked=%s)", product.id, outcome.tracked)
    return RedirectResponse(url=outcome.redirect_url, status_code=status.HTTP_303_SEE_OTHER)
