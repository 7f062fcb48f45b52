"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.api.endpoints.storefront import storefront_api
from storefront.error_handler import ErrorHandler
from storefront.integrations.clients.mocks.local_product_catalogues import LocalCatalogueClient, RecordingOrderSink
from storefront.integrations.clients.real_http.rest_catalogue import RestCatalogueClient
from storefront.integrations.clients.real_http.rest_orders import RestOrderSink
from storefront.integrations.contracts.interfaces import CatalogueClient, OrderIntentSink
from storefront.utils.config_loader import StorefrontConfig, load_storefront_config

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

error_handler = ErrorHandler()


# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================

def select_integrations(config: StorefrontConfig):
    """The one place that decides between the REST clients and the local ones."""
    if config.use_real_integrations:
        logger.info("Using REST catalogue at %s", config.rest_base)
        return RestCatalogueClient(config), RestOrderSink(config)

    logger.info("Using local sample catalogue (INTEGRATIONS_MODE=%s)", config.integrations_mode)
    return LocalCatalogueClient(), RecordingOrderSink()


def create_app(
    config: Optional[StorefrontConfig] = None,
    catalogue_client: Optional[CatalogueClient] = None,
    order_sink: Optional[OrderIntentSink] = None,
) -> FastAPI:
    config = config or load_storefront_config()
    default_client, default_sink = select_integrations(config)

    app = FastAPI(
        title="FindItOnAli Storefront API",
        description="Affiliate product catalogue with category/search filtering and buy-click tracking",
        version="1.0.0",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.config = config
    app.state.catalogue_client = catalogue_client or default_client
    app.state.order_sink = order_sink or default_sink

    app.include_router(storefront_api, prefix="/api/v1")

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception):
        payload = error_handler.handle_exception(exc, context={"path": request.url.path})
        return JSONResponse(status_code=500, content=payload)

    @app.get("/health")
    async def health():
        return {
            "status": "ok",
            "catalogue": type(app.state.catalogue_client).__name__,
            "credentials_configured": config.credentials_configured,
        }

    return app


app = create_app()
