"""Error handling helpers for the storefront API."""
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        logger.error("Unhandled exception in storefront request: %s", exc, exc_info=True)
        return {
            "message": "Something went wrong while loading the store. Please try again later.",
            "fallback": True,
            "metadata": {"error": str(exc), "context": context or {}},
        }
