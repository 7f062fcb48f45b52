"""Catalog pipeline: loading, filtering, view state and purchase-intent tracking."""

from .filters import visible
from .loader import CatalogLoader
from .tracker import IntentTracker, PurchaseOutcome
from .view_state import ControllerPhase, ViewState, ViewStateController

__all__ = [
    "CatalogLoader",
    "ControllerPhase",
    "IntentTracker",
    "PurchaseOutcome",
    "ViewState",
    "ViewStateController",
    "visible",
]
