"""
Storefront view state - category selection, search text and the loading flag.

Changing the category reloads categories and products; changing the search
text only recomputes the visible list from the products already held.
"""

import asyncio
import logging
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from storefront.catalog.filters import visible
from storefront.catalog.loader import CatalogLoader
from storefront.integrations.contracts.interfaces import ALL_CATEGORY_ID, Category, CategoryId, Product

logger = logging.getLogger(__name__)

PRODUCTS_UNAVAILABLE = "Products are unavailable right now. Please try again shortly."


class ControllerPhase(str, Enum):
    IDLE = "Idle"
    LOADING_PRODUCTS = "LoadingProducts"


@dataclass
class ViewState:
    selected_category: CategoryId = ALL_CATEGORY_ID
    search: str = ""
    loading: bool = True
    categories: List[Category] = field(default_factory=list)
    products: List[Product] = field(default_factory=list)
    error: Optional[str] = None


Observer = Callable[[ViewState], None]


class ViewStateController:
    def __init__(self, loader: CatalogLoader):
        self.loader = loader
        self.state = ViewState()
        self._generation = 0
        self._observers: List[Observer] = []

    @property
    def phase(self) -> ControllerPhase:
        return ControllerPhase.LOADING_PRODUCTS if self.state.loading else ControllerPhase.IDLE

    @property
    def visible_products(self) -> List[Product]:
        return visible(self.state.products, self.state.search)

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register a callback run after every state change; returns an unsubscribe function."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    async def mount(self) -> None:
        await self._reload()

    async def select_category(self, category_id: CategoryId) -> None:
        # Re-selecting the current category still reloads.
        self.state.selected_category = category_id
        await self._reload()

    def set_search(self, text: str) -> None:
        self.state.search = text or ""
        self._notify()

    def snapshot(self) -> Dict[str, Any]:
        return {
            "phase": self.phase.value,
            "selected_category": self.state.selected_category,
            "search": self.state.search,
            "loading": self.state.loading,
            "error": self.state.error,
            "categories": [asdict(c) for c in self.state.categories],
            "products": [asdict(p) for p in self.visible_products],
        }

    # --- Loading ----------------------------------------------------------------

    async def _reload(self) -> None:
        self._generation += 1
        generation = self._generation
        category = self.state.selected_category

        self.state.loading = True
        self._notify()

        await asyncio.gather(
            self._install_categories(generation),
            self._install_products(generation, category),
        )

    async def _install_categories(self, generation: int) -> None:
        categories = await self.loader.load_categories()
        if generation != self._generation:
            return
        self.state.categories = categories
        self._notify()

    async def _install_products(self, generation: int, category: CategoryId) -> None:
        error = None
        try:
            products = await self.loader.load_products(category)
        except Exception as e:
            logger.error("Product load failed for category %s: %s", category, e)
            products = []
            error = PRODUCTS_UNAVAILABLE

        if generation != self._generation:
            logger.debug("Discarding stale products for category %s", category)
            return

        self.state.products = products
        self.state.error = error
        self.state.loading = False
        self._notify()

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer(self.state)
