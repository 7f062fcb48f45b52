"""
Generate product cards and category controls for the storefront page
"""
from typing import Any, Dict, List, Optional

from storefront.catalog.view_state import ViewStateController
from storefront.integrations.contracts.interfaces import Category, CategoryId, IconKey, Product, category_ids_match
from storefront.integrations.contracts.product_catalogues import icon_lookup

BRAND_NAME = "FindItOnAli"
HERO_HEADLINE = "Viral Products You Won’t Find in the US"
HERO_TAGLINE = "Hand-picked gadgets, home hacks & fashion steals from AliExpress"
SEARCH_PLACEHOLDER = "Search trending products..."
LOADING_MESSAGE = "Loading products…"
TRENDING_BADGE = "Trending"
BUY_LABEL = "Buy →"
AFFILIATE_DISCLOSURE = "Affiliate Disclosure: We may earn commission at no extra cost to you."

ICON_GLYPHS = {
    IconKey.PACKAGE: "📦",
    IconKey.ZAP: "⚡",
    IconKey.HOME: "🏠",
    IconKey.TRENDING_UP: "📈",
}


def format_number(value: Any) -> str:
    """Render a number the way the storefront always has: 12.0 -> "12", 12.5 -> "12.5"."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class ProductCardGenerator:
    def __init__(self, buy_path: str = "/api/v1/products/{product_id}/buy"):
        self.buy_path = buy_path

    def generate_card(self, product: Product) -> Dict[str, Any]:
        """Generate product card"""
        return {
            "product_id": product.id,
            "name": product.name or "",
            "description": product.description or "",
            "image_url": product.image_url,
            "badge": TRENDING_BADGE,
            "rating_label": self._rating_label(product),
            "price_label": f"${format_number(product.price)}" if product.price is not None else "",
            "actions": [
                {
                    "type": "buy",
                    "label": BUY_LABEL,
                    "href": self.buy_path.format(product_id=product.id),
                    "target": "_blank",
                    "primary": True,
                }
            ],
        }

    def generate_category_controls(self, categories: List[Category], selected: CategoryId) -> List[Dict[str, Any]]:
        return [
            {
                "id": c.id,
                "name": c.name,
                "icon": icon_lookup(ICON_GLYPHS, c.icon),
                "icon_key": c.icon.value,
                "selected": category_ids_match(c.id, selected),
            }
            for c in categories
        ]

    def generate_page(self, controller: ViewStateController) -> Dict[str, Any]:
        state = controller.state
        return {
            "brand": BRAND_NAME,
            "hero": {"headline": HERO_HEADLINE, "tagline": HERO_TAGLINE},
            "search": {"value": state.search, "placeholder": SEARCH_PLACEHOLDER},
            "categories": self.generate_category_controls(state.categories, state.selected_category),
            "phase": controller.phase.value,
            "loading": state.loading,
            "loading_message": LOADING_MESSAGE if state.loading else None,
            "error": state.error,
            "products": [] if state.loading else [self.generate_card(p) for p in controller.visible_products],
            "disclosure": AFFILIATE_DISCLOSURE,
        }

    @staticmethod
    def _rating_label(product: Product) -> Optional[str]:
        if product.rating is None and product.reviews is None:
            return None
        return f"{format_number(product.rating)} ({format_number(product.reviews)})"
