"""
Contracts (data models).

This folder defines the shapes exchanged with the external catalogue
source and the order-intent sink, e.g.:
- Category and Product records as the storefront displays them
- The OrderIntent record written when a shopper clicks "Buy"

Both mock and real clients should use these contracts.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union

CategoryId = Union[int, str]

ALL_CATEGORY_ID = "all"


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class IconKey(str, Enum):
    PACKAGE = "Package"
    ZAP = "Zap"
    HOME = "Home"
    TRENDING_UP = "TrendingUp"


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Category:
    id: CategoryId
    name: str
    icon: IconKey = IconKey.PACKAGE


@dataclass
class Product:
    id: Any
    name: str = ""
    description: Optional[str] = None
    image_url: Optional[str] = None
    rating: Optional[float] = None
    reviews: Optional[int] = None
    price: Optional[float] = None
    category_id: Optional[CategoryId] = None
    aliexpress_url: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)   # unknown remote columns, kept verbatim


@dataclass(frozen=True)
class OrderIntent:
    product_id: Any
    product_name: str
    price: Optional[float]

    @classmethod
    def from_product(cls, product: Product) -> "OrderIntent":
        return cls(product_id=product.id, product_name=product.name, price=product.price)

    def to_record(self) -> Dict[str, Any]:
        return {
            "product_id": self.product_id,
            "product_name": self.product_name,
            "price": self.price,
        }


# ---------------------------------------------------------------------------
# Abstract client interfaces
# ---------------------------------------------------------------------------

class CatalogueClient(ABC):
    """Every catalogue source (REST or local) must implement this interface."""

    @abstractmethod
    async def fetch_categories(self) -> Any:
        """Return the raw decoded categories body."""

    @abstractmethod
    async def fetch_products(self, category_id: Optional[CategoryId] = None) -> Any:
        """Return the raw decoded products body, narrowed by category when given."""

    @abstractmethod
    async def fetch_product(self, product_id: Any) -> Any:
        """Return the raw decoded body for a single-product lookup."""


class OrderIntentSink(ABC):
    """Write-only destination for order-intent events."""

    @abstractmethod
    async def record(self, intent: OrderIntent) -> None:
        """Persist one order intent. Raises on failure."""


def category_ids_match(left: Optional[CategoryId], right: Optional[CategoryId]) -> bool:
    """Compare category ids the way the REST filter does (as text)."""
    if left is None or right is None:
        return False
    return str(left) == str(right)
