from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from storefront.integrations.contracts.interfaces import Category, Product
from storefront.integrations.contracts.product_catalogues import parse_icon_key

logger = logging.getLogger(__name__)


class IntegrationResponseError(ValueError):
    def __init__(self, message: str, *, payload: Optional[Any] = None) -> None:
        super().__init__(message)
        self.payload = payload if payload is not None else {}


class CatalogFetchError(IntegrationResponseError):
    """The catalogue source could not be reached or answered with an error status."""

    def __init__(self, message: str, *, payload: Optional[Any] = None, status_code: Optional[int] = None) -> None:
        super().__init__(message, payload=payload)
        self.status_code = status_code


class CatalogConfigurationError(CatalogFetchError):
    """Raised before any request is sent when the REST base URL or key is missing."""


class CategoryRecordModel(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: Any
    name: Optional[str] = None
    icon: Any = None


class ProductRecordModel(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: Any = None
    name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    rating: Optional[float] = None
    reviews: Optional[int] = None
    price: Optional[float] = None
    category_id: Optional[Any] = None
    aliexpress_url: Optional[str] = None


def normalize_categories_response(raw: Any) -> List[Category]:
    """A body that is not a JSON array is an error; the caller swaps in the fallback list.

    Inside the array, unreadable rows are skipped one by one.
    """
    if not isinstance(raw, list):
        raise IntegrationResponseError(
            f"Categories response is not a list (got {type(raw).__name__}).",
            payload=raw,
        )

    categories: List[Category] = []
    for item in raw:
        if not isinstance(item, dict):
            logger.warning("Skipping non-object category record: %r", item)
            continue
        model = _build_lenient_model(CategoryRecordModel, item)
        if model is None:
            continue
        categories.append(Category(id=model.id, name=model.name or "", icon=parse_icon_key(model.icon)))
    return categories


def normalize_products_response(raw: Any) -> List[Product]:
    """Lenient: a non-array body is an empty catalogue, bad records are skipped."""
    if not isinstance(raw, list):
        logger.warning("Products response is not a list (got %s); treating as empty", type(raw).__name__)
        return []

    products: List[Product] = []
    for item in raw:
        if not isinstance(item, dict):
            logger.warning("Skipping non-object product record: %r", item)
            continue
        product = normalize_product_record(item)
        if product is not None:
            products.append(product)
    return products


def normalize_product_record(item: Dict[str, Any]) -> Optional[Product]:
    model = _build_lenient_model(ProductRecordModel, item)
    if model is None:
        return None

    known = set(ProductRecordModel.model_fields)
    return Product(
        id=model.id,
        name=model.name or "",
        description=model.description,
        image_url=model.image_url,
        rating=model.rating,
        reviews=model.reviews,
        price=model.price,
        category_id=model.category_id,
        aliexpress_url=model.aliexpress_url,
        extra={k: v for k, v in item.items() if k not in known},
    )


def _build_lenient_model(model_type, item: Dict[str, Any]):
    try:
        return model_type(**item)
    except ValidationError as exc:
        # Keep the record displayable: drop only the fields that failed to coerce.
        bad_fields = {str(err["loc"][0]) for err in exc.errors() if err.get("loc")}
        logger.warning("%s %r has malformed fields %s", model_type.__name__, item.get("id"), sorted(bad_fields))
    try:
        return model_type(**{k: v for k, v in item.items() if k not in bad_fields})
    except ValidationError:
        logger.warning("Skipping unreadable %s: %r", model_type.__name__, item)
        return None
