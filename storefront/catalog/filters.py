from typing import List

from storefront.integrations.contracts.interfaces import Product


def visible(products: List[Product], search: str) -> List[Product]:
    """Products whose name contains ``search`` (case-insensitive), in their original order."""
    needle = (search or "").lower()
    if not needle:
        return list(products)
    return [p for p in products if needle in (p.name or "").lower()]
