import pytest

from storefront.catalog.filters import visible
from storefront.integrations.contracts.interfaces import Product

PRODUCTS = [
    Product(id=1, name="LED Strip", description="yoga lighting"),
    Product(id=2, name="Yoga Mat"),
    Product(id=3, name="Yoga Blocks (2 pack)"),
    Product(id=4, name=""),
]


def test_empty_search_returns_every_product_in_order():
    assert visible(PRODUCTS, "") == PRODUCTS


@pytest.mark.parametrize(
    "search,expected",
    [
        ("yoga", [2, 3]),
        ("YOGA", [2, 3]),
        ("led", [1]),
        ("mat", [2]),
        ("(2", [3]),
        ("zzz", []),
    ],
)
def test_case_insensitive_substring_on_name(search, expected):
    assert [p.id for p in visible(PRODUCTS, search)] == expected


def test_description_is_not_searched():
    assert [p.id for p in visible(PRODUCTS, "lighting")] == []


def test_product_without_name_only_matches_empty_search():
    nameless = Product(id=9, name=None)
    assert visible([nameless], "") == [nameless]
    assert visible([nameless], "a") == []


def test_filter_does_not_mutate_input():
    products = list(PRODUCTS)
    visible(products, "yoga")
    assert products == PRODUCTS
