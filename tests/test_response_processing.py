import pytest

from storefront.catalog.filters import visible
from storefront.integrations.contracts.interfaces import IconKey
from storefront.integrations.contracts.product_catalogues import icon_lookup, parse_icon_key
from storefront.integrations.policy.response_wrappers import (
    IntegrationResponseError,
    normalize_categories_response,
    normalize_products_response,
)


def test_categories_keep_order_and_map_icons():
    out = normalize_categories_response(
        [
            {"id": 2, "name": "Home & Garden", "icon": "Home"},
            {"id": 5, "name": "Pets", "icon": "Dog"},
            {"id": 6, "name": "Toys"},
        ]
    )
    assert [c.id for c in out] == [2, 5, 6]
    assert [c.icon for c in out] == [IconKey.HOME, IconKey.PACKAGE, IconKey.PACKAGE]


def test_non_list_categories_body_is_rejected():
    with pytest.raises(IntegrationResponseError):
        normalize_categories_response({"message": "JWT expired"})


def test_one_bad_category_row_does_not_discard_the_rest():
    out = normalize_categories_response(
        [
            {"id": 7, "name": "Gadgets", "icon": "Zap"},
            {"id": 9, "name": None, "icon": "Zap"},
            {"id": 10, "name": "Kitchen", "icon": 5},
            {"name": "No id"},
            "junk",
        ]
    )
    assert [c.id for c in out] == [7, 9, 10]
    assert [c.name for c in out] == ["Gadgets", "", "Kitchen"]
    assert [c.icon for c in out] == [IconKey.ZAP, IconKey.ZAP, IconKey.PACKAGE]


def test_numeric_product_name_stays_searchable():
    [p] = normalize_products_response([{"id": 11, "name": 2024, "price": 3}])
    assert p.name == "2024"
    assert visible([p], "2024") == [p]


def test_product_fields_and_extra_columns():
    [p] = normalize_products_response(
        [
            {
                "id": 10,
                "name": "Mini Projector",
                "price": "39.90",
                "rating": 4.4,
                "reviews": "980",
                "category_id": 1,
                "aliexpress_url": "https://ali.example/10",
                "created_at": "2025-01-01T00:00:00Z",
            }
        ]
    )
    assert p.price == pytest.approx(39.9)
    assert p.reviews == 980
    assert p.extra == {"created_at": "2025-01-01T00:00:00Z"}


def test_missing_name_renders_blank_instead_of_failing():
    [p] = normalize_products_response([{"id": 3, "price": 5}])
    assert p.name == ""
    assert p.description is None


def test_malformed_field_is_dropped_not_the_product():
    [p] = normalize_products_response([{"id": 4, "name": "Lamp", "price": "cheap"}])
    assert p.name == "Lamp"
    assert p.price is None


def test_non_object_rows_are_skipped():
    out = normalize_products_response([{"id": 1, "name": "A"}, "junk", 7, None])
    assert [p.id for p in out] == [1]


def test_icon_lookup_uses_package_default():
    handlers = {IconKey.PACKAGE: "box", IconKey.ZAP: "bolt"}
    assert icon_lookup(handlers, IconKey.ZAP) == "bolt"
    assert icon_lookup(handlers, IconKey.HOME) == "box"
    assert icon_lookup({}, IconKey.HOME, default=lambda: "none") == "none"
    assert parse_icon_key(None) == IconKey.PACKAGE
