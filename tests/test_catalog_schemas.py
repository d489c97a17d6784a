import uuid
from decimal import Decimal

import pytest
from pydantic import ValidationError

from constants.catalog_constants import PricingType
from schemas.catalog_schemas import (
    BundleInput,
    BundleLineInput,
    CategoryInput,
    ProductInput,
    ServiceInput,
    validate_bundle,
    validate_category,
    validate_product,
    validate_service,
)
from services.category_tree import build_category_forest


def _line():
    return BundleLineInput(item_id=uuid.uuid4(), quantity=1)


def test_bundle_name_checked_first():
    result = validate_bundle(BundleInput(name="  ", pricing_type=PricingType.FLAT_RATE))

    assert not result.ok
    assert result.reason == "Bundle name is required"


def test_flat_rate_bundle_needs_price():
    result = validate_bundle(BundleInput(name="Opening", pricing_type=PricingType.FLAT_RATE, products=[_line()]))

    assert result.reason == "Please enter a valid flat rate price"


def test_bundle_needs_lines():
    result = validate_bundle(BundleInput(name="Opening", pricing_type=PricingType.FLAT_RATE, flat_price=Decimal("99")))

    assert result.reason == "Bundle must contain at least one product or service"


def test_itemized_discount_range():
    result = validate_bundle(BundleInput(name="Opening", discount_percentage=Decimal("120"), services=[_line()]))

    assert result.reason == "Discount percentage must be between 0 and 100"


def test_valid_bundle():
    result = validate_bundle(BundleInput(name="Opening", discount_percentage=Decimal("10"), products=[_line()]))

    assert result.ok
    assert result.reason is None


def test_line_quantity_must_be_positive():
    with pytest.raises(ValidationError):
        BundleLineInput(item_id=uuid.uuid4(), quantity=0)


@pytest.mark.parametrize("price", [None, Decimal("0"), Decimal("-1")])
def test_priced_items_need_positive_price(price):
    assert validate_product(ProductInput(name="Shock", price=price)).reason == "Please enter a valid price"
    assert validate_service(ServiceInput(name="Cleaning", price=price)).reason == "Please enter a valid price"


def test_priced_items_need_name():
    assert validate_product(ProductInput(price=Decimal("5"))).reason == "Product name is required"
    assert validate_service(ServiceInput(price=Decimal("5"))).reason == "Service name is required"


def test_category_rules():
    root, child = uuid.uuid4(), uuid.uuid4()
    forest = build_category_forest([
        {"id": root, "name": "Chemicals", "parent_id": None},
        {"id": child, "name": "Chlorine", "parent_id": root},
    ])

    assert validate_category(CategoryInput(name="")).reason == "Category name is required"
    assert not validate_category(CategoryInput(id=root, name="Chemicals", parent_id=child), forest).ok
    assert validate_category(CategoryInput(id=child, name="Chlorine", parent_id=root), forest).ok
