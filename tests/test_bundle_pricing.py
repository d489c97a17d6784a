from decimal import Decimal
from types import SimpleNamespace

import pytest

from constants.catalog_constants import PricingType
from services.bundle_pricing import (
    BundleLine,
    PricedLine,
    add_line,
    bundle_list_price,
    calculate_bundle_totals,
    implied_discount_percentage,
    price_lines,
    remove_line,
    set_line_quantity,
)


@pytest.fixture
def lines():
    products = [PricedLine("p1", Decimal("10.00"), 2)]
    services = [PricedLine("s1", Decimal("35.00"), 1)]
    return products, services


def test_itemized_with_discount(lines):
    totals = calculate_bundle_totals(*lines, PricingType.ITEMIZED, discount_percentage=Decimal("10"))

    assert totals.subtotal == Decimal("55.00")
    assert totals.discount_amount == Decimal("5.50")
    assert totals.total == Decimal("49.50")


@pytest.mark.parametrize("pct", [None, 0, Decimal("-5")])
def test_itemized_without_discount(lines, pct):
    totals = calculate_bundle_totals(*lines, PricingType.ITEMIZED, discount_percentage=pct)

    assert totals.discount_amount == 0
    assert totals.total == Decimal("55.00")


def test_flat_rate_below_subtotal(lines):
    totals = calculate_bundle_totals(*lines, "flat_rate", flat_price="40")

    assert totals.total == Decimal("40")
    assert totals.discount_amount == Decimal("15.00")


def test_flat_rate_above_subtotal_gives_negative_discount(lines):
    totals = calculate_bundle_totals(*lines, PricingType.FLAT_RATE, flat_price=Decimal("60"))

    assert totals.discount_amount == Decimal("-5.00")
    assert totals.total == Decimal("60")


def test_flat_rate_with_no_items():
    totals = calculate_bundle_totals([], [], PricingType.FLAT_RATE, flat_price=Decimal("25"))

    assert totals.subtotal == 0
    assert totals.discount_amount == 0
    assert totals.total == Decimal("25")


def test_unknown_items_are_priced_at_zero():
    priced = price_lines([BundleLine("p1", 2), BundleLine("gone", 3)], {"p1": "4.25"})

    assert priced[0].line_total == Decimal("8.50")
    assert priced[1].unit_price is None
    assert priced[1].line_total == 0


def test_implied_discount_percentage():
    assert implied_discount_percentage(Decimal("55"), Decimal("40")) == Decimal("27.27")
    assert implied_discount_percentage(Decimal("55"), Decimal("60")) == 0
    assert implied_discount_percentage(Decimal("55"), Decimal("0")) == Decimal("100.00")
    assert implied_discount_percentage(0, Decimal("40")) is None
    assert implied_discount_percentage(Decimal("55"), None) is None


def test_add_line_merges_quantities():
    lines = add_line([], "p1")
    lines = add_line(lines, "p2", 2)
    lines = add_line(lines, "p1", 3)

    assert lines == [BundleLine("p1", 4), BundleLine("p2", 2)]


def test_remove_and_set_quantity():
    lines = [BundleLine("p1", 4), BundleLine("p2", 2)]

    assert remove_line(lines, "p1") == [BundleLine("p2", 2)]
    assert set_line_quantity(lines, "p2", 5) == [BundleLine("p1", 4), BundleLine("p2", 5)]
    assert set_line_quantity(lines, "p2", 0) == [BundleLine("p1", 4), BundleLine("p2", 1)]


def test_bundle_list_price_from_loaded_bundle():
    bundle = SimpleNamespace(
        pricing_type=PricingType.ITEMIZED,
        discount_percentage=Decimal("10"),
        flat_price=None,
        products=[SimpleNamespace(product_id="p1", quantity=2, product=SimpleNamespace(price=Decimal("10.00")))],
        services=[SimpleNamespace(service_id="s1", quantity=1, service=SimpleNamespace(price=Decimal("35.00")))],
    )

    assert bundle_list_price(bundle) == Decimal("49.50")
