import uuid
from decimal import Decimal

import pytest

from constants.catalog_constants import PricingType
from schemas.catalog_schemas import BundleInput, BundleLineInput
from services.bundle_services import bundle_to_out, delete_bundle, get_bundle, get_bundles, save_bundle


@pytest.fixture
def items(make_product, make_service):
    return {
        "tabs": make_product("Chlorine Tabs", "10.00"),
        "strips": make_product("Test Strips", "6.00"),
        "cleaning": make_service("Weekly Cleaning", "35.00"),
    }


def _itemized(items, **kwargs):
    data = dict(
        name="Opening Package",
        pricing_type=PricingType.ITEMIZED,
        discount_percentage=Decimal("10"),
        products=[BundleLineInput(item_id=items["tabs"].id, quantity=2)],
        services=[BundleLineInput(item_id=items["cleaning"].id)],
    )
    data.update(kwargs)
    return BundleInput(**data)


def test_save_itemized_bundle(db, items):
    bundle = save_bundle(db, _itemized(items))

    out = bundle_to_out(get_bundle(db, bundle.id))

    assert out.flat_price is None
    assert [(line.name, line.quantity) for line in out.products] == [("Chlorine Tabs", 2)]
    assert [line.name for line in out.services] == ["Weekly Cleaning"]
    assert out.list_price == Decimal("49.50")


def test_repeated_item_saved_as_one_line(db, items):
    bundle = save_bundle(db, _itemized(items, products=[
        BundleLineInput(item_id=items["tabs"].id, quantity=1),
        BundleLineInput(item_id=items["strips"].id),
        BundleLineInput(item_id=items["tabs"].id, quantity=2),
    ]))

    out = bundle_to_out(get_bundle(db, bundle.id))

    assert [(line.name, line.quantity) for line in out.products] == [("Chlorine Tabs", 3), ("Test Strips", 1)]


def test_save_replaces_lines(db, items):
    bundle = save_bundle(db, _itemized(items))

    save_bundle(db, _itemized(
        items,
        id=bundle.id,
        products=[
            BundleLineInput(item_id=items["strips"].id, quantity=3),
            BundleLineInput(item_id=items["tabs"].id, quantity=1),
        ],
        services=[],
    ))

    reloaded = get_bundle(db, bundle.id)
    assert [(bp.product.name, bp.quantity, bp.sort_order) for bp in reloaded.products] == [
        ("Test Strips", 3, 0),
        ("Chlorine Tabs", 1, 1),
    ]
    assert reloaded.services == []


def test_failed_save_keeps_previous_lines(db, items):
    bundle = save_bundle(db, _itemized(items))

    with pytest.raises(RuntimeError):
        save_bundle(db, _itemized(
            items,
            id=bundle.id,
            name="Renamed",
            products=[BundleLineInput(item_id=uuid.uuid4())],
        ))

    reloaded = get_bundle(db, bundle.id)
    assert reloaded.name == "Opening Package"
    assert [bp.product_id for bp in reloaded.products] == [items["tabs"].id]
    assert len(reloaded.services) == 1


def test_flat_rate_bundle(db, items):
    bundle = save_bundle(db, _itemized(items, pricing_type=PricingType.FLAT_RATE, flat_price=Decimal("40")))

    out = bundle_to_out(get_bundle(db, bundle.id))

    assert out.discount_percentage == 0
    assert out.list_price == Decimal("40")


def test_switch_to_itemized_carries_discount(db, items):
    bundle = save_bundle(db, _itemized(items, pricing_type=PricingType.FLAT_RATE, flat_price=Decimal("40")))

    save_bundle(db, _itemized(items, id=bundle.id, discount_percentage=Decimal("0")))

    reloaded = get_bundle(db, bundle.id)
    assert reloaded.pricing_type == PricingType.ITEMIZED
    assert reloaded.flat_price is None
    assert reloaded.discount_percentage == Decimal("27.27")


def test_search_and_delete(db, items):
    bundle = save_bundle(db, _itemized(items))
    save_bundle(db, _itemized(items, name="Closing Package", active=False))

    assert [b.name for b in get_bundles(db, search="open")] == ["Opening Package"]
    assert [b.name for b in get_bundles(db, active_only=True)] == ["Opening Package"]

    delete_bundle(db, bundle.id)

    assert [b.name for b in get_bundles(db)] == ["Closing Package"]
