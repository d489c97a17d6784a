"""
Bundle price aggregation.

Pure functions over line items; the bundle form calls
``calculate_bundle_totals`` on every rerun with the current form state.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any, Hashable, Iterable, Mapping

from constants.catalog_constants import PricingType

ZERO = Decimal("0")
HUNDRED = Decimal("100")


@dataclass(frozen=True)
class BundleLine:
    item_id: Hashable
    quantity: int = 1


@dataclass(frozen=True)
class PricedLine:
    item_id: Hashable
    unit_price: Decimal | None
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return (self.unit_price or ZERO) * self.quantity


@dataclass(frozen=True)
class BundleTotals:
    subtotal: Decimal
    discount_amount: Decimal
    total: Decimal


def to_decimal(value: Any) -> Decimal:
    if value is None or value == "":
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def price_lines(lines: Iterable[BundleLine], price_lookup: Mapping[Hashable, Any]) -> list[PricedLine]:
    """Attach current unit prices; unknown items get None (counted as 0)."""
    priced = []
    for line in lines:
        raw = price_lookup.get(line.item_id)
        priced.append(PricedLine(
            item_id=line.item_id,
            unit_price=to_decimal(raw) if raw is not None else None,
            quantity=line.quantity,
        ))
    return priced


def calculate_subtotal(*line_groups: Iterable[PricedLine]) -> Decimal:
    subtotal = ZERO
    for group in line_groups:
        for line in group:
            subtotal += line.line_total
    return subtotal


def calculate_bundle_totals(
    product_lines: Iterable[PricedLine],
    service_lines: Iterable[PricedLine],
    pricing_type: PricingType | str,
    discount_percentage: Any = None,
    flat_price: Any = None,
) -> BundleTotals:
    """
    Itemized: subtotal less a percentage discount (ignored when absent or <= 0).
    Flat rate: the flat price is the total; the discount is the difference from
    the subtotal and can be negative when the flat price is above it.
    """
    subtotal = calculate_subtotal(product_lines, service_lines)

    if PricingType(pricing_type) == PricingType.FLAT_RATE:
        total = to_decimal(flat_price)
        discount = subtotal - total if subtotal > ZERO else ZERO
        return BundleTotals(subtotal=subtotal, discount_amount=discount, total=total)

    pct = to_decimal(discount_percentage)
    if pct <= ZERO:
        return BundleTotals(subtotal=subtotal, discount_amount=ZERO, total=subtotal)

    discount = subtotal * (pct / HUNDRED)
    return BundleTotals(subtotal=subtotal, discount_amount=discount, total=subtotal - discount)


def implied_discount_percentage(subtotal: Any, flat_price: Any) -> Decimal | None:
    """
    Percentage a flat price represents against the item subtotal, clamped to
    [0, 100]. Used to carry a flat-rate bundle over to itemized pricing.
    None when there is nothing to derive it from.
    """
    subtotal = to_decimal(subtotal)
    if subtotal <= ZERO or flat_price is None:
        return None
    pct = (subtotal - to_decimal(flat_price)) / subtotal * HUNDRED
    return max(ZERO, min(HUNDRED, pct)).quantize(Decimal("0.01"))


def add_line(lines: list[BundleLine], item_id: Hashable, quantity: int = 1) -> list[BundleLine]:
    """Add an item; an item already in the bundle gets its quantity increased."""
    quantity = max(1, int(quantity))
    updated = []
    merged = False
    for line in lines:
        if line.item_id == item_id:
            updated.append(replace(line, quantity=line.quantity + quantity))
            merged = True
        else:
            updated.append(line)
    if not merged:
        updated.append(BundleLine(item_id=item_id, quantity=quantity))
    return updated


def remove_line(lines: list[BundleLine], item_id: Hashable) -> list[BundleLine]:
    return [line for line in lines if line.item_id != item_id]


def set_line_quantity(lines: list[BundleLine], item_id: Hashable, quantity: int) -> list[BundleLine]:
    quantity = max(1, int(quantity))
    return [
        replace(line, quantity=quantity) if line.item_id == item_id else line
        for line in lines
    ]


def bundle_list_price(bundle: Any) -> Decimal:
    """
    Price shown in bundle listings, from an ORM Bundle with its
    products/services (and their items) loaded.
    """
    product_lines = [
        PricedLine(item_id=bp.product_id, unit_price=_item_price(bp, "product"), quantity=bp.quantity)
        for bp in bundle.products
    ]
    service_lines = [
        PricedLine(item_id=bs.service_id, unit_price=_item_price(bs, "service"), quantity=bs.quantity)
        for bs in bundle.services
    ]
    totals = calculate_bundle_totals(
        product_lines,
        service_lines,
        bundle.pricing_type,
        discount_percentage=bundle.discount_percentage,
        flat_price=bundle.flat_price,
    )
    return totals.total


def _item_price(line: Any, attr: str) -> Decimal | None:
    item = getattr(line, attr, None)
    if item is None or getattr(item, "price", None) is None:
        return None
    return to_decimal(item.price)
