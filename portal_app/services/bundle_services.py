from decimal import Decimal
from typing import Optional
from sqlalchemy import select, delete
from sqlalchemy.orm import Session, selectinload
from constants.catalog_constants import PricingType
from models.catalog_models import Bundle, BundleProduct, BundleService, Product, Service
from schemas.catalog_schemas import BundleInput, BundleOut, BundleLineOut
from services.bundle_pricing import (
    BundleLine, PricedLine, add_line, calculate_subtotal, implied_discount_percentage, bundle_list_price
)
from utils.db_transaction import transactional


TOGGLE_FIELDS = ("active", "featured")


def _bundle_query():
    return select(Bundle).options(
        selectinload(Bundle.products).selectinload(BundleProduct.product),
        selectinload(Bundle.services).selectinload(BundleService.service),
        selectinload(Bundle.attachments),
    )

def get_bundles(db: Session, search: Optional[str] = None, category_id=None, active_only: bool = False) -> list[Bundle]:
    stmt = _bundle_query().order_by(Bundle.name)
    if search:
        stmt = stmt.where(Bundle.name.ilike(f"%{search.strip()}%"))
    if category_id is not None:
        stmt = stmt.where(Bundle.category_id == category_id)
    if active_only:
        stmt = stmt.where(Bundle.active == True)
    return db.execute(stmt).scalars().all()

def get_bundle(db: Session, bundle_id) -> Optional[Bundle]:
    return db.execute(_bundle_query().where(Bundle.id == bundle_id)).scalars().first()

def bundle_to_out(bundle: Bundle) -> BundleOut:
    return BundleOut(
        id=bundle.id,
        name=bundle.name,
        description=bundle.description,
        pricing_type=bundle.pricing_type,
        discount_percentage=bundle.discount_percentage or Decimal("0"),
        flat_price=bundle.flat_price,
        category_id=bundle.category_id,
        taxable=bundle.taxable,
        active=bundle.active,
        featured=bundle.featured,
        products=[
            BundleLineOut(
                item_id=bp.product_id,
                name=bp.product.name if bp.product else "Unknown product",
                unit_price=bp.product.price if bp.product else None,
                quantity=bp.quantity,
            )
            for bp in bundle.products
        ],
        services=[
            BundleLineOut(
                item_id=bs.service_id,
                name=bs.service.name if bs.service else "Unknown service",
                unit_price=bs.service.price if bs.service else None,
                quantity=bs.quantity,
            )
            for bs in bundle.services
        ],
        list_price=bundle_list_price(bundle),
    )

def _merge_lines(lines) -> list[BundleLine]:
    """Repeated items collapse into one line with the quantities summed."""
    merged: list[BundleLine] = []
    for line in lines:
        merged = add_line(merged, line.item_id, line.quantity)
    return merged

def _line_subtotal(db: Session, products: list[BundleLine], services: list[BundleLine]) -> Decimal:
    product_ids = [line.item_id for line in products]
    service_ids = [line.item_id for line in services]
    product_prices = dict(db.execute(
        select(Product.id, Product.price).where(Product.id.in_(product_ids))
    ).all()) if product_ids else {}
    service_prices = dict(db.execute(
        select(Service.id, Service.price).where(Service.id.in_(service_ids))
    ).all()) if service_ids else {}

    return calculate_subtotal(
        [PricedLine(line.item_id, product_prices.get(line.item_id), line.quantity) for line in products],
        [PricedLine(line.item_id, service_prices.get(line.item_id), line.quantity) for line in services],
    )

@transactional
def save_bundle(db: Session, data: BundleInput) -> Bundle:
    """
    Writes the bundle header and replaces its product/service lines in one
    transaction. Nothing is kept if any step fails.
    """
    if data.id is None:
        bundle = Bundle()
        db.add(bundle)
        previous_type, previous_flat = None, None
    else:
        bundle = db.get(Bundle, data.id)
        if bundle is None:
            raise LookupError(f"Bundle {data.id} not found")
        previous_type, previous_flat = bundle.pricing_type, bundle.flat_price

    products = _merge_lines(data.products)
    services = _merge_lines(data.services)

    bundle.name = data.name.strip()
    bundle.description = (data.description or "").strip() or None
    bundle.pricing_type = data.pricing_type
    bundle.category_id = data.category_id
    bundle.taxable = data.taxable
    bundle.active = data.active
    bundle.featured = data.featured

    if data.pricing_type == PricingType.FLAT_RATE:
        bundle.flat_price = data.flat_price
        bundle.discount_percentage = Decimal("0")
    else:
        bundle.flat_price = None
        discount = data.discount_percentage
        # Switching away from flat rate keeps the effective discount
        if previous_type == PricingType.FLAT_RATE and not discount:
            carried = implied_discount_percentage(_line_subtotal(db, products, services), previous_flat)
            if carried is not None:
                discount = carried
        bundle.discount_percentage = discount

    db.flush()

    # === Replace lines ===
    db.execute(delete(BundleProduct).where(BundleProduct.bundle_id == bundle.id))
    db.execute(delete(BundleService).where(BundleService.bundle_id == bundle.id))
    db.expire(bundle, ["products", "services"])

    for index, line in enumerate(products):
        db.add(BundleProduct(bundle_id=bundle.id, product_id=line.item_id, quantity=line.quantity, sort_order=index))
    for index, line in enumerate(services):
        db.add(BundleService(bundle_id=bundle.id, service_id=line.item_id, quantity=line.quantity, sort_order=index))

    db.commit()
    return bundle

@transactional
def set_bundle_flag(db: Session, bundle_id, field: str, value: bool) -> None:
    if field not in TOGGLE_FIELDS:
        raise ValueError(f"Unknown bundle flag: {field}")
    bundle = db.get(Bundle, bundle_id)
    if bundle is None:
        raise LookupError(f"Bundle {bundle_id} not found")
    setattr(bundle, field, value)
    db.commit()

@transactional
def delete_bundle(db: Session, bundle_id) -> None:
    bundle = db.get(Bundle, bundle_id)
    if bundle is None:
        return
    db.delete(bundle)
    db.commit()
