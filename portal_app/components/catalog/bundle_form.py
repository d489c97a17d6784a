"""
Bundle editor. Lines live in session state between reruns so the price
summary updates as items are added, removed or re-quantified; nothing is
written until Save.
"""
import logging
from decimal import Decimal
import streamlit as st
from constants.catalog_constants import PricingType, PRICING_LABELS
from db.orm_session import get_session
from schemas.catalog_schemas import BundleInput, BundleLineInput, validate_bundle
from services.bundle_pricing import (
    BundleLine, BundleTotals, add_line, remove_line, set_line_quantity, price_lines,
    calculate_bundle_totals
)
from services.bundle_services import save_bundle
from services.product_services import get_products
from services.service_catalog_services import get_services
from components.catalog.product_form import category_picker
from utils.formatters import format_currency
from utils.state_manager import StateManager


logger = logging.getLogger(__name__)

SCOPE = "bundle_form"


def _draft_id(bundle) -> str:
    return str(bundle.id) if bundle else "new"

def _init_draft(bundle):
    draft = _draft_id(bundle)
    StateManager.setdefault(SCOPE, draft, "products", [
        BundleLine(bp.product_id, bp.quantity) for bp in bundle.products
    ] if bundle else [])
    StateManager.setdefault(SCOPE, draft, "services", [
        BundleLine(bs.service_id, bs.quantity) for bs in bundle.services
    ] if bundle else [])
    return draft

def render_price_summary(totals: BundleTotals):
    st.markdown("**Price Summary**")
    c1, c2 = st.columns([3, 1])
    c1.write("Subtotal")
    c2.write(format_currency(totals.subtotal))
    if totals.discount_amount > 0:
        c1.write("Discount")
        c2.write(f"-{format_currency(totals.discount_amount)}")
    elif totals.discount_amount < 0:
        c1.write("Premium over items")
        c2.write(f"+{format_currency(-totals.discount_amount)}")
    c1.write("**Total**")
    c2.write(f"**{format_currency(totals.total)}**")

def _render_lines(draft: str, kind: str, catalog: dict):
    """Line editor for the 'products' or 'services' side of the draft."""
    lines = StateManager.get(SCOPE, draft, kind, [])
    key = f"{SCOPE}_{draft}_{kind}"
    singular = kind[:-1]

    options = {item.name: item.id for item in catalog.values()}
    if options:
        c1, c2, c3 = st.columns([3, 1, 1])
        with c1:
            choice = st.selectbox(f"Add {singular}", list(options.keys()), key=f"{key}_choice")
        with c2:
            qty = st.number_input("Qty", min_value=1, step=1, value=1, key=f"{key}_qty")
        with c3:
            st.write("")
            if st.button("Add", key=f"{key}_add"):
                item_id = options[choice]
                StateManager.set(SCOPE, draft, kind, add_line(lines, item_id, int(qty)))
                # The row's quantity widget would otherwise keep its old value
                st.session_state.pop(f"{key}_qty_{item_id}", None)
                st.rerun()
    else:
        st.caption(f"No active {kind} available.")

    for line in lines:
        item = catalog.get(line.item_id)
        name = item.name if item else f"Unknown {singular}"
        c1, c2, c3, c4 = st.columns([3, 1, 1, 1])
        c1.write(name)
        c2.write(format_currency(item.price) if item else "-")
        with c3:
            new_qty = st.number_input(
                "Qty", min_value=1, step=1, value=line.quantity,
                key=f"{key}_qty_{line.item_id}", label_visibility="collapsed",
            )
        if new_qty != line.quantity:
            StateManager.set(SCOPE, draft, kind, set_line_quantity(lines, line.item_id, int(new_qty)))
        with c4:
            if st.button("Remove", key=f"{key}_remove_{line.item_id}"):
                StateManager.set(SCOPE, draft, kind, remove_line(lines, line.item_id))
                st.session_state.pop(f"{key}_qty_{line.item_id}", None)
                st.rerun()

def render_bundle_form(bundle=None) -> bool:
    draft = _init_draft(bundle)
    key = f"{SCOPE}_{draft}"

    with get_session() as db:
        products = {p.id: p for p in get_products(db, active_only=True)}
        services = {s.id: s for s in get_services(db, active_only=True)}
    # Lines may reference items that were deactivated after the bundle was built
    if bundle:
        products.update({bp.product_id: bp.product for bp in bundle.products if bp.product})
        services.update({bs.service_id: bs.service for bs in bundle.services if bs.service})

    name = st.text_input("Bundle Name", value=bundle.name if bundle else "", key=f"{key}_name")
    description = st.text_area("Description", value=(bundle.description or "") if bundle else "", key=f"{key}_description")

    pricing_types = list(PricingType)
    pricing_type = st.radio(
        "Pricing",
        pricing_types,
        index=pricing_types.index(PricingType(bundle.pricing_type)) if bundle else 0,
        format_func=lambda p: PRICING_LABELS[p],
        key=f"{key}_pricing",
    )

    discount_percentage, flat_price = Decimal("0"), None
    if pricing_type == PricingType.ITEMIZED:
        discount_percentage = Decimal(str(st.number_input(
            "Discount (%)", min_value=0.0, max_value=100.0, step=0.5,
            value=float(bundle.discount_percentage or 0) if bundle else 0.0,
            key=f"{key}_discount",
        )))
    else:
        flat_value = st.number_input(
            "Flat Rate Price ($)", min_value=0.0, step=0.01, format="%.2f",
            value=float(bundle.flat_price or 0) if bundle else 0.0,
            key=f"{key}_flat",
        )
        flat_price = Decimal(str(flat_value))

    category_id = category_picker("Category", bundle.category_id if bundle else None, f"{key}_category")

    c1, c2, c3 = st.columns(3)
    with c1:
        taxable = st.checkbox("Taxable", value=bundle.taxable if bundle else True, key=f"{key}_taxable")
    with c2:
        active = st.checkbox("Active", value=bundle.active if bundle else True, key=f"{key}_active")
    with c3:
        featured = st.checkbox("Featured", value=bundle.featured if bundle else False, key=f"{key}_featured")

    st.markdown("#### Products")
    _render_lines(draft, "products", products)
    st.markdown("#### Services")
    _render_lines(draft, "services", services)

    product_lines = StateManager.get(SCOPE, draft, "products", [])
    service_lines = StateManager.get(SCOPE, draft, "services", [])
    totals = calculate_bundle_totals(
        price_lines(product_lines, {pid: p.price for pid, p in products.items()}),
        price_lines(service_lines, {sid: s.price for sid, s in services.items()}),
        pricing_type,
        discount_percentage=discount_percentage,
        flat_price=flat_price,
    )
    render_price_summary(totals)

    if not st.button("Update Bundle" if bundle else "Create Bundle", key=f"{key}_save", type="primary"):
        return False

    data = BundleInput(
        id=bundle.id if bundle else None,
        name=name,
        description=description,
        pricing_type=pricing_type,
        discount_percentage=discount_percentage,
        flat_price=flat_price,
        category_id=category_id,
        taxable=taxable,
        active=active,
        featured=featured,
        products=[BundleLineInput(item_id=line.item_id, quantity=line.quantity) for line in product_lines],
        services=[BundleLineInput(item_id=line.item_id, quantity=line.quantity) for line in service_lines],
    )
    result = validate_bundle(data)
    if not result.ok:
        st.error(result.reason)
        return False

    try:
        with get_session() as db:
            save_bundle(db, data)
    except Exception:
        logger.exception("Bundle save failed")
        st.error("Failed to save bundle.")
        return False

    StateManager.clear(SCOPE, draft)
    for widget_key in [k for k in st.session_state if str(k).startswith(f"{key}_")]:
        del st.session_state[widget_key]
    st.success("Bundle saved.")
    return True
