import logging
import streamlit as st
from constants.catalog_constants import PricingType
from db.orm_session import get_session
from services.bundle_services import get_bundles, bundle_to_out, set_bundle_flag, delete_bundle
from services.category_services import get_category_names
from components.catalog.bundle_form import render_bundle_form
from components.catalog.product_form import category_picker
from components.catalog.attachment_gallery import render_attachment_gallery
from components.common.toggle import toggle_button, confirm_delete_button
from utils.formatters import format_currency


logger = logging.getLogger(__name__)


def _pricing_caption(out) -> str:
    if out.pricing_type == PricingType.FLAT_RATE:
        return f"Flat rate {format_currency(out.list_price)}"
    if out.discount_percentage:
        return f"Itemized, {out.discount_percentage.normalize():f}% off: {format_currency(out.list_price)}"
    return f"Itemized: {format_currency(out.list_price)}"

def _set_flag(bundle_id, field: str, value: bool):
    try:
        with get_session() as db:
            set_bundle_flag(db, bundle_id, field, value)
    except Exception:
        logger.exception(f"Bundle {field} update failed")
        st.error("Failed to update bundle.")

def _delete(out) -> bool:
    try:
        with get_session() as db:
            delete_bundle(db, out.id)
        st.success(f"Deleted {out.name}.")
        return True
    except Exception:
        logger.exception("Bundle delete failed")
        st.error("Failed to delete bundle.")
        return False

def render_bundle_list():
    st.subheader("Bundles")

    toggle_button("show_new_bundle", "Add Bundle", "Hide Bundle Form")
    if st.session_state.get("show_new_bundle", False):
        with st.container(border=True):
            if render_bundle_form():
                st.session_state.show_new_bundle = False
                st.rerun()

    c1, c2 = st.columns([2, 1])
    with c1:
        search = st.text_input("Search bundles", key="search_bundle")
    with c2:
        category_id = category_picker("Filter by category", None, "filter_bundle_category")

    with get_session() as db:
        bundles = get_bundles(db, search=search, category_id=category_id)
        category_names = get_category_names(db)

    if not bundles:
        st.info("No bundles found.")
        return

    for bundle in bundles:
        out = bundle_to_out(bundle)
        with st.expander(f"{'⭐ ' if out.featured else ''}{out.name}"):
            st.caption(f"{_pricing_caption(out)} · {category_names.get(out.category_id, 'Uncategorized')}")
            if out.description:
                st.write(out.description)

            lines = [
                {"Item": line.name, "Type": kind, "Qty": line.quantity, "Unit Price": format_currency(line.unit_price)}
                for kind, group in (("Product", out.products), ("Service", out.services))
                for line in group
            ]
            if lines:
                st.dataframe(lines, use_container_width=True, hide_index=True)

            f1, f2 = st.columns(2)
            with f1:
                active = st.toggle("Active", value=out.active, key=f"bundle_active_{out.id}")
            with f2:
                featured = st.toggle("Featured", value=out.featured, key=f"bundle_featured_{out.id}")
            if active != out.active:
                _set_flag(out.id, "active", active)
            if featured != out.featured:
                _set_flag(out.id, "featured", featured)

            tab_edit, tab_media = st.tabs(["Edit", "Media"])
            with tab_edit:
                toggle_button(f"edit_bundle_{out.id}", "Edit", "Cancel Edit")
                if st.session_state.get(f"edit_bundle_{out.id}", False):
                    if render_bundle_form(bundle):
                        st.session_state[f"edit_bundle_{out.id}"] = False
                        st.rerun()
                if confirm_delete_button(f"bundle_{out.id}"):
                    if _delete(out):
                        st.rerun()
            with tab_media:
                render_attachment_gallery("bundle", out.id)
