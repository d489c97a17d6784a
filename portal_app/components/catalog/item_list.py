"""
List screens shared by products and services: search, category filter,
active/featured switches, inline edit, delete and media.
"""
import logging
import streamlit as st
from db.orm_session import get_session
from services.category_services import get_category_names
from services.product_services import get_products, set_product_flag, delete_product
from services.service_catalog_services import get_services, set_service_flag, delete_service
from components.catalog.product_form import render_product_form, category_picker
from components.catalog.service_form import render_service_form
from components.catalog.attachment_gallery import render_attachment_gallery
from components.common.toggle import toggle_button, confirm_delete_button
from utils.formatters import format_currency, format_with_unit


logger = logging.getLogger(__name__)

ITEM_KINDS = {
    "product": {
        "title": "Products",
        "fetch": get_products,
        "set_flag": set_product_flag,
        "delete": delete_product,
        "form": render_product_form,
    },
    "service": {
        "title": "Services",
        "fetch": get_services,
        "set_flag": set_service_flag,
        "delete": delete_service,
        "form": render_service_form,
    },
}


def _set_flag(kind: str, item, field: str, value: bool):
    try:
        with get_session() as db:
            ITEM_KINDS[kind]["set_flag"](db, item.id, field, value)
    except Exception:
        logger.exception(f"{kind} {field} update failed")
        st.error(f"Failed to update {kind}.")

def _delete(kind: str, item) -> bool:
    try:
        with get_session() as db:
            ITEM_KINDS[kind]["delete"](db, item.id)
        st.success(f"Deleted {item.name}.")
        return True
    except Exception:
        logger.exception(f"{kind} delete failed")
        st.error(f"Failed to delete {kind}.")
        return False

def _summary(kind: str, item, category_names: dict) -> str:
    parts = [format_currency(item.price)]
    if kind == "product" and item.sku:
        parts.append(f"SKU {item.sku}")
    if kind == "service" and item.estimated_duration:
        parts.append(format_with_unit(item.estimated_duration, "minutes"))
    parts.append(category_names.get(item.category_id, "Uncategorized"))
    if not item.active:
        parts.append("inactive")
    return " · ".join(parts)

def render_item_list(kind: str):
    config = ITEM_KINDS[kind]
    st.subheader(config["title"])

    toggle_button(f"show_new_{kind}", f"Add {kind.title()}", f"Hide {kind.title()} Form")
    if st.session_state.get(f"show_new_{kind}", False):
        if config["form"]():
            st.session_state[f"show_new_{kind}"] = False
            st.rerun()

    c1, c2 = st.columns([2, 1])
    with c1:
        search = st.text_input(f"Search {config['title'].lower()}", key=f"search_{kind}")
    with c2:
        category_id = category_picker("Filter by category", None, f"filter_{kind}_category")

    with get_session() as db:
        items = config["fetch"](db, search=search, category_id=category_id)
        category_names = get_category_names(db)

    if not items:
        st.info(f"No {config['title'].lower()} found.")
        return

    for item in items:
        label = f"{'⭐ ' if item.featured else ''}{item.name}"
        with st.expander(label):
            st.caption(_summary(kind, item, category_names))
            if item.description:
                st.write(item.description)

            f1, f2 = st.columns(2)
            with f1:
                active = st.toggle("Active", value=item.active, key=f"{kind}_active_{item.id}")
            with f2:
                featured = st.toggle("Featured", value=item.featured, key=f"{kind}_featured_{item.id}")
            if active != item.active:
                _set_flag(kind, item, "active", active)
            if featured != item.featured:
                _set_flag(kind, item, "featured", featured)

            tab_edit, tab_media = st.tabs(["Edit", "Media"])
            with tab_edit:
                toggle_button(f"edit_{kind}_{item.id}", "Edit", "Cancel Edit")
                if st.session_state.get(f"edit_{kind}_{item.id}", False):
                    if config["form"](item):
                        st.session_state[f"edit_{kind}_{item.id}"] = False
                        st.rerun()
                if confirm_delete_button(f"{kind}_{item.id}"):
                    if _delete(kind, item):
                        st.rerun()
            with tab_media:
                render_attachment_gallery(kind, item.id)
