import logging
import streamlit as st
from db.orm_session import get_session
from models.catalog_models import Category
from services.category_services import get_category_forest, delete_category, CategoryHasChildrenError
from services.category_tree import flatten_categories, can_delete_category, indented_label
from components.catalog.category_form import render_category_form
from components.common.toggle import toggle_button, confirm_delete_button


logger = logging.getLogger(__name__)


def render_category_list():
    st.subheader("Categories")

    toggle_button("show_new_category", "Add Category", "Hide Category Form")
    if st.session_state.get("show_new_category", False):
        if render_category_form():
            st.session_state.show_new_category = False
            st.rerun()

    with get_session() as db:
        forest = get_category_forest(db)

    entries = flatten_categories(forest)
    if not entries:
        st.info("No categories yet.")
        return

    for entry in entries:
        node = forest.nodes[entry.id]
        deletable = can_delete_category(forest, entry.id)
        with st.expander(indented_label(entry)):
            if node.description:
                st.caption(node.description)

            toggle_button(f"edit_category_{entry.id}", "Edit", "Cancel Edit")
            if st.session_state.get(f"edit_category_{entry.id}", False):
                with get_session() as db:
                    category = db.get(Category, entry.id)
                if category and render_category_form(category):
                    st.session_state[f"edit_category_{entry.id}"] = False
                    st.rerun()

            if confirm_delete_button(
                f"category_{entry.id}",
                disabled=not deletable,
                help=None if deletable else "Delete or move its subcategories first",
            ):
                if _delete(entry):
                    st.rerun()


def _delete(entry) -> bool:
    try:
        with get_session() as db:
            delete_category(db, entry.id)
        st.success(f"Deleted {entry.name}.")
        return True
    except CategoryHasChildrenError as e:
        st.warning(str(e))
    except Exception:
        logger.exception("Category delete failed")
        st.error("Failed to delete category.")
    return False
