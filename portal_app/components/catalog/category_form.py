import logging
import streamlit as st
from db.orm_session import get_session
from schemas.catalog_schemas import CategoryInput, validate_category
from services.category_services import get_category_forest, save_category, InvalidParentError
from services.category_tree import category_options


logger = logging.getLogger(__name__)

NO_PARENT = "None (Top Level)"


def render_category_form(category=None) -> bool:
    """Create form, or edit form when an existing category is passed."""
    with get_session() as db:
        forest = get_category_forest(db)

    form_key = f"category_form_{category.id if category else 'new'}"
    # Editing hides the category and its subtree from the parent picker
    parent_options = {NO_PARENT: None, **category_options(forest, exclude_id=category.id if category else None)}
    labels = list(parent_options.keys())
    current_parent = category.parent_id if category else None
    parent_index = next((i for i, label in enumerate(labels) if parent_options[label] == current_parent), 0)

    with st.form(form_key):
        name = st.text_input("Category Name", value=category.name if category else "")
        description = st.text_area("Description", value=(category.description or "") if category else "")
        parent_label = st.selectbox("Parent Category", labels, index=parent_index)
        sort_order = st.number_input(
            "Sort Order", min_value=0, step=1, value=int(category.sort_order or 0) if category else 0,
            help="Lower numbers are listed first",
        )
        submitted = st.form_submit_button("Update Category" if category else "Create Category")

    if not submitted:
        return False

    data = CategoryInput(
        id=category.id if category else None,
        name=name,
        description=description,
        parent_id=parent_options[parent_label],
        sort_order=int(sort_order),
    )
    result = validate_category(data, forest)
    if not result.ok:
        st.error(result.reason)
        return False

    try:
        with get_session() as db:
            save_category(db, data)
        st.success("Category saved.")
        return True
    except InvalidParentError as e:
        st.error(str(e))
    except Exception:
        logger.exception("Category save failed")
        st.error("Failed to save category.")
    return False
