import logging
from decimal import Decimal
import streamlit as st
from db.orm_session import get_session
from schemas.catalog_schemas import ProductInput, validate_product
from services.category_services import get_category_forest
from services.category_tree import category_options
from services.product_services import save_product


logger = logging.getLogger(__name__)

NO_CATEGORY = "No Category"


def category_picker(label: str, current_id, key: str):
    """Indented category selectbox; returns the chosen id or None."""
    with get_session() as db:
        forest = get_category_forest(db)
    options = {NO_CATEGORY: None, **category_options(forest)}
    labels = list(options.keys())
    index = next((i for i, l in enumerate(labels) if options[l] == current_id), 0)
    return options[st.selectbox(label, labels, index=index, key=key)]

def render_product_form(product=None) -> bool:
    key = f"product_form_{product.id if product else 'new'}"

    with st.form(key):
        name = st.text_input("Product Name", value=product.name if product else "")
        description = st.text_area("Description", value=(product.description or "") if product else "")

        c1, c2, c3 = st.columns(3)
        with c1:
            sku = st.text_input("SKU", value=(product.sku or "") if product else "")
        with c2:
            price = st.number_input("Price ($)", min_value=0.0, step=0.01, format="%.2f",
                                    value=float(product.price) if product else 0.0)
        with c3:
            cost = st.number_input("Cost ($)", min_value=0.0, step=0.01, format="%.2f",
                                   value=float(product.cost or 0) if product else 0.0)

        c4, c5 = st.columns(2)
        with c4:
            stock_quantity = st.number_input("Stock Quantity", min_value=0, step=1,
                                             value=int(product.stock_quantity) if product else 0)
        with c5:
            min_stock_level = st.number_input("Minimum Stock Level", min_value=0, step=1,
                                              value=int(product.min_stock_level) if product else 0)

        category_id = category_picker("Category", product.category_id if product else None, f"{key}_category")

        c6, c7, c8 = st.columns(3)
        with c6:
            taxable = st.checkbox("Taxable", value=product.taxable if product else True)
        with c7:
            active = st.checkbox("Active", value=product.active if product else True)
        with c8:
            featured = st.checkbox("Featured", value=product.featured if product else False)

        submitted = st.form_submit_button("Update Product" if product else "Create Product")

    if not submitted:
        return False

    data = ProductInput(
        id=product.id if product else None,
        name=name,
        description=description,
        sku=sku,
        price=Decimal(str(price)),
        cost=Decimal(str(cost)) if cost else None,
        stock_quantity=int(stock_quantity),
        min_stock_level=int(min_stock_level),
        category_id=category_id,
        taxable=taxable,
        active=active,
        featured=featured,
    )
    result = validate_product(data)
    if not result.ok:
        st.error(result.reason)
        return False

    try:
        with get_session() as db:
            save_product(db, data)
        st.success("Product saved.")
        return True
    except Exception:
        logger.exception("Product save failed")
        st.error("Failed to save product.")
    return False
