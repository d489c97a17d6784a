import logging
from decimal import Decimal
import streamlit as st
from db.orm_session import get_session
from schemas.catalog_schemas import ServiceInput, validate_service
from services.service_catalog_services import save_service
from components.catalog.product_form import category_picker


logger = logging.getLogger(__name__)


def render_service_form(service=None) -> bool:
    key = f"service_form_{service.id if service else 'new'}"

    with st.form(key):
        name = st.text_input("Service Name", value=service.name if service else "")
        description = st.text_area("Description", value=(service.description or "") if service else "")

        c1, c2 = st.columns(2)
        with c1:
            price = st.number_input("Price ($)", min_value=0.0, step=0.01, format="%.2f",
                                    value=float(service.price) if service else 0.0)
        with c2:
            estimated_duration = st.number_input(
                "Estimated Duration (minutes)", min_value=0, step=15,
                value=int(service.estimated_duration or 60) if service else 60,
            )

        category_id = category_picker("Category", service.category_id if service else None, f"{key}_category")

        c3, c4, c5, c6 = st.columns(4)
        with c3:
            recurring = st.checkbox("Recurring", value=service.recurring if service else False)
        with c4:
            taxable = st.checkbox("Taxable", value=service.taxable if service else True)
        with c5:
            active = st.checkbox("Active", value=service.active if service else True)
        with c6:
            featured = st.checkbox("Featured", value=service.featured if service else False)

        submitted = st.form_submit_button("Update Service" if service else "Create Service")

    if not submitted:
        return False

    data = ServiceInput(
        id=service.id if service else None,
        name=name,
        description=description,
        price=Decimal(str(price)),
        estimated_duration=int(estimated_duration),
        recurring=recurring,
        category_id=category_id,
        taxable=taxable,
        active=active,
        featured=featured,
    )
    result = validate_service(data)
    if not result.ok:
        st.error(result.reason)
        return False

    try:
        with get_session() as db:
            save_service(db, data)
        st.success("Service saved.")
        return True
    except Exception:
        logger.exception("Service save failed")
        st.error("Failed to save service.")
    return False
