import logging
import streamlit as st
from constants.site_content import BUSINESS_NAME, DEFAULT_SERVICES, ADDITIONAL_SERVICES
from db.orm_session import get_session
from schemas.catalog_schemas import ServiceOut
from services.service_catalog_services import get_featured_services
from utils.auth_ui import render_account_box
from utils.formatters import format_currency, format_with_unit


logger = logging.getLogger(__name__)


@st.cache_data(ttl=300)
def load_public_services() -> list[dict]:
    with get_session() as db:
        return [ServiceOut.model_validate(s).model_dump() for s in get_featured_services(db)]


st.set_page_config(page_title=f"Services | {BUSINESS_NAME}", layout="wide")
render_account_box(expanded=False)

st.title("Our Services")

try:
    services = load_public_services()
except Exception:
    logger.exception("Could not load the service catalogue")
    services = []

if services:
    for service in services:
        with st.container(border=True):
            st.markdown(f"**{'⭐ ' if service['featured'] else ''}{service['name']}**")
            if service["description"]:
                st.write(service["description"])
            details = [format_currency(service["price"])]
            if service["estimated_duration"]:
                details.append(format_with_unit(service["estimated_duration"], "minutes"))
            if service["recurring"]:
                details.append("recurring")
            st.caption(" · ".join(details))
else:
    for title, description in DEFAULT_SERVICES:
        with st.container(border=True):
            st.markdown(f"**{title}**")
            st.write(description)

st.markdown("### Additional Services")
for title, description in ADDITIONAL_SERVICES:
    st.markdown(f"- **{title}**: {description}")

st.page_link("pages/4_Schedule_Service.py", label="Schedule Service")
