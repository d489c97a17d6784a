import logging
from datetime import date, timedelta
import streamlit as st
from constants.site_content import BUSINESS_NAME, SERVICE_REQUEST_TYPES
from utils.auth_ui import render_account_box


logger = logging.getLogger(__name__)

NO_SERVICE_TYPE = "Select a service type"

st.set_page_config(page_title=f"Schedule Service | {BUSINESS_NAME}", layout="centered")
render_account_box(expanded=False)

st.title("Schedule Service")

with st.form("schedule_service_form", clear_on_submit=True):
    name = st.text_input("Name")
    email = st.text_input("Email")
    phone = st.text_input("Phone")
    address = st.text_input("Service Address")
    service_type = st.selectbox("Service Type", [NO_SERVICE_TYPE, *SERVICE_REQUEST_TYPES])
    preferred_date = st.date_input("Preferred Date", value=date.today() + timedelta(days=1), min_value=date.today())
    notes = st.text_area("Notes")
    submitted = st.form_submit_button("Request Service")

if submitted:
    if not name or not email or not address or service_type == NO_SERVICE_TYPE:
        st.error("Please fill in all fields")
    else:
        logger.info(f"Service request: {service_type} on {preferred_date} for {email}")
        st.success("Thanks! We received your request and will confirm your appointment shortly.")
