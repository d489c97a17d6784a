import logging
import streamlit as st
from constants.site_content import BUSINESS_NAME, SERVICE_AREA
from utils.auth_ui import render_account_box


logger = logging.getLogger(__name__)

st.set_page_config(page_title=f"Contact | {BUSINESS_NAME}", layout="centered")
render_account_box(expanded=False)

st.title("Get in Touch")
st.write(SERVICE_AREA)

st.markdown("### Send Us a Message")
with st.form("public_contact_form", clear_on_submit=True):
    name = st.text_input("Name")
    email = st.text_input("Email")
    message = st.text_area("Message")
    submitted = st.form_submit_button("Send")

if submitted:
    if not name or not email or not message:
        st.error("Please fill in all fields")
    else:
        logger.info(f"Contact form message from {email}")
        st.success("Thanks for reaching out! We'll get back to you soon.")
