import logging
import streamlit as st
from config import LOG_LEVEL
from constants.site_content import BUSINESS_NAME, TAGLINE, SERVICE_AREA, OWNER_NAME, DEFAULT_SERVICES
from utils.auth_ui import render_account_box


logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

st.set_page_config(page_title=BUSINESS_NAME, layout="wide")

render_account_box(expanded=True)

st.title(BUSINESS_NAME)
st.subheader(TAGLINE)
st.write("Where expertise meets integrity")

c1, c2 = st.columns(2)
with c1:
    st.page_link("pages/4_Schedule_Service.py", label="Schedule Service")
with c2:
    st.page_link("pages/5_Contact.py", label="Contact Us")

st.markdown("### Our Services")
cols = st.columns(len(DEFAULT_SERVICES))
for col, (title, description) in zip(cols, DEFAULT_SERVICES):
    with col:
        st.markdown(f"**{title}**")
        st.caption(description)
st.page_link("pages/2_Services.py", label="See all services")

st.markdown(f"### Meet {OWNER_NAME}")
st.write("Owner and lead technician, caring for Flagler County pools for more than twenty years.")
st.page_link("pages/1_About.py", label="About us")

st.markdown("### Service Area")
st.write(SERVICE_AREA)
