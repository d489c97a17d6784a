import streamlit as st
from constants.site_content import BUSINESS_NAME, OWNER_NAME, CORE_VALUES, SERVICE_AREA
from utils.auth_ui import render_account_box

st.set_page_config(page_title=f"About | {BUSINESS_NAME}", layout="wide")
render_account_box(expanded=False)

st.title(f"Meet {OWNER_NAME}")
st.write(
    f"{BUSINESS_NAME} is a local, family-owned pool service. Every pool gets the same care "
    "we would give our own, with clear reports after each visit."
)

st.markdown("### Our Core Values")
cols = st.columns(2)
for i, (title, description) in enumerate(CORE_VALUES):
    with cols[i % 2]:
        st.markdown(f"**{title}**")
        st.caption(description)

st.markdown("### Why Choose Us")
st.write(SERVICE_AREA)
