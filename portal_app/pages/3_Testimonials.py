import streamlit as st
from constants.site_content import BUSINESS_NAME, TESTIMONIALS, REVIEW_URL
from utils.auth_ui import render_account_box

st.set_page_config(page_title=f"Testimonials | {BUSINESS_NAME}", layout="wide")
render_account_box(expanded=False)

st.title("What Our Customers Say")
st.markdown("**5.0 Rating on Google** · Based on 50+ reviews")

cols = st.columns(2)
for i, t in enumerate(TESTIMONIALS):
    with cols[i % 2]:
        with st.container(border=True):
            st.markdown("⭐" * t["rating"])
            st.write(t["review"])
            st.caption(f"{t['name']} · {t['date']}")

st.link_button("Write a Review", REVIEW_URL)
