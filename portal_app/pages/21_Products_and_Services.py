import streamlit as st
from constants.general_constants import ROLE_ADMIN
from utils.session import require_role
from utils.auth_ui import render_account_box
from components.catalog.item_list import render_item_list
from components.catalog.bundle_list import render_bundle_list
from components.catalog.category_list import render_category_list


st.set_page_config(page_title="Products & Services", layout="wide")

# --- Access Control ---
require_role(ROLE_ADMIN)
render_account_box(expanded=False)

st.title("Products & Services")

# --- Page structure ---
tab1, tab2, tab3, tab4 = st.tabs(["Products", "Services", "Bundles", "Categories"])

with tab1:
    render_item_list("product")

with tab2:
    render_item_list("service")

with tab3:
    render_bundle_list()

with tab4:
    render_category_list()
