import streamlit as st
from constants.general_constants import ROLE_ADMIN
from utils.session import require_role
from utils.auth_ui import render_account_box
from components.admin.schedule_management import render_schedule_management
from components.admin.job_management import render_job_management
from components.admin.quote_management import render_quote_management
from components.admin.billing_management import render_billing_management
from components.admin.message_inbox import render_message_inbox


st.set_page_config(page_title="Admin Dashboard", layout="wide")

# --- Access Control ---
admin = require_role(ROLE_ADMIN)
render_account_box(expanded=False)

st.title("Admin Dashboard")
st.page_link("pages/21_Products_and_Services.py", label="Manage products, services and bundles")

tab1, tab2, tab3, tab4, tab5 = st.tabs(["Scheduling", "Jobs", "Quotes", "Billing", "Messages"])

with tab1:
    render_schedule_management()

with tab2:
    render_job_management()

with tab3:
    render_quote_management(admin.user_id)

with tab4:
    render_billing_management()

with tab5:
    render_message_inbox()
