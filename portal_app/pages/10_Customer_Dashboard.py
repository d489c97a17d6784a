import streamlit as st
from utils.session import require_login
from utils.auth_ui import render_account_box
from components.customer.overview import render_overview
from components.customer.scheduling import render_upcoming_schedule
from components.customer.service_history import render_service_history
from components.customer.billing import render_billing
from components.customer.quotes import render_quotes
from components.customer.jobs import render_active_jobs
from components.customer.pool_dna import render_pool_dna
from components.customer.contact import render_contact


st.set_page_config(page_title="My Dashboard", layout="wide")

# --- Login Check ---
user = require_login()
render_account_box(expanded=False)

st.title(f"Welcome back, {user.full_name or user.email}")

render_overview(user.user_id)

# --- Page structure ---
tab1, tab2, tab3, tab4, tab5, tab6, tab7 = st.tabs([
    "Scheduling",
    "Service History",
    "Billing",
    "Quotes",
    "Jobs",
    "Pool DNA",
    "Contact",
])

with tab1:
    render_upcoming_schedule(user.user_id)

with tab2:
    render_service_history(user.user_id)

with tab3:
    render_billing(user.user_id)

with tab4:
    render_quotes(user.user_id)

with tab5:
    render_active_jobs(user.user_id)

with tab6:
    render_pool_dna(user.user_id)

with tab7:
    render_contact(user.user_id)
