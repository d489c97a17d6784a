import logging
import streamlit as st
from utils.auth import get_current_user, sign_in, register, AuthError
from utils.authz import home_page_for
from utils.auth_ui import render_account_box
from db.orm_session import get_session
from services.user_services import ensure_profile


logger = logging.getLogger(__name__)

st.set_page_config(page_title="Login", layout="centered")

# Already signed in: straight to the right dashboard
user = get_current_user()
if user:
    st.switch_page(home_page_for(user.role))

render_account_box(expanded=False)
st.title("Customer Portal")

tab_login, tab_register = st.tabs(["Sign In", "Create Account"])

with tab_login:
    with st.form("login_form"):
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign In")

    if submitted:
        session = None
        if not email or not password:
            st.error("Please enter your email and password")
        else:
            try:
                session = sign_in(email, password)
            except AuthError as e:
                st.error(str(e))

        if session:
            try:
                with get_session() as db:
                    ensure_profile(db, session.user_id, session.email, session.full_name)
            except Exception:
                # Profile row is also created by the backend's signup hook
                logger.exception("Profile sync failed")
            st.switch_page(home_page_for(session.role))

with tab_register:
    with st.form("register_form"):
        full_name = st.text_input("Full Name")
        reg_email = st.text_input("Email", key="register_email")
        reg_password = st.text_input("Password", type="password", key="register_password")
        reg_submitted = st.form_submit_button("Create Account")

    if reg_submitted:
        if not full_name or not reg_email or not reg_password:
            st.error("Please fill in all fields")
        else:
            try:
                register(reg_email, reg_password, full_name)
                st.success("Account created. Check your email to confirm it, then sign in.")
            except AuthError as e:
                st.error(str(e))
