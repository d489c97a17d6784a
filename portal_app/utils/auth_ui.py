import streamlit as st
from constants.general_constants import HOME_PAGE, LOGIN_PAGE, ROLE_ADMIN
from utils.auth import get_current_user, sign_out
from utils.authz import home_page_for


def render_account_box(expanded: bool = True):
    """
    Renders a sidebar 'Account' box with the signed-in user, a link to their
    dashboard and Sign out. Signed-out visitors get a link to the login page.
    """
    user = get_current_user()
    with st.sidebar.expander("Account", expanded=expanded):
        if user:
            st.write(f"Signed in as **{user.full_name or user.email}**")
            st.caption("Administrator" if user.role == ROLE_ADMIN else "Customer")
            st.page_link(home_page_for(user.role), label="My dashboard")
            if st.button("Sign out", key="account_sign_out"):
                sign_out()
                st.switch_page(HOME_PAGE)
        else:
            st.write("You're not signed in.")
            st.page_link(LOGIN_PAGE, label="Log in")
