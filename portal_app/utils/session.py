import streamlit as st
from typing import Optional
from schemas.user_schemas import AuthSession
from utils.auth import get_current_user
from utils.authz import resolve_redirect


def enforce_role(required_role: Optional[str] = None) -> AuthSession:
    """Sends the visitor elsewhere when the signed-in role does not fit the page."""
    user = get_current_user()
    target = resolve_redirect(user is not None, user.role if user else None, required_role)
    if target is not None:
        st.switch_page(target)
        st.stop()
    return user

def require_login() -> AuthSession:
    return enforce_role(None)

def require_role(required_role: str) -> AuthSession:
    return enforce_role(required_role)
