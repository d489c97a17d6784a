from __future__ import annotations
from typing import Optional
from constants.general_constants import (
    ROLE_ADMIN, ROLE_CUSTOMER, HOME_PAGE, LOGIN_PAGE, CUSTOMER_HOME_PAGE, ADMIN_HOME_PAGE
)


def resolve_redirect(is_authenticated: bool, role: Optional[str], required_role: Optional[str]) -> Optional[str]:
    """
    Page a visitor must be sent to, or None when they may stay.

    Signed-out visitors go to the login page. A customer on an admin page goes
    to the customer dashboard; any other role mismatch goes home.
    """
    if not is_authenticated:
        return LOGIN_PAGE
    if required_role is None or role == required_role:
        return None
    if required_role == ROLE_ADMIN and role == ROLE_CUSTOMER:
        return CUSTOMER_HOME_PAGE
    return HOME_PAGE

def home_page_for(role: Optional[str]) -> str:
    """Landing page after sign-in."""
    return ADMIN_HOME_PAGE if role == ROLE_ADMIN else CUSTOMER_HOME_PAGE
