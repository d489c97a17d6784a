from __future__ import annotations
import logging
from typing import Optional
import requests
import streamlit as st
from config import SUPABASE_URL, SUPABASE_ANON_KEY, AUTH_TIMEOUT_SECONDS
from constants.general_constants import DEFAULT_ROLE
from schemas.user_schemas import AuthSession


logger = logging.getLogger(__name__)

SESSION_KEY = "auth"


class AuthError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class AuthClient:
    """
    Thin client for the backend's auth service (password sign-in, sign-up,
    sign-out) and its ``get_user_role`` remote procedure.
    """

    def __init__(self, base_url: str, anon_key: str, timeout: int = 10, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"apikey": anon_key, "Content-Type": "application/json"})

    def _post(self, path: str, access_token: Optional[str] = None, **kwargs) -> requests.Response:
        headers = {"Authorization": f"Bearer {access_token}"} if access_token else {}
        try:
            r = self.session.post(f"{self.base_url}{path}", headers=headers, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise AuthError(f"Auth service unreachable: {e}") from e
        if not r.ok:
            raise AuthError(self._error_message(r), status_code=r.status_code)
        return r

    @staticmethod
    def _error_message(r: requests.Response) -> str:
        try:
            body = r.json()
        except ValueError:
            return r.text or f"Auth request failed ({r.status_code})"
        for key in ("error_description", "msg", "message", "error"):
            if isinstance(body, dict) and body.get(key):
                return str(body[key])
        return f"Auth request failed ({r.status_code})"

    def sign_in(self, email: str, password: str) -> dict:
        r = self._post(
            "/auth/v1/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )
        return r.json()

    def sign_up(self, email: str, password: str, full_name: str) -> dict:
        r = self._post(
            "/auth/v1/signup",
            json={
                "email": email,
                "password": password,
                "data": {"full_name": full_name, "role": DEFAULT_ROLE},
            },
        )
        return r.json()

    def sign_out(self, access_token: str) -> None:
        self._post("/auth/v1/logout", access_token=access_token)

    def get_user_role(self, access_token: str) -> Optional[str]:
        r = self._post("/rest/v1/rpc/get_user_role", access_token=access_token, json={})
        role = r.json()
        return role or None

    def resolve_role(self, user: dict, access_token: str) -> str:
        """User metadata first, then the role RPC, then the default role."""
        role = (user.get("user_metadata") or {}).get("role")
        if role:
            return role
        try:
            role = self.get_user_role(access_token)
        except AuthError as e:
            logger.warning(f"Could not resolve role for {user.get('id')}: {e}")
            role = None
        return role or DEFAULT_ROLE

    def to_session(self, payload: dict) -> AuthSession:
        user = payload.get("user") or {}
        access_token = payload.get("access_token")
        if not user.get("id") or not access_token:
            raise AuthError("Sign-in response did not include a session")
        metadata = user.get("user_metadata") or {}
        return AuthSession(
            user_id=user["id"],
            email=user.get("email"),
            full_name=metadata.get("full_name"),
            role=self.resolve_role(user, access_token),
            access_token=access_token,
            refresh_token=payload.get("refresh_token"),
        )


@st.cache_resource
def get_auth_client() -> AuthClient:
    return AuthClient(SUPABASE_URL, SUPABASE_ANON_KEY, timeout=AUTH_TIMEOUT_SECONDS)

def get_current_user() -> Optional[AuthSession]:
    """Signed-in session for this browser tab, or None."""
    return st.session_state.get(SESSION_KEY)

def sign_in(email: str, password: str) -> AuthSession:
    client = get_auth_client()
    session = client.to_session(client.sign_in(email.strip(), password))
    st.session_state[SESSION_KEY] = session
    logger.info(f"Signed in {session.email} as {session.role}")
    return session

def register(email: str, password: str, full_name: str) -> dict:
    return get_auth_client().sign_up(email.strip(), password, full_name.strip())

def sign_out() -> None:
    session = st.session_state.pop(SESSION_KEY, None)
    if session is None:
        return
    try:
        get_auth_client().sign_out(session.access_token)
    except AuthError as e:
        # Local session is already cleared
        logger.warning(f"Sign-out request failed: {e}")
