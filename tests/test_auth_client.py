import uuid
from unittest.mock import Mock

import pytest
import requests

from utils.auth import AuthClient, AuthError


USER_ID = str(uuid.uuid4())


def _response(payload, ok=True, status_code=200):
    response = Mock(ok=ok, status_code=status_code, text="")
    response.json.return_value = payload
    return response


@pytest.fixture
def http():
    session = Mock()
    session.headers = {}
    return session


@pytest.fixture
def client(http):
    return AuthClient("https://auth.example.com/", "anon-key", timeout=5, session=http)


def _payload(metadata=None, token="token-1"):
    return {
        "access_token": token,
        "refresh_token": "refresh-1",
        "user": {"id": USER_ID, "email": "dana@example.com", "user_metadata": metadata or {}},
    }


def test_sign_in_posts_password_grant(client, http):
    http.post.return_value = _response(_payload())

    client.sign_in("dana@example.com", "secret")

    args, kwargs = http.post.call_args
    assert args[0] == "https://auth.example.com/auth/v1/token"
    assert kwargs["params"] == {"grant_type": "password"}
    assert kwargs["json"] == {"email": "dana@example.com", "password": "secret"}
    assert kwargs["timeout"] == 5
    assert http.headers["apikey"] == "anon-key"


def test_sign_up_sends_default_role(client, http):
    http.post.return_value = _response({"id": USER_ID})

    client.sign_up("dana@example.com", "secret", "Dana Reyes")

    assert http.post.call_args.kwargs["json"]["data"] == {"full_name": "Dana Reyes", "role": "customer"}


def test_role_from_metadata(client, http):
    session = client.to_session(_payload({"role": "admin", "full_name": "Dana Reyes"}))

    assert session.role == "admin"
    assert session.full_name == "Dana Reyes"
    assert str(session.user_id) == USER_ID
    http.post.assert_not_called()


def test_role_from_rpc(client, http):
    http.post.return_value = _response("admin")

    session = client.to_session(_payload())

    assert session.role == "admin"
    args, kwargs = http.post.call_args
    assert args[0] == "https://auth.example.com/rest/v1/rpc/get_user_role"
    assert kwargs["headers"] == {"Authorization": "Bearer token-1"}


def test_role_defaults_when_rpc_fails(client, http):
    http.post.side_effect = requests.ConnectionError("down")

    assert client.to_session(_payload()).role == "customer"


def test_error_response_raises(client, http):
    http.post.return_value = _response(
        {"error_description": "Invalid login credentials"}, ok=False, status_code=400
    )

    with pytest.raises(AuthError, match="Invalid login credentials") as exc:
        client.sign_in("dana@example.com", "wrong")

    assert exc.value.status_code == 400


def test_missing_session_rejected(client):
    with pytest.raises(AuthError):
        client.to_session({"user": {"id": USER_ID}})
