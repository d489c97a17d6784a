import uuid

import pytest

from schemas.dashboard_schemas import ContactInput
from services.contact_services import (
    IncompleteMessageError, get_all_messages, get_customer_messages, mark_message_read, send_contact_message
)
from services.user_services import ensure_profile, get_customers


def test_blank_message_rejected(db, customer):
    with pytest.raises(IncompleteMessageError, match="Please fill in all fields"):
        send_contact_message(db, ContactInput(customer_id=customer.id, subject="Leak", message="   "))

    assert get_customer_messages(db, customer.id) == []


def test_send_and_read_message(db, customer):
    message = send_contact_message(db, ContactInput(customer_id=customer.id, subject=" Leak ", message="Pump is dripping"))

    assert message.subject == "Leak"
    assert [m.status for m in get_all_messages(db, status="new")] == ["new"]

    mark_message_read(db, message.id)

    assert get_all_messages(db, status="new") == []
    assert get_customer_messages(db, customer.id)[0].status == "read"


def test_ensure_profile_fills_gaps(db, customer):
    ensure_profile(db, customer.id, email="other@example.com", full_name="Other")

    assert customer.email == "dana@example.com"
    assert [c.label for c in get_customers(db)] == ["Dana Reyes"]


def test_ensure_profile_creates_row(db):
    user_id = uuid.uuid4()

    ensure_profile(db, user_id, email="new@example.com")

    assert [c.label for c in get_customers(db)] == ["new@example.com"]
