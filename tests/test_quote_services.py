from decimal import Decimal

import pytest

from models.quote_models import QuoteActivity
from schemas.dashboard_schemas import QuoteInput
from services.quote_services import (
    QuoteAlreadyDecidedError,
    create_quote,
    decide_quote,
    get_all_quotes,
    get_customer_quotes,
    mark_quote_viewed,
    next_quote_number,
    send_quote,
    send_quote_reminder,
)


def get_quote_activities(db, quote_id):
    return db.query(QuoteActivity).filter_by(quote_id=quote_id).all()


@pytest.fixture
def quote(db, customer, today):
    return create_quote(
        db,
        QuoteInput(customer_id=customer.id, title=" Heater install ", service_type="repair", amount=Decimal("1850")),
        today=today,
    )


def test_quote_numbers_count_per_day(db, customer, today, quote):
    second = create_quote(db, QuoteInput(customer_id=customer.id, title="Filter swap"), today=today)

    assert quote.quote_number == "Q-20250305-001"
    assert second.quote_number == "Q-20250305-002"
    assert next_quote_number(db, today) == "Q-20250305-003"
    assert quote.title == "Heater install"
    assert quote.status == "draft"


def test_send_view_approve(db, customer, quote):
    send_quote(db, quote.id)
    mark_quote_viewed(db, quote.id, customer.id)

    assert quote.status == "viewed"
    assert quote.last_viewed_at is not None

    decide_quote(db, quote.id, "approved", customer.id)

    assert quote.status == "approved"
    assert quote.approval_date is not None
    activity_types = {a.activity_type for a in get_quote_activities(db, quote.id)}
    assert activity_types == {"created", "sent", "viewed", "approved"}


def test_denial_keeps_reason(db, customer, quote):
    send_quote(db, quote.id)

    decide_quote(db, quote.id, "denied", customer.id, reason="  Too expensive ")

    assert quote.status == "denied"
    assert quote.denial_reason == "Too expensive"
    denied = [a for a in get_quote_activities(db, quote.id) if a.activity_type == "denied"]
    assert denied[0].details == {"reason": "Too expensive"}


def test_quote_decided_only_once(db, customer, quote):
    decide_quote(db, quote.id, "approved", customer.id)

    with pytest.raises(QuoteAlreadyDecidedError):
        decide_quote(db, quote.id, "denied", customer.id)

    assert quote.status == "approved"


def test_unknown_decision(db, quote):
    with pytest.raises(ValueError):
        decide_quote(db, quote.id, "maybe")


def test_reminder_and_listing(db, customer, quote):
    send_quote(db, quote.id)
    send_quote_reminder(db, quote.id)

    assert quote.reminder_sent_at is not None
    assert [q.id for q in get_customer_quotes(db, customer.id)] == [quote.id]
    assert [q.id for q in get_all_quotes(db, status="sent")] == [quote.id]
    assert get_all_quotes(db, status="approved") == []
