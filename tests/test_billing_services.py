from datetime import date
from decimal import Decimal

import pytest

from models.billing_models import EmailSetting, Invoice
from schemas.dashboard_schemas import PaymentInput
from services.billing_services import (
    get_invoices, invoice_balance, process_payment, record_payment, send_payment_receipt, summarize_invoices
)


@pytest.fixture
def invoice(db, customer):
    invoice = Invoice(
        invoice_number="INV-1001",
        customer_id=customer.id,
        due_date=date(2025, 3, 31),
        subtotal=Decimal("100.00"),
        total_amount=Decimal("100.00"),
        status="pending",
    )
    db.add(invoice)
    db.commit()
    return invoice


@pytest.fixture
def receipt_template(db):
    template = EmailSetting(
        type="payment_receipt",
        subject_template="Receipt {receipt_number} for {invoice_number}",
        body_template="Hi {customer_name}, we received {amount}. Balance: {balance}. {unknown}",
        is_active=True,
    )
    db.add(template)
    db.commit()
    return template


def test_partial_then_full_payment(db, invoice):
    first = record_payment(db, PaymentInput(invoice_id=invoice.id, amount=Decimal("40"), payment_method="check"))

    assert invoice.status == "partial"
    assert invoice_balance(invoice) == Decimal("60.00")
    assert first.receipt_number.startswith("R-")
    assert first.customer_id == invoice.customer_id

    record_payment(db, PaymentInput(invoice_id=invoice.id, amount=Decimal("60"), payment_method="credit_card"))

    assert invoice.status == "paid"
    assert invoice_balance(invoice) == 0


def test_unknown_payment_method(db, invoice):
    with pytest.raises(ValueError):
        record_payment(db, PaymentInput(invoice_id=invoice.id, amount=Decimal("10"), payment_method="barter"))

    assert invoice.status == "pending"


def test_billing_summary(db, customer, invoice):
    db.add(Invoice(
        invoice_number="INV-1000",
        customer_id=customer.id,
        due_date=date(2025, 2, 28),
        subtotal=Decimal("80.00"),
        total_amount=Decimal("80.00"),
        status="paid",
    ))
    db.commit()

    summary = summarize_invoices(get_invoices(db, customer.id))

    assert summary.open_invoices == 1
    assert summary.balance_due == Decimal("100.00")


def test_receipt_rendered_from_template(db, invoice, receipt_template):
    payment = process_payment(db, PaymentInput(invoice_id=invoice.id, amount=Decimal("25"), payment_method="ach"))

    email = send_payment_receipt(db, payment.id)

    assert email.to == "dana@example.com"
    assert email.subject == f"Receipt {payment.receipt_number} for INV-1001"
    assert email.body == "Hi Dana Reyes, we received $25.00. Balance: $75.00. {unknown}"


def test_receipt_skipped_without_template(db, invoice):
    payment = process_payment(db, PaymentInput(invoice_id=invoice.id, amount=Decimal("25"), payment_method="cash"))

    assert payment.status == "completed"
    assert send_payment_receipt(db, payment.id) is None


def test_broken_template_leaves_payment_recorded(db, invoice):
    db.add(EmailSetting(
        type="payment_receipt",
        subject_template="Receipt {receipt_number}",
        body_template="Paid {amount} {0}",
        is_active=True,
    ))
    db.commit()

    payment = process_payment(db, PaymentInput(invoice_id=invoice.id, amount=Decimal("100"), payment_method="check"))

    assert payment.status == "completed"
    assert invoice.status == "paid"
    assert len(invoice.payments) == 1
    assert send_payment_receipt(db, payment.id) is None
