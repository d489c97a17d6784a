import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload
from constants.general_constants import INVOICE_OPEN_STATUSES, PAYMENT_METHODS, RECEIPT_EMAIL_TYPE
from models.billing_models import Invoice, Payment, EmailSetting
from schemas.dashboard_schemas import BillingSummary, PaymentInput, ReceiptEmail
from utils.db_transaction import transactional
from utils.formatters import format_currency, format_date


logger = logging.getLogger(__name__)


class _TemplateValues(dict):
    def __missing__(self, key):
        return "{" + key + "}"


def get_invoices(db: Session, customer_id=None) -> list[Invoice]:
    """Invoices newest first with their payments; all customers when customer_id is None."""
    stmt = (
        select(Invoice)
        .options(selectinload(Invoice.payments), selectinload(Invoice.customer))
        .order_by(Invoice.issue_date.desc(), Invoice.created_at.desc())
    )
    if customer_id is not None:
        stmt = stmt.where(Invoice.customer_id == customer_id)
    return db.execute(stmt).scalars().all()

def amount_paid(invoice: Invoice) -> Decimal:
    return sum(
        (Decimal(p.amount) for p in invoice.payments if p.status == "completed"),
        Decimal("0"),
    )

def invoice_balance(invoice: Invoice) -> Decimal:
    return max(Decimal("0"), Decimal(invoice.total_amount) - amount_paid(invoice))

def is_open(invoice: Invoice) -> bool:
    return invoice.status in INVOICE_OPEN_STATUSES

def summarize_invoices(invoices: Iterable[Invoice]) -> BillingSummary:
    open_invoices = [inv for inv in invoices if is_open(inv)]
    return BillingSummary(
        open_invoices=len(open_invoices),
        balance_due=sum((invoice_balance(inv) for inv in open_invoices), Decimal("0")),
    )

def _receipt_number(now: datetime) -> str:
    return f"R-{now:%Y%m%d-%H%M%S%f}"

@transactional
def record_payment(db: Session, data: PaymentInput) -> Payment:
    """
    Inserts a completed payment and moves the invoice to ``paid`` once
    payments cover the total, ``partial`` otherwise.
    """
    if data.payment_method not in PAYMENT_METHODS:
        raise ValueError(f"Unknown payment method: {data.payment_method}")

    invoice = db.execute(
        select(Invoice).options(selectinload(Invoice.payments)).where(Invoice.id == data.invoice_id)
    ).scalars().first()
    if invoice is None:
        raise LookupError(f"Invoice {data.invoice_id} not found")

    now = datetime.now(timezone.utc)
    payment = Payment(
        invoice_id=invoice.id,
        customer_id=data.customer_id or invoice.customer_id,
        amount=data.amount,
        payment_method=data.payment_method,
        payment_date=now,
        status="completed",
        receipt_number=_receipt_number(now),
        notes=data.notes,
    )
    db.add(payment)
    invoice.payments.append(payment)

    invoice.status = "paid" if amount_paid(invoice) >= Decimal(invoice.total_amount) else "partial"
    invoice.payment_method = data.payment_method

    db.commit()
    return payment

def get_receipt_template(db: Session) -> Optional[EmailSetting]:
    stmt = select(EmailSetting).where(
        EmailSetting.type == RECEIPT_EMAIL_TYPE, EmailSetting.is_active == True
    )
    return db.execute(stmt).scalars().first()

def render_receipt(template: EmailSetting, invoice: Invoice, payment: Payment) -> ReceiptEmail:
    customer = invoice.customer
    values = _TemplateValues(
        customer_name=(customer.full_name if customer else None) or "Customer",
        invoice_number=invoice.invoice_number,
        amount=format_currency(payment.amount),
        payment_method=payment.payment_method,
        payment_date=format_date(payment.payment_date),
        receipt_number=payment.receipt_number or "",
        balance=format_currency(invoice_balance(invoice)),
    )
    return ReceiptEmail(
        to=customer.email if customer else None,
        subject=template.subject_template.format_map(values),
        body=template.body_template.format_map(values),
    )

def send_payment_receipt(db: Session, payment_id) -> Optional[ReceiptEmail]:
    """
    Renders the active payment receipt template for a payment. Delivery is
    logged; a missing or unrenderable template is logged and skipped without
    failing the payment.
    """
    payment = db.get(Payment, payment_id)
    if payment is None or payment.invoice is None:
        logger.warning(f"No invoice found for payment {payment_id}; receipt skipped")
        return None

    template = get_receipt_template(db)
    if template is None:
        logger.warning(f"No active '{RECEIPT_EMAIL_TYPE}' email template; receipt for payment {payment_id} skipped")
        return None

    try:
        email = render_receipt(template, payment.invoice, payment)
    except (ValueError, IndexError, AttributeError) as e:
        logger.warning(f"Receipt template '{template.type}' could not be rendered for payment {payment_id}: {e}")
        return None
    logger.info(f"Payment receipt for invoice {payment.invoice.invoice_number} to {email.to}: {email.subject}")
    return email

def process_payment(db: Session, data: PaymentInput) -> Payment:
    payment = record_payment(db, data)
    send_payment_receipt(db, payment.id)
    return payment
