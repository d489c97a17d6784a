import logging
from decimal import Decimal
import streamlit as st
from constants.general_constants import PAYMENT_METHODS
from db.orm_session import get_session
from schemas.dashboard_schemas import PaymentInput
from services.billing_services import get_invoices, invoice_balance, is_open, summarize_invoices, process_payment
from utils.formatters import format_currency, format_date


logger = logging.getLogger(__name__)


def invoice_rows(invoices) -> list[dict]:
    return [
        {
            "Invoice": inv.invoice_number,
            "Issued": format_date(inv.issue_date),
            "Due": format_date(inv.due_date),
            "Total": format_currency(inv.total_amount),
            "Balance": format_currency(invoice_balance(inv)),
            "Status": inv.status,
        }
        for inv in invoices
    ]

def render_payment_form(invoice, customer_id) -> bool:
    balance = invoice_balance(invoice)
    with st.form(f"pay_invoice_{invoice.id}"):
        amount = st.number_input("Amount ($)", min_value=0.01, max_value=float(balance), value=float(balance),
                                 step=0.01, format="%.2f")
        method = st.selectbox("Payment Method", PAYMENT_METHODS,
                              format_func=lambda m: m.replace("_", " ").title())
        submitted = st.form_submit_button(f"Pay {invoice.invoice_number}")

    if not submitted:
        return False

    try:
        with get_session() as db:
            payment = process_payment(db, PaymentInput(
                invoice_id=invoice.id,
                amount=Decimal(str(amount)),
                payment_method=method,
                customer_id=customer_id,
            ))
        st.success(f"Payment received. Receipt {payment.receipt_number}.")
        return True
    except Exception:
        logger.exception("Payment failed")
        st.error("Failed to process payment.")
    return False

def render_billing(customer_id):
    with get_session() as db:
        invoices = get_invoices(db, customer_id)

    if not invoices:
        st.info("No invoices yet.")
        return

    summary = summarize_invoices(invoices)
    st.metric("Balance Due", format_currency(summary.balance_due))
    st.dataframe(invoice_rows(invoices), use_container_width=True, hide_index=True)

    open_invoices = [inv for inv in invoices if is_open(inv) and invoice_balance(inv) > 0]
    if not open_invoices:
        return

    st.markdown("#### Pay an Invoice")
    labels = {f"{inv.invoice_number} ({format_currency(invoice_balance(inv))})": inv for inv in open_invoices}
    selected = labels[st.selectbox("Invoice", list(labels.keys()), key="pay_invoice_select")]
    if render_payment_form(selected, customer_id):
        st.rerun()

    if selected.payments:
        st.caption("Payments on this invoice")
        st.dataframe(
            [
                {"Date": format_date(p.payment_date), "Amount": format_currency(p.amount),
                 "Method": p.payment_method, "Receipt": p.receipt_number or ""}
                for p in selected.payments
            ],
            use_container_width=True,
            hide_index=True,
        )
