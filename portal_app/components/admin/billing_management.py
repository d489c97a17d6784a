import logging
from decimal import Decimal
import streamlit as st
from constants.general_constants import PAYMENT_METHODS
from db.orm_session import get_session
from schemas.dashboard_schemas import PaymentInput
from services.billing_services import get_invoices, invoice_balance, is_open, summarize_invoices, process_payment
from utils.formatters import format_currency, format_date


logger = logging.getLogger(__name__)


def render_billing_management():
    st.subheader("Billing")

    with get_session() as db:
        invoices = get_invoices(db)

    if not invoices:
        st.info("No invoices found.")
        return

    summary = summarize_invoices(invoices)
    c1, c2 = st.columns(2)
    c1.metric("Open Invoices", summary.open_invoices)
    c2.metric("Outstanding", format_currency(summary.balance_due))

    st.dataframe(
        [
            {
                "Invoice": inv.invoice_number,
                "Customer": inv.customer.full_name if inv.customer else "",
                "Due": format_date(inv.due_date),
                "Total": format_currency(inv.total_amount),
                "Balance": format_currency(invoice_balance(inv)),
                "Status": inv.status,
            }
            for inv in invoices
        ],
        use_container_width=True,
        hide_index=True,
    )

    open_invoices = [inv for inv in invoices if is_open(inv) and invoice_balance(inv) > 0]
    if not open_invoices:
        return

    st.markdown("#### Record a Payment")
    options = {
        f"{inv.invoice_number} · {inv.customer.full_name if inv.customer else ''} ({format_currency(invoice_balance(inv))})": inv
        for inv in open_invoices
    }
    with st.form("record_payment_form"):
        label = st.selectbox("Invoice", list(options.keys()))
        amount = st.number_input("Amount ($)", min_value=0.01, step=0.01, format="%.2f")
        method = st.selectbox("Payment Method", PAYMENT_METHODS,
                              format_func=lambda m: m.replace("_", " ").title())
        notes = st.text_input("Notes")
        submitted = st.form_submit_button("Record Payment")

    if submitted:
        invoice = options[label]
        try:
            with get_session() as db:
                payment = process_payment(db, PaymentInput(
                    invoice_id=invoice.id,
                    amount=Decimal(str(amount)),
                    payment_method=method,
                    notes=notes or None,
                ))
            st.success(f"Payment recorded. Receipt {payment.receipt_number}.")
        except Exception:
            logger.exception("Recording payment failed")
            st.error("Failed to record payment.")
