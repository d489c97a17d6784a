import logging
from datetime import date, timedelta
from decimal import Decimal
import streamlit as st
from constants.general_constants import QUOTE_STATUSES, STATUS_COLOR_MAP
from db.orm_session import get_session
from schemas.dashboard_schemas import QuoteInput
from services.quote_services import get_all_quotes, create_quote, send_quote, send_quote_reminder
from services.user_services import get_customers
from components.common.toggle import toggle_button
from utils.formatters import format_currency, format_date, format_datetime


logger = logging.getLogger(__name__)

ACTIVITY_LABELS = {
    "created": "Quote created",
    "sent": "Quote sent",
    "reminder_sent": "Reminder sent",
    "viewed": "Quote viewed",
    "approved": "Quote approved",
    "denied": "Quote denied",
}


def render_quote_form(admin_id) -> bool:
    with get_session() as db:
        customers = get_customers(db)

    if not customers:
        st.warning("No customers found.")
        return False

    options = {c.label: c.id for c in customers}

    with st.form("create_quote_form"):
        customer_label = st.selectbox("Customer", list(options.keys()))
        title = st.text_input("Title")
        service_type = st.text_input("Service Type")
        description = st.text_area("Description")
        c1, c2 = st.columns(2)
        with c1:
            amount = st.number_input("Amount ($)", min_value=0.0, step=0.01, format="%.2f")
        with c2:
            valid_until = st.date_input("Valid Until", value=date.today() + timedelta(days=30))
        submitted = st.form_submit_button("Create Quote")

    if not submitted:
        return False
    if not title.strip():
        st.error("Quote title is required")
        return False

    try:
        with get_session() as db:
            quote = create_quote(db, QuoteInput(
                customer_id=options[customer_label],
                created_by=admin_id,
                title=title,
                service_type=service_type or None,
                description=description or None,
                amount=Decimal(str(amount)),
                valid_until=valid_until,
            ))
        st.success(f"Quote {quote.quote_number} created.")
        return True
    except Exception:
        logger.exception("Quote create failed")
        st.error("Failed to create quote.")
    return False

def _run(action, quote, admin_id, message: str):
    try:
        with get_session() as db:
            action(db, quote.id, admin_id)
        st.success(message)
    except Exception:
        logger.exception(f"{action.__name__} failed")
        st.error("Failed to update quote.")

def render_quote_management(admin_id):
    st.subheader("Quotes")

    toggle_button("show_new_quote", "New Quote", "Hide Quote Form")
    if st.session_state.get("show_new_quote", False):
        if render_quote_form(admin_id):
            st.session_state.show_new_quote = False

    status = st.selectbox("Status", ["All", *QUOTE_STATUSES], key="quote_status_filter")
    with get_session() as db:
        quotes = get_all_quotes(db, None if status == "All" else status)

    if not quotes:
        st.info("No quotes found.")
        return

    for quote in quotes:
        customer = quote.customer.full_name if quote.customer else "Unknown customer"
        with st.expander(f"{quote.quote_number} · {quote.title} · {customer} · {format_currency(quote.amount)}"):
            color = STATUS_COLOR_MAP.get(quote.status, "gray")
            st.markdown(f":{color}[{quote.status}] · valid until {format_date(quote.valid_until) or 'n/a'}")
            if quote.description:
                st.write(quote.description)

            c1, c2 = st.columns(2)
            with c1:
                if st.button("Send", key=f"send_quote_{quote.id}", disabled=quote.status != "draft"):
                    _run(send_quote, quote, admin_id, f"Quote {quote.quote_number} sent.")
            with c2:
                if st.button("Send Reminder", key=f"remind_quote_{quote.id}",
                             disabled=quote.status not in ("sent", "viewed")):
                    _run(send_quote_reminder, quote, admin_id, f"Reminder sent for {quote.quote_number}.")

            if quote.activities:
                st.markdown("**Activity**")
                for activity in reversed(quote.activities):
                    label = ACTIVITY_LABELS.get(activity.activity_type, activity.activity_type)
                    reason = (activity.details or {}).get("reason")
                    st.caption(f"{format_datetime(activity.created_at)} · {label}{f': {reason}' if reason else ''}")
