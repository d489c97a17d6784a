import streamlit as st
from db.orm_session import get_session
from schemas.dashboard_schemas import CustomerOverview
from services.billing_services import get_invoices, summarize_invoices
from services.quote_services import get_customer_quotes
from services.schedule_services import get_upcoming_schedules
from utils.formatters import format_currency, format_date


PENDING_QUOTE_STATUSES = {"sent", "viewed"}


def load_overview(customer_id) -> CustomerOverview:
    with get_session() as db:
        upcoming = get_upcoming_schedules(db, customer_id)
        invoices = get_invoices(db, customer_id)
        quotes = get_customer_quotes(db, customer_id)

    next_visit = upcoming[0] if upcoming else None
    return CustomerOverview(
        next_visit=next_visit.date if next_visit else None,
        next_visit_window=next_visit.time_window if next_visit else None,
        billing=summarize_invoices(invoices),
        pending_quotes=sum(1 for q in quotes if q.status in PENDING_QUOTE_STATUSES),
    )

def render_overview(customer_id):
    overview = load_overview(customer_id)

    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric(
            "Next Service",
            format_date(overview.next_visit) if overview.next_visit else "Not scheduled",
            overview.next_visit_window,
            delta_color="off",
        )
    with c2:
        st.metric(
            "Balance Due",
            format_currency(overview.billing.balance_due),
            f"{overview.billing.open_invoices} open invoice(s)",
            delta_color="off",
        )
    with c3:
        st.metric("Quotes Awaiting Review", overview.pending_quotes)
