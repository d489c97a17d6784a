import logging
import streamlit as st
from constants.general_constants import STATUS_COLOR_MAP, QUOTE_DECISIONS
from db.orm_session import get_session
from services.quote_services import get_customer_quotes, mark_quote_viewed, decide_quote, QuoteAlreadyDecidedError
from utils.formatters import format_currency, format_date


logger = logging.getLogger(__name__)

VIEWED_KEY = "viewed_quotes"


def _record_view(quote, user_id):
    # Once per quote per session
    viewed = st.session_state.setdefault(VIEWED_KEY, set())
    if quote.id in viewed:
        return
    try:
        with get_session() as db:
            mark_quote_viewed(db, quote.id, user_id)
        viewed.add(quote.id)
    except Exception:
        logger.exception("Could not record quote view")

def _decide(quote, decision: str, user_id, reason=None) -> bool:
    try:
        with get_session() as db:
            decide_quote(db, quote.id, decision, user_id, reason)
        st.success(f"Quote {quote.quote_number} {decision}.")
        return True
    except QuoteAlreadyDecidedError as e:
        st.warning(str(e))
    except Exception:
        logger.exception("Quote decision failed")
        st.error("Failed to update quote.")
    return False

def render_quotes(customer_id):
    with get_session() as db:
        quotes = get_customer_quotes(db, customer_id)

    quotes = [q for q in quotes if q.status != "draft"]
    if not quotes:
        st.info("You have no quotes.")
        return

    for quote in quotes:
        color = STATUS_COLOR_MAP.get(quote.status, "gray")
        header = f"{quote.quote_number} · {quote.title} · {format_currency(quote.amount)}"
        opened = st.toggle(header, key=f"open_quote_{quote.id}")
        st.markdown(f":{color}[{quote.status}]")
        if not opened:
            continue

        _record_view(quote, customer_id)
        with st.container(border=True):
            if quote.service_type:
                st.caption(quote.service_type)
            if quote.description:
                st.write(quote.description)
            st.caption(f"Valid until {format_date(quote.valid_until) or 'n/a'}")

            if quote.status in QUOTE_DECISIONS:
                if quote.denial_reason:
                    st.caption(f"Reason: {quote.denial_reason}")
                continue

            reason = st.text_input("Reason (optional, for denial)", key=f"deny_reason_{quote.id}")
            c1, c2 = st.columns(2)
            with c1:
                if st.button("Approve", key=f"approve_{quote.id}", type="primary"):
                    if _decide(quote, "approved", customer_id):
                        st.rerun()
            with c2:
                if st.button("Deny", key=f"deny_{quote.id}"):
                    if _decide(quote, "denied", customer_id, reason):
                        st.rerun()
