import logging
import streamlit as st
from db.orm_session import get_session
from schemas.dashboard_schemas import ContactInput
from services.contact_services import send_contact_message, get_customer_messages, IncompleteMessageError
from utils.formatters import format_datetime


logger = logging.getLogger(__name__)


def render_contact_form(customer_id) -> bool:
    with st.form("customer_contact_form", clear_on_submit=True):
        subject = st.text_input("Subject")
        message = st.text_area("Message")
        submitted = st.form_submit_button("Send Message")

    if not submitted:
        return False

    if not subject.strip() or not message.strip():
        st.error("Please fill in all fields")
        return False

    try:
        with get_session() as db:
            send_contact_message(db, ContactInput(customer_id=customer_id, subject=subject, message=message))
        st.success("Message sent. We'll get back to you shortly.")
        return True
    except IncompleteMessageError as e:
        st.error(str(e))
    except Exception:
        logger.exception("Contact message failed")
        st.error("Failed to send message.")
    return False

def render_contact(customer_id):
    render_contact_form(customer_id)

    with get_session() as db:
        messages = get_customer_messages(db, customer_id)
    if messages:
        st.markdown("#### Your Messages")
        st.dataframe(
            [{"Sent": format_datetime(m.created_at), "Subject": m.subject, "Status": m.status} for m in messages],
            use_container_width=True,
            hide_index=True,
        )
