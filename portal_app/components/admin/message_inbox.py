import logging
import streamlit as st
from constants.general_constants import STATUS_COLOR_MAP
from db.orm_session import get_session
from services.contact_services import get_all_messages, mark_message_read
from utils.formatters import format_datetime


logger = logging.getLogger(__name__)


def render_message_inbox():
    st.subheader("Messages")

    unread_only = st.checkbox("Unread only", value=True, key="messages_unread_only")
    with get_session() as db:
        messages = get_all_messages(db, "new" if unread_only else None)

    if not messages:
        st.info("No messages.")
        return

    for m in messages:
        sender = m.customer.full_name if m.customer else "Unknown customer"
        with st.expander(f"{m.subject} · {sender} · {format_datetime(m.created_at)}"):
            st.markdown(f":{STATUS_COLOR_MAP.get(m.status, 'gray')}[{m.status}]")
            st.write(m.message)
            if m.customer and m.customer.email:
                st.caption(m.customer.email)
            if m.status == "new" and st.button("Mark as Read", key=f"read_{m.id}"):
                try:
                    with get_session() as db:
                        mark_message_read(db, m.id)
                    st.success("Marked as read.")
                except Exception:
                    logger.exception("Mark read failed")
                    st.error("Failed to update message.")
