import streamlit as st
from config import SERVICE_HISTORY_PAGE_SIZE
from db.orm_session import get_session
from services.job_services import get_service_history
from utils.formatters import format_date, format_currency

PAGE_KEY = "service_history_page"


def _readings(job) -> str:
    if not job.chemical_logs:
        return ""
    log = job.chemical_logs[-1]
    parts = []
    if log.ph is not None:
        parts.append(f"pH {log.ph}")
    if log.chlorine is not None:
        parts.append(f"Cl {log.chlorine} ppm")
    if log.alkalinity is not None:
        parts.append(f"Alk {log.alkalinity} ppm")
    return ", ".join(parts)

def render_service_history(customer_id):
    page = st.session_state.get(PAGE_KEY, 1)

    with get_session() as db:
        history = get_service_history(db, customer_id, page=page, limit=SERVICE_HISTORY_PAGE_SIZE)

    if not history.items:
        st.info("No past services yet.")
        return

    rows = [
        {
            "Date": format_date(job.date),
            "Service": job.title,
            "Technician": job.technician.full_name if job.technician else "",
            "Status": job.status,
            "Price": format_currency(job.price),
            "Readings": _readings(job),
            "Notes": job.notes or "",
        }
        for job in history.items
    ]
    st.dataframe(rows, use_container_width=True, hide_index=True)

    c1, c2, c3 = st.columns([1, 2, 1])
    with c1:
        if st.button("Previous", disabled=not history.has_previous, key="history_prev"):
            st.session_state[PAGE_KEY] = history.page - 1
            st.rerun()
    with c2:
        st.caption(f"Page {history.page} of {history.total_pages} ({history.total} services)")
    with c3:
        if st.button("Next", disabled=not history.has_next, key="history_next"):
            st.session_state[PAGE_KEY] = history.page + 1
            st.rerun()
