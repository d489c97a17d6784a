import logging
from datetime import date, timedelta
import streamlit as st
from constants.general_constants import SCHEDULE_STATUSES
from db.orm_session import get_session
from services.schedule_services import (
    get_schedules_in_range, get_active_technicians, assign_technician, update_schedule_status
)
from utils.formatters import format_date


logger = logging.getLogger(__name__)

UNASSIGNED = "Unassigned"


def _apply(fn, *args) -> bool:
    try:
        with get_session() as db:
            fn(db, *args)
        return True
    except Exception:
        logger.exception(f"{fn.__name__} failed")
        st.error("Failed to update schedule.")
        return False

def render_schedule_management():
    st.subheader("Scheduling")

    c1, c2, c3 = st.columns(3)
    with c1:
        start = st.date_input("From", value=date.today(), key="sched_from")
    with c2:
        end = st.date_input("To", value=date.today() + timedelta(days=7), key="sched_to")
    with c3:
        status = st.selectbox("Status", ["All", *SCHEDULE_STATUSES], key="sched_status")

    with get_session() as db:
        schedules = get_schedules_in_range(db, start, end, None if status == "All" else status)
        technicians = get_active_technicians(db)

    if not schedules:
        st.info("No schedules in this range.")
        return

    tech_options = {UNASSIGNED: None, **{t.full_name: t.id for t in technicians}}
    tech_labels = list(tech_options.keys())

    for s in schedules:
        customer = s.customer.full_name if s.customer else "Unknown customer"
        with st.expander(f"{format_date(s.date)} {s.time_window or ''} · {customer}"):
            st.caption(s.address or "No address on file")
            c1, c2 = st.columns(2)
            with c1:
                current = next((i for i, l in enumerate(tech_labels) if tech_options[l] == s.technician_id), 0)
                tech = st.selectbox("Technician", tech_labels, index=current, key=f"sched_tech_{s.id}")
            with c2:
                new_status = st.selectbox(
                    "Status", SCHEDULE_STATUSES,
                    index=SCHEDULE_STATUSES.index(s.status) if s.status in SCHEDULE_STATUSES else 0,
                    key=f"sched_status_{s.id}",
                )
            if st.button("Save", key=f"sched_save_{s.id}"):
                ok = True
                if tech_options[tech] != s.technician_id:
                    ok = _apply(assign_technician, s.id, tech_options[tech]) and ok
                if new_status != s.status:
                    ok = _apply(update_schedule_status, s.id, new_status) and ok
                if ok:
                    st.success("Schedule updated.")
