import streamlit as st
from db.orm_session import get_session
from services.job_services import get_active_jobs
from utils.formatters import format_date


def _rows(jobs) -> list[dict]:
    return [
        {"Date": format_date(j.date), "Time": j.time_window or "", "Job": j.title, "Details": j.description or ""}
        for j in jobs
    ]

def render_active_jobs(customer_id):
    with get_session() as db:
        jobs = get_active_jobs(db, customer_id)

    st.markdown("#### One-Time Jobs")
    if jobs.one_time:
        st.dataframe(_rows(jobs.one_time), use_container_width=True, hide_index=True)
    else:
        st.caption("No one-time jobs scheduled.")

    st.markdown("#### Route Stops")
    if jobs.route_stops:
        st.dataframe(_rows(jobs.route_stops), use_container_width=True, hide_index=True)
    else:
        st.caption("No recurring route stops scheduled.")
