import logging
from datetime import date, timedelta
import streamlit as st
from constants.general_constants import JOB_STATUSES
from db.orm_session import get_session
from services.job_services import get_jobs_in_range, update_job_status
from utils.formatters import format_date, format_currency


logger = logging.getLogger(__name__)


def render_job_management():
    st.subheader("Jobs")

    c1, c2, c3 = st.columns(3)
    with c1:
        start = st.date_input("From", value=date.today() - timedelta(days=30), key="jobs_from")
    with c2:
        end = st.date_input("To", value=date.today() + timedelta(days=30), key="jobs_to")
    with c3:
        status = st.selectbox("Status", ["All", *JOB_STATUSES], key="jobs_status")

    with get_session() as db:
        jobs = get_jobs_in_range(db, start, end, None if status == "All" else status)

    if not jobs:
        st.info("No jobs in this range.")
        return

    for job in jobs:
        customer = job.customer.full_name if job.customer else "Unknown customer"
        label = f"{format_date(job.date)} · {job.job_number or ''} {job.title} · {customer}"
        with st.expander(label):
            st.caption(
                f"{job.job_type.replace('_', ' ')} · "
                f"{job.technician.full_name if job.technician else 'Unassigned'} · "
                f"{format_currency(job.price)}"
            )
            if job.description:
                st.write(job.description)
            c1, c2 = st.columns([2, 1])
            with c1:
                new_status = st.selectbox(
                    "Status", JOB_STATUSES,
                    index=JOB_STATUSES.index(job.status) if job.status in JOB_STATUSES else 0,
                    key=f"job_status_{job.id}",
                )
            with c2:
                st.write("")
                if st.button("Update", key=f"job_update_{job.id}", disabled=new_status == job.status):
                    try:
                        with get_session() as db:
                            update_job_status(db, job.id, new_status)
                        st.success("Job updated.")
                    except Exception:
                        logger.exception("Job status update failed")
                        st.error("Failed to update job.")
