import streamlit as st
from config import SCHEDULE_REFRESH_SECONDS
from constants.general_constants import STATUS_COLOR_MAP
from db.orm_session import get_session
from services.schedule_services import get_upcoming_schedules
from components.common.refresh_tools import refresh_every
from utils.formatters import format_date


def schedule_rows(schedules) -> list[dict]:
    return [
        {
            "Date": format_date(s.date),
            "Time": s.time_window or "",
            "Technician": s.technician.full_name if s.technician else "Unassigned",
            "Frequency": (s.frequency or "").title(),
            "Status": s.status,
        }
        for s in schedules
    ]

@refresh_every(SCHEDULE_REFRESH_SECONDS)
def render_upcoming_schedule(customer_id):
    """Upcoming visits; re-fetched on a timer so admin changes show up."""
    with get_session() as db:
        schedules = get_upcoming_schedules(db, customer_id)

    if not schedules:
        st.info("No upcoming service visits are scheduled.")
        return

    next_visit = schedules[0]
    color = STATUS_COLOR_MAP.get(next_visit.status, "gray")
    st.markdown(
        f"**Next visit:** {format_date(next_visit.date)} {next_visit.time_window or ''} "
        f":{color}[{next_visit.status.replace('_', ' ')}]"
    )
    st.dataframe(schedule_rows(schedules), use_container_width=True, hide_index=True)
    st.caption(f"Updates automatically every {SCHEDULE_REFRESH_SECONDS} seconds.")
