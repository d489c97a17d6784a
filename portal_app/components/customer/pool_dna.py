import pandas as pd
import streamlit as st
from db.orm_session import get_session
from services.pool_dna_services import get_pool_summary
from utils.formatters import format_date, format_with_unit


def render_pool_dna(customer_id):
    with get_session() as db:
        summary = get_pool_summary(db, customer_id)

    if summary is None:
        st.info("We don't have a profile for your pool yet. It will be created at your first service.")
        return

    pool = summary.pool
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Volume", format_with_unit(pool.volume_gallons, "gal") or "-")
    c2.metric("Surface Area", format_with_unit(pool.surface_area_sqft, "sq ft") or "-")
    c3.metric("Pool Type", (pool.pool_type or "-").title())
    c4.metric(
        "Days Since Service",
        summary.days_since_last_service if summary.days_since_last_service is not None else "-",
    )

    if summary.suggestion:
        st.warning(summary.suggestion)

    st.markdown("#### Chemical Trends")
    if summary.trends:
        df = pd.DataFrame(summary.trends.as_rows()).set_index("date")
        st.line_chart(df[["pH", "Chlorine"]])
        st.line_chart(df[["Alkalinity"]])
    else:
        st.caption("No chemical readings recorded yet.")

    st.markdown("#### Equipment")
    if pool.equipment:
        st.dataframe(
            [
                {
                    "Name": e.name,
                    "Type": e.type or "",
                    "Installed": format_date(e.installation_date),
                    "Last Maintenance": format_date(e.last_maintenance_date),
                }
                for e in pool.equipment
            ],
            use_container_width=True,
            hide_index=True,
        )
    else:
        st.caption("No equipment on file.")
