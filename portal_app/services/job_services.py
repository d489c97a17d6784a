from datetime import date
from typing import Optional
from sqlalchemy import select, func
from sqlalchemy.orm import Session, selectinload
from constants.general_constants import JOB_STATUSES, JOB_TYPE_ONE_TIME, JOB_TYPE_ROUTE_STOP
from models.scheduling_models import Job
from schemas.dashboard_schemas import ServiceHistoryPage, ActiveJobs
from utils.db_transaction import transactional


def get_service_history(db: Session, customer_id, page: int = 1, limit: int = 10, today: Optional[date] = None) -> ServiceHistoryPage:
    """
    Past jobs (date before today), newest first, one page at a time.
    ``page`` is 1-based.
    """
    today = today or date.today()
    page = max(1, page)
    filters = (Job.customer_id == customer_id, Job.date < today)

    total = db.execute(select(func.count()).select_from(Job).where(*filters)).scalar_one()
    stmt = (
        select(Job)
        .options(selectinload(Job.technician), selectinload(Job.chemical_logs))
        .where(*filters)
        .order_by(Job.date.desc())
        .offset((page - 1) * limit)
        .limit(limit)
    )
    jobs = db.execute(stmt).scalars().all()
    return ServiceHistoryPage(items=jobs, page=page, limit=limit, total=total)

def get_active_jobs(db: Session, customer_id) -> ActiveJobs:
    stmt = (
        select(Job)
        .where(Job.customer_id == customer_id, Job.status == "scheduled")
        .order_by(Job.date)
    )
    jobs = db.execute(stmt).scalars().all()
    return ActiveJobs(
        one_time=[j for j in jobs if j.job_type == JOB_TYPE_ONE_TIME],
        route_stops=[j for j in jobs if j.job_type == JOB_TYPE_ROUTE_STOP],
    )

def get_jobs_in_range(db: Session, start: date, end: date, status: Optional[str] = None) -> list[Job]:
    stmt = (
        select(Job)
        .options(selectinload(Job.customer), selectinload(Job.technician))
        .where(Job.date >= start, Job.date <= end)
        .order_by(Job.date.desc())
    )
    if status:
        stmt = stmt.where(Job.status == status)
    return db.execute(stmt).scalars().all()

@transactional
def update_job_status(db: Session, job_id, status: str) -> None:
    if status not in JOB_STATUSES:
        raise ValueError(f"Unknown job status: {status}")
    job = db.get(Job, job_id)
    if job is None:
        raise LookupError(f"Job {job_id} not found")
    job.status = status
    db.commit()
