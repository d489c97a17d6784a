from datetime import date
from typing import Optional
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload
from constants.general_constants import SCHEDULE_STATUSES
from models.scheduling_models import Schedule
from models.users_models import Technician
from utils.db_transaction import transactional


def get_upcoming_schedules(db: Session, customer_id, today: Optional[date] = None) -> list[Schedule]:
    today = today or date.today()
    stmt = (
        select(Schedule)
        .options(selectinload(Schedule.technician))
        .where(Schedule.customer_id == customer_id, Schedule.date >= today)
        .order_by(Schedule.date)
    )
    return db.execute(stmt).scalars().all()

def get_schedules_in_range(db: Session, start: date, end: date, status: Optional[str] = None) -> list[Schedule]:
    stmt = (
        select(Schedule)
        .options(selectinload(Schedule.technician), selectinload(Schedule.customer))
        .where(Schedule.date >= start, Schedule.date <= end)
        .order_by(Schedule.date, Schedule.time_window)
    )
    if status:
        stmt = stmt.where(Schedule.status == status)
    return db.execute(stmt).scalars().all()

def get_active_technicians(db: Session) -> list[Technician]:
    stmt = select(Technician).where(Technician.active == True).order_by(Technician.full_name)
    return db.execute(stmt).scalars().all()

@transactional
def assign_technician(db: Session, schedule_id, technician_id) -> None:
    schedule = db.get(Schedule, schedule_id)
    if schedule is None:
        raise LookupError(f"Schedule {schedule_id} not found")
    schedule.technician_id = technician_id
    db.commit()

@transactional
def update_schedule_status(db: Session, schedule_id, status: str) -> None:
    if status not in SCHEDULE_STATUSES:
        raise ValueError(f"Unknown schedule status: {status}")
    schedule = db.get(Schedule, schedule_id)
    if schedule is None:
        raise LookupError(f"Schedule {schedule_id} not found")
    schedule.status = status
    db.commit()
