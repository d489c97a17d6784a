from datetime import timedelta

import pytest

from models.scheduling_models import Job, Schedule
from models.users_models import Technician
from services.job_services import get_active_jobs, get_service_history, update_job_status
from services.schedule_services import (
    assign_technician, get_active_technicians, get_upcoming_schedules, update_schedule_status
)


def _job(customer, day, **kwargs):
    return Job(customer_id=customer.id, title=kwargs.pop("title", f"Visit {day}"), date=day, **kwargs)


def test_service_history_pages_past_jobs(db, customer, today):
    for offset in range(1, 13):
        db.add(_job(customer, today - timedelta(days=offset), status="completed"))
    db.add(_job(customer, today + timedelta(days=1)))
    db.add(_job(customer, today))
    db.commit()

    first = get_service_history(db, customer.id, page=1, limit=10, today=today)
    second = get_service_history(db, customer.id, page=2, limit=10, today=today)

    assert first.total == 12
    assert first.total_pages == 2
    assert first.has_next and not first.has_previous
    assert len(first.items) == 10
    assert first.items[0].date == today - timedelta(days=1)
    assert len(second.items) == 2
    assert second.has_previous and not second.has_next


def test_active_jobs_split_by_type(db, customer, today):
    db.add(_job(customer, today, title="Green to clean", job_type="one_time"))
    db.add(_job(customer, today, title="Route stop", job_type="route_stop"))
    db.add(_job(customer, today, title="Done", job_type="one_time", status="completed"))
    db.commit()

    active = get_active_jobs(db, customer.id)

    assert [j.title for j in active.one_time] == ["Green to clean"]
    assert [j.title for j in active.route_stops] == ["Route stop"]


def test_update_job_status(db, customer, today):
    job = _job(customer, today)
    db.add(job)
    db.commit()

    update_job_status(db, job.id, "in_progress")
    assert job.status == "in_progress"

    with pytest.raises(ValueError):
        update_job_status(db, job.id, "lost")


def test_schedule_assignment(db, customer, today):
    tech = Technician(full_name="Sam Ortiz")
    db.add_all([tech, Technician(full_name="Retired Tech", active=False)])
    past = Schedule(customer_id=customer.id, date=today - timedelta(days=7))
    upcoming = Schedule(customer_id=customer.id, date=today + timedelta(days=2), time_window="8am - 12pm")
    db.add_all([past, upcoming])
    db.commit()

    assign_technician(db, upcoming.id, tech.id)
    update_schedule_status(db, upcoming.id, "in_progress")

    assert [t.full_name for t in get_active_technicians(db)] == ["Sam Ortiz"]
    schedules = get_upcoming_schedules(db, customer.id, today=today)
    assert [s.id for s in schedules] == [upcoming.id]
    assert schedules[0].technician_id == tech.id
    assert schedules[0].status == "in_progress"
