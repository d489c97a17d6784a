from datetime import date
from typing import Iterable, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload
from constants.general_constants import SERVICE_OVERDUE_DAYS, SERVICE_OVERDUE_SUGGESTION
from models.pool_models import PoolDNA, ChemicalLog
from schemas.dashboard_schemas import ChemicalTrends, PoolSummary
from utils.formatters import format_short_date


def days_since(last_service_date: Optional[date], today: Optional[date] = None) -> Optional[int]:
    if last_service_date is None:
        return None
    return ((today or date.today()) - last_service_date).days

def maintenance_suggestion(days: Optional[int]) -> Optional[str]:
    if days is not None and days > SERVICE_OVERDUE_DAYS:
        return SERVICE_OVERDUE_SUGGESTION
    return None

def _as_float(value) -> Optional[float]:
    return float(value) if value is not None else None

def chemical_trends(logs: Iterable[ChemicalLog]) -> Optional[ChemicalTrends]:
    """Readings ordered oldest first, labelled M/D. None when there are no readings."""
    ordered = sorted((log for log in logs if log.created_at is not None), key=lambda log: log.created_at)
    if not ordered:
        return None
    return ChemicalTrends(
        dates=[format_short_date(log.created_at) for log in ordered],
        ph=[_as_float(log.ph) for log in ordered],
        chlorine=[_as_float(log.chlorine) for log in ordered],
        alkalinity=[_as_float(log.alkalinity) for log in ordered],
    )

def get_pool_dna(db: Session, customer_id) -> Optional[PoolDNA]:
    stmt = (
        select(PoolDNA)
        .options(selectinload(PoolDNA.equipment), selectinload(PoolDNA.chemical_logs))
        .where(PoolDNA.customer_id == customer_id)
    )
    return db.execute(stmt).scalars().first()

def get_pool_summary(db: Session, customer_id, today: Optional[date] = None) -> Optional[PoolSummary]:
    pool = get_pool_dna(db, customer_id)
    if pool is None:
        return None
    days = days_since(pool.last_service_date, today)
    return PoolSummary(
        pool=pool,
        days_since_last_service=days,
        suggestion=maintenance_suggestion(days),
        trends=chemical_trends(pool.chemical_logs),
    )
