from datetime import date, datetime, timedelta
from decimal import Decimal
from types import SimpleNamespace

from constants.general_constants import SERVICE_OVERDUE_SUGGESTION
from models.pool_models import ChemicalLog, Equipment, PoolDNA
from services.pool_dna_services import (
    chemical_trends, days_since, get_pool_summary, maintenance_suggestion
)


def test_days_since_and_suggestion(today):
    assert days_since(today - timedelta(days=31), today) == 31
    assert days_since(None, today) is None
    assert maintenance_suggestion(31) == SERVICE_OVERDUE_SUGGESTION
    assert maintenance_suggestion(30) is None
    assert maintenance_suggestion(None) is None


def test_chemical_trends_sorted_oldest_first():
    logs = [
        SimpleNamespace(created_at=datetime(2025, 3, 1), ph=Decimal("7.4"), chlorine=Decimal("2.5"), alkalinity=100),
        SimpleNamespace(created_at=datetime(2025, 2, 20), ph=Decimal("7.8"), chlorine=None, alkalinity=90),
    ]

    trends = chemical_trends(logs)

    assert trends.dates == ["2/20", "3/1"]
    assert trends.ph == [7.8, 7.4]
    assert trends.chlorine == [None, 2.5]
    assert trends.as_rows()[1] == {"date": "3/1", "pH": 7.4, "Chlorine": 2.5, "Alkalinity": 100.0}


def test_no_readings_means_no_trends():
    assert chemical_trends([]) is None


def test_pool_summary(db, customer, today):
    pool = PoolDNA(customer_id=customer.id, volume_gallons=15000, pool_type="Gunite", last_service_date=today - timedelta(days=45))
    db.add(pool)
    db.flush()
    db.add(Equipment(pool_dna_id=pool.id, name="Variable Speed Pump", type="pump"))
    db.add(ChemicalLog(pool_dna_id=pool.id, ph=Decimal("7.5"), chlorine=Decimal("3.00"), alkalinity=110, created_at=datetime(2025, 3, 1, 9)))
    db.commit()

    summary = get_pool_summary(db, customer.id, today=today)

    assert summary.days_since_last_service == 45
    assert summary.suggestion == SERVICE_OVERDUE_SUGGESTION
    assert [e.name for e in summary.pool.equipment] == ["Variable Speed Pump"]
    assert summary.trends.dates == ["3/1"]


def test_no_pool_on_file(db, customer):
    assert get_pool_summary(db, customer.id, today=date(2025, 3, 5)) is None
