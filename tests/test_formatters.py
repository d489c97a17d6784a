from datetime import date, datetime
from decimal import Decimal

from utils.formatters import (
    format_currency, format_date, format_datetime, format_short_date, format_with_unit
)


def test_format_currency():
    assert format_currency(1234.5) == "$1,234.50"
    assert format_currency(Decimal("-5.5")) == "-$5.50"
    assert format_currency(0) == "$0.00"
    assert format_currency(None) == ""
    assert format_currency(10, currency="EUR") == "€10.00"


def test_format_date():
    assert format_date(date(2025, 3, 5)) == "Mar 5, 2025"
    assert format_date("2025-03-05") == "Mar 5, 2025"
    assert format_date(None) == ""


def test_format_datetime():
    assert format_datetime(datetime(2025, 3, 5, 15, 7)) == "Mar 5, 2025, 3:07 PM"
    assert format_datetime(datetime(2025, 3, 5, 0, 30)) == "Mar 5, 2025, 12:30 AM"
    assert format_datetime(date(2025, 3, 5)) == "Mar 5, 2025"


def test_short_date_and_units():
    assert format_short_date("2025-03-05T10:00:00Z") == "3/5"
    assert format_with_unit(12000, "gallons") == "12,000 gallons"
    assert format_with_unit(None, "gallons") == ""
