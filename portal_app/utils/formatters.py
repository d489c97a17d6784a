from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP


CURRENCY_SYMBOLS = {"USD": "$", "EUR": "€", "GBP": "£"}


def _to_datetime(value):
    if isinstance(value, (date, datetime)):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))

def format_currency(value, currency: str = "USD") -> str:
    """e.g. 1234.5 -> '$1,234.50', -5.5 -> '-$5.50'"""
    if value is None or value == "":
        return ""
    amount = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    symbol = CURRENCY_SYMBOLS.get(currency, f"{currency} ")
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"

def format_date(value) -> str:
    """e.g. 'Mar 5, 2025'"""
    if not value:
        return ""
    d = _to_datetime(value)
    return f"{d:%b} {d.day}, {d.year}"

def format_datetime(value) -> str:
    """e.g. 'Mar 5, 2025, 3:07 PM'"""
    if not value:
        return ""
    d = _to_datetime(value)
    if not isinstance(d, datetime):
        return format_date(d)
    hour = d.hour % 12 or 12
    return f"{d:%b} {d.day}, {d.year}, {hour}:{d:%M} {d:%p}"

def format_with_unit(value, unit: str) -> str:
    if value is None:
        return ""
    return f"{value:,} {unit}"

def format_short_date(value) -> str:
    """Chart axis label, e.g. '3/5'"""
    d = _to_datetime(value)
    return f"{d.month}/{d.day}"
