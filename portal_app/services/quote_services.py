import logging
from datetime import date, datetime, timezone
from typing import Optional
from sqlalchemy import select, func
from sqlalchemy.orm import Session, selectinload
from constants.general_constants import QUOTE_DECISIONS
from models.quote_models import Quote, QuoteActivity
from schemas.dashboard_schemas import QuoteInput
from utils.db_transaction import transactional


logger = logging.getLogger(__name__)


class QuoteAlreadyDecidedError(ValueError):
    pass


def _now() -> datetime:
    return datetime.now(timezone.utc)

def _log_activity(db: Session, quote: Quote, activity_type: str, user_id=None, details: Optional[dict] = None) -> None:
    db.add(QuoteActivity(
        quote_id=quote.id,
        activity_type=activity_type,
        user_id=user_id,
        details=details or {},
        created_at=_now(),
    ))

def _get_quote(db: Session, quote_id) -> Quote:
    quote = db.get(Quote, quote_id)
    if quote is None:
        raise LookupError(f"Quote {quote_id} not found")
    return quote

def get_customer_quotes(db: Session, customer_id) -> list[Quote]:
    stmt = (
        select(Quote)
        .where(Quote.customer_id == customer_id)
        .order_by(Quote.created_at.desc())
    )
    return db.execute(stmt).scalars().all()

def get_all_quotes(db: Session, status: Optional[str] = None) -> list[Quote]:
    stmt = (
        select(Quote)
        .options(selectinload(Quote.customer), selectinload(Quote.activities))
        .order_by(Quote.created_at.desc())
    )
    if status:
        stmt = stmt.where(Quote.status == status)
    return db.execute(stmt).scalars().all()

def next_quote_number(db: Session, today: Optional[date] = None) -> str:
    """Q-YYYYMMDD-NNN, numbered per day."""
    prefix = f"Q-{(today or date.today()):%Y%m%d}-"
    issued = db.execute(
        select(func.count()).select_from(Quote).where(Quote.quote_number.like(f"{prefix}%"))
    ).scalar_one()
    return f"{prefix}{issued + 1:03d}"

@transactional
def create_quote(db: Session, data: QuoteInput, today: Optional[date] = None) -> Quote:
    quote = Quote(
        quote_number=next_quote_number(db, today),
        customer_id=data.customer_id,
        created_by=data.created_by,
        title=data.title.strip(),
        service_type=data.service_type,
        description=data.description,
        amount=data.amount,
        status="draft",
        valid_until=data.valid_until,
    )
    db.add(quote)
    db.flush()
    _log_activity(db, quote, "created", data.created_by)
    db.commit()
    return quote

@transactional
def send_quote(db: Session, quote_id, user_id=None) -> None:
    quote = _get_quote(db, quote_id)
    quote.status = "sent"
    _log_activity(db, quote, "sent", user_id)
    db.commit()
    logger.info(f"Quote {quote.quote_number} sent")

@transactional
def send_quote_reminder(db: Session, quote_id, user_id=None) -> None:
    quote = _get_quote(db, quote_id)
    quote.reminder_sent_at = _now()
    _log_activity(db, quote, "reminder_sent", user_id)
    db.commit()
    logger.info(f"Reminder sent for quote {quote.quote_number}")

@transactional
def mark_quote_viewed(db: Session, quote_id, user_id=None) -> None:
    quote = _get_quote(db, quote_id)
    quote.last_viewed_at = _now()
    if quote.status == "sent":
        quote.status = "viewed"
    _log_activity(db, quote, "viewed", user_id)
    db.commit()

@transactional
def decide_quote(db: Session, quote_id, decision: str, user_id=None, reason: Optional[str] = None) -> None:
    """Customer approval or denial; a quote is decided once."""
    if decision not in QUOTE_DECISIONS:
        raise ValueError(f"Unknown quote decision: {decision}")
    quote = _get_quote(db, quote_id)
    if quote.status in QUOTE_DECISIONS:
        raise QuoteAlreadyDecidedError(f"Quote {quote.quote_number} is already {quote.status}")

    quote.status = decision
    details = {}
    if decision == "approved":
        quote.approval_date = _now()
    else:
        quote.denial_date = _now()
        quote.denial_reason = (reason or "").strip() or None
        if quote.denial_reason:
            details["reason"] = quote.denial_reason

    _log_activity(db, quote, decision, user_id, details)
    db.commit()
