from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload
from models.contact_models import ContactMessage
from schemas.dashboard_schemas import ContactInput
from utils.db_transaction import transactional


class IncompleteMessageError(ValueError):
    pass


@transactional
def send_contact_message(db: Session, data: ContactInput) -> ContactMessage:
    if not data.subject.strip() or not data.message.strip():
        raise IncompleteMessageError("Please fill in all fields")
    message = ContactMessage(
        customer_id=data.customer_id,
        subject=data.subject.strip(),
        message=data.message.strip(),
        status="new",
    )
    db.add(message)
    db.commit()
    return message

def get_customer_messages(db: Session, customer_id) -> list[ContactMessage]:
    stmt = (
        select(ContactMessage)
        .where(ContactMessage.customer_id == customer_id)
        .order_by(ContactMessage.created_at.desc())
    )
    return db.execute(stmt).scalars().all()

def get_all_messages(db: Session, status: str | None = None) -> list[ContactMessage]:
    stmt = (
        select(ContactMessage)
        .options(selectinload(ContactMessage.customer))
        .order_by(ContactMessage.created_at.desc())
    )
    if status:
        stmt = stmt.where(ContactMessage.status == status)
    return db.execute(stmt).scalars().all()

@transactional
def mark_message_read(db: Session, message_id) -> None:
    message = db.get(ContactMessage, message_id)
    if message is None:
        raise LookupError(f"Message {message_id} not found")
    message.status = "read"
    db.commit()
