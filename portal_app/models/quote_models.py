import uuid
from sqlalchemy import Column, String, Text, Date, DateTime, ForeignKey, Numeric, Uuid, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from db.base import Base


class Quote(Base):
    __tablename__ = "quotes"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    quote_number = Column(String(20), unique=True, nullable=False)
    customer_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    created_by = Column(Uuid, ForeignKey("users.id"), nullable=True)
    title = Column(String(100), nullable=False)
    service_type = Column(String(50), nullable=True)
    description = Column(Text, nullable=True)
    amount = Column(Numeric(12, 2), default=0, nullable=False)
    status = Column(String(20), default="draft", nullable=False)
    valid_until = Column(Date, nullable=True)
    last_viewed_at = Column(DateTime(timezone=True), nullable=True)
    approval_date = Column(DateTime(timezone=True), nullable=True)
    denial_date = Column(DateTime(timezone=True), nullable=True)
    denial_reason = Column(Text, nullable=True)
    reminder_sent_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    customer = relationship("UserProfile", foreign_keys=[customer_id])
    activities = relationship(
        "QuoteActivity",
        back_populates="quote",
        order_by="QuoteActivity.created_at",
        cascade="all, delete-orphan",
    )


class QuoteActivity(Base):
    __tablename__ = "quote_activities"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    quote_id = Column(Uuid, ForeignKey("quotes.id", ondelete="CASCADE"), nullable=False)
    activity_type = Column(String(50), nullable=False)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=True)
    details = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    quote = relationship("Quote", back_populates="activities")
