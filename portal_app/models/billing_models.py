import uuid
from sqlalchemy import Column, String, Text, Date, DateTime, ForeignKey, Numeric, Boolean, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from db.base import Base


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    invoice_number = Column(String(50), nullable=False)
    customer_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    job_id = Column(Uuid, ForeignKey("jobs.id", ondelete="SET NULL"), nullable=True)
    issue_date = Column(Date, server_default=func.current_date())
    due_date = Column(Date, nullable=False)
    subtotal = Column(Numeric(10, 2), nullable=False)
    tax_amount = Column(Numeric(10, 2), default=0, nullable=False)
    total_amount = Column(Numeric(10, 2), nullable=False)
    status = Column(String(20), default="pending", nullable=False)
    payment_method = Column(String(20), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    customer = relationship("UserProfile")
    payments = relationship("Payment", back_populates="invoice", order_by="Payment.payment_date")


class Payment(Base):
    __tablename__ = "payments"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    invoice_id = Column(Uuid, ForeignKey("invoices.id", ondelete="SET NULL"), nullable=True)
    customer_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=True)
    amount = Column(Numeric(10, 2), nullable=False)
    payment_method = Column(String(20), nullable=False)
    payment_date = Column(DateTime(timezone=True), server_default=func.now())
    status = Column(String(20), default="completed", nullable=False)
    receipt_number = Column(String(50), nullable=True)
    notes = Column(Text, nullable=True)

    invoice = relationship("Invoice", back_populates="payments")


class EmailSetting(Base):
    __tablename__ = "email_settings"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    type = Column(String(50), unique=True, nullable=False)
    subject_template = Column(Text, nullable=False)
    body_template = Column(Text, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
