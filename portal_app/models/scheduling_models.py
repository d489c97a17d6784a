import uuid
from sqlalchemy import Column, String, Text, Date, DateTime, ForeignKey, Numeric, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from db.base import Base


class Schedule(Base):
    __tablename__ = "schedules"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    customer_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    technician_id = Column(Uuid, ForeignKey("technicians.id"), nullable=True)
    date = Column(Date, nullable=False)
    time_window = Column(String(50), nullable=True)
    status = Column(String(20), default="scheduled", nullable=False)
    address = Column(Text, nullable=True)
    frequency = Column(String(50), default="weekly", nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    customer = relationship("UserProfile")
    technician = relationship("Technician")


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    job_number = Column(String(20), unique=True, nullable=True)
    customer_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    technician_id = Column(Uuid, ForeignKey("technicians.id"), nullable=True)
    schedule_id = Column(Uuid, ForeignKey("schedules.id"), nullable=True)
    job_type = Column(String(50), default="one_time", nullable=False)
    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(20), default="scheduled", nullable=False)
    date = Column(Date, nullable=False)
    time_window = Column(String(50), nullable=True)
    price = Column(Numeric(10, 2), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    customer = relationship("UserProfile")
    technician = relationship("Technician")
    chemical_logs = relationship("ChemicalLog", back_populates="job", order_by="ChemicalLog.created_at")
