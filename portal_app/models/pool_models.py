import uuid
from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Numeric, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from db.base import Base


class PoolDNA(Base):
    __tablename__ = "pool_dna"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    customer_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    volume_gallons = Column(Integer, nullable=True)
    surface_area_sqft = Column(Integer, nullable=True)
    pool_type = Column(String(50), nullable=True)
    last_service_date = Column(Date, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    equipment = relationship("Equipment", back_populates="pool", order_by="Equipment.name")
    chemical_logs = relationship("ChemicalLog", back_populates="pool", order_by="ChemicalLog.created_at")


class Equipment(Base):
    __tablename__ = "equipment"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    pool_dna_id = Column(Uuid, ForeignKey("pool_dna.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(100), nullable=False)
    type = Column(String(50), nullable=True)
    installation_date = Column(Date, nullable=True)
    last_maintenance_date = Column(Date, nullable=True)

    pool = relationship("PoolDNA", back_populates="equipment")


class ChemicalLog(Base):
    __tablename__ = "chemical_logs"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    pool_dna_id = Column(Uuid, ForeignKey("pool_dna.id", ondelete="CASCADE"), nullable=True)
    job_id = Column(Uuid, ForeignKey("jobs.id", ondelete="SET NULL"), nullable=True)
    ph = Column(Numeric(3, 1), nullable=True)
    chlorine = Column(Numeric(5, 2), nullable=True)
    alkalinity = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    pool = relationship("PoolDNA", back_populates="chemical_logs")
    job = relationship("Job", back_populates="chemical_logs")
