import uuid
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Boolean, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from db.base import Base


class UserProfile(Base):
    """Profile row keyed by the auth service user id."""
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True)
    full_name = Column(Text, nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(Text, nullable=True)
    address = Column(Text, nullable=True)
    city = Column(Text, nullable=True)
    state = Column(Text, nullable=True)
    zip = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class Technician(Base):
    __tablename__ = "technicians"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=True)
    full_name = Column(Text, nullable=False)
    avatar_url = Column(Text, nullable=True)
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("UserProfile")
