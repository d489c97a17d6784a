import uuid
from sqlalchemy import (
    Column, Integer, String, Text, ForeignKey, DateTime, Boolean, Numeric, Uuid, Enum,
    UniqueConstraint
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from db.base import Base
from constants.catalog_constants import PricingType, MediaType


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class Category(Base):
    __tablename__ = "categories"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    parent_id = Column(Uuid, ForeignKey("categories.id"), nullable=True)
    sort_order = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    parent = relationship("Category", remote_side=[id], back_populates="children")
    children = relationship("Category", back_populates="parent")


class Product(Base):
    __tablename__ = "products"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    sku = Column(String(50), unique=True, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    cost = Column(Numeric(10, 2), nullable=True)
    stock_quantity = Column(Integer, default=0, nullable=False)
    min_stock_level = Column(Integer, default=0, nullable=False)
    category_id = Column(Uuid, ForeignKey("categories.id"), nullable=True)
    taxable = Column(Boolean, default=True, nullable=False)
    active = Column(Boolean, default=True, nullable=False)
    featured = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    category = relationship("Category")
    attachments = relationship(
        "Attachment",
        back_populates="product",
        order_by="Attachment.sort_order",
        foreign_keys="Attachment.product_id",
        passive_deletes=True,
    )


class Service(Base):
    __tablename__ = "services"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    estimated_duration = Column(Integer, nullable=True)
    recurring = Column(Boolean, default=False, nullable=False)
    category_id = Column(Uuid, ForeignKey("categories.id"), nullable=True)
    taxable = Column(Boolean, default=True, nullable=False)
    active = Column(Boolean, default=True, nullable=False)
    featured = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    category = relationship("Category")
    attachments = relationship(
        "Attachment",
        back_populates="service",
        order_by="Attachment.sort_order",
        foreign_keys="Attachment.service_id",
        passive_deletes=True,
    )


class Bundle(Base):
    __tablename__ = "bundles"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    pricing_type = Column(
        Enum(PricingType, name="pricing_type", values_callable=_enum_values),
        default=PricingType.ITEMIZED,
        nullable=False,
    )
    flat_price = Column(Numeric(10, 2), nullable=True)
    discount_percentage = Column(Numeric(5, 2), default=0, nullable=False)
    category_id = Column(Uuid, ForeignKey("categories.id"), nullable=True)
    taxable = Column(Boolean, default=True, nullable=False)
    active = Column(Boolean, default=True, nullable=False)
    featured = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    category = relationship("Category")
    products = relationship(
        "BundleProduct",
        back_populates="bundle",
        order_by="BundleProduct.sort_order",
        cascade="all, delete-orphan",
    )
    services = relationship(
        "BundleService",
        back_populates="bundle",
        order_by="BundleService.sort_order",
        cascade="all, delete-orphan",
    )
    attachments = relationship(
        "Attachment",
        back_populates="bundle",
        order_by="Attachment.sort_order",
        foreign_keys="Attachment.bundle_id",
        passive_deletes=True,
    )


class BundleProduct(Base):
    __tablename__ = "bundle_products"
    __table_args__ = (UniqueConstraint("bundle_id", "product_id", name="uq_bundle_products"),)

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    bundle_id = Column(Uuid, ForeignKey("bundles.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(Uuid, ForeignKey("products.id", ondelete="RESTRICT"), nullable=False)
    quantity = Column(Integer, default=1, nullable=False)
    sort_order = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    bundle = relationship("Bundle", back_populates="products")
    product = relationship("Product")


class BundleService(Base):
    __tablename__ = "bundle_services"
    __table_args__ = (UniqueConstraint("bundle_id", "service_id", name="uq_bundle_services"),)

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    bundle_id = Column(Uuid, ForeignKey("bundles.id", ondelete="CASCADE"), nullable=False)
    service_id = Column(Uuid, ForeignKey("services.id", ondelete="RESTRICT"), nullable=False)
    quantity = Column(Integer, default=1, nullable=False)
    sort_order = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    bundle = relationship("Bundle", back_populates="services")
    service = relationship("Service")


class Attachment(Base):
    __tablename__ = "attachments"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    file_name = Column(String(255), nullable=False)
    file_path = Column(Text, nullable=False)
    file_size = Column(Integer, nullable=True)
    media_type = Column(
        Enum(MediaType, name="media_type", values_callable=_enum_values),
        nullable=False,
    )
    title = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    content_type = Column(String(100), nullable=True)
    product_id = Column(Uuid, ForeignKey("products.id", ondelete="CASCADE"), nullable=True)
    service_id = Column(Uuid, ForeignKey("services.id", ondelete="CASCADE"), nullable=True)
    bundle_id = Column(Uuid, ForeignKey("bundles.id", ondelete="CASCADE"), nullable=True)
    category_id = Column(Uuid, ForeignKey("categories.id", ondelete="CASCADE"), nullable=True)
    is_featured = Column(Boolean, default=False, nullable=False)
    sort_order = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    product = relationship("Product", back_populates="attachments", foreign_keys=[product_id])
    service = relationship("Service", back_populates="attachments", foreign_keys=[service_id])
    bundle = relationship("Bundle", back_populates="attachments", foreign_keys=[bundle_id])
