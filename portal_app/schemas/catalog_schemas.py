from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from constants.catalog_constants import PricingType, MediaType
from services.category_tree import CategoryForest, would_create_cycle


class ValidationResult(BaseModel):
    ok: bool
    reason: Optional[str] = None

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(ok=True)

    @classmethod
    def invalid(cls, reason: str) -> "ValidationResult":
        return cls(ok=False, reason=reason)


# === Form inputs ===

class CategoryInput(BaseModel):
    id: Optional[UUID] = None
    name: str = ""
    description: Optional[str] = None
    parent_id: Optional[UUID] = None
    sort_order: int = 0


class ProductInput(BaseModel):
    id: Optional[UUID] = None
    name: str = ""
    description: Optional[str] = None
    sku: Optional[str] = None
    price: Optional[Decimal] = None
    cost: Optional[Decimal] = None
    stock_quantity: int = 0
    min_stock_level: int = 0
    category_id: Optional[UUID] = None
    taxable: bool = True
    active: bool = True
    featured: bool = False


class ServiceInput(BaseModel):
    id: Optional[UUID] = None
    name: str = ""
    description: Optional[str] = None
    price: Optional[Decimal] = None
    estimated_duration: int = 60
    recurring: bool = False
    category_id: Optional[UUID] = None
    taxable: bool = True
    active: bool = True
    featured: bool = False


class BundleLineInput(BaseModel):
    item_id: UUID
    quantity: int = Field(default=1, ge=1)


class BundleInput(BaseModel):
    id: Optional[UUID] = None
    name: str = ""
    description: Optional[str] = None
    pricing_type: PricingType = PricingType.ITEMIZED
    discount_percentage: Decimal = Decimal("0")
    flat_price: Optional[Decimal] = None
    category_id: Optional[UUID] = None
    taxable: bool = True
    active: bool = True
    featured: bool = False
    products: List[BundleLineInput] = Field(default_factory=list)
    services: List[BundleLineInput] = Field(default_factory=list)


class AttachmentInput(BaseModel):
    item_type: str
    item_id: UUID
    file_name: str
    content_type: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    is_featured: bool = False
    sort_order: int = 0


# === Validation ===

def _blank(value: Optional[str]) -> bool:
    return not (value or "").strip()


def validate_category(data: CategoryInput, forest: Optional[CategoryForest] = None) -> ValidationResult:
    if _blank(data.name):
        return ValidationResult.invalid("Category name is required")
    if forest is not None and would_create_cycle(forest, data.id, data.parent_id):
        return ValidationResult.invalid(
            "A category cannot be its own parent or sit under one of its subcategories"
        )
    return ValidationResult.valid()


def _validate_priced_item(label: str, name: str, price: Optional[Decimal]) -> ValidationResult:
    if _blank(name):
        return ValidationResult.invalid(f"{label} name is required")
    if price is None or price <= 0:
        return ValidationResult.invalid("Please enter a valid price")
    return ValidationResult.valid()


def validate_product(data: ProductInput) -> ValidationResult:
    return _validate_priced_item("Product", data.name, data.price)


def validate_service(data: ServiceInput) -> ValidationResult:
    return _validate_priced_item("Service", data.name, data.price)


def validate_bundle(data: BundleInput) -> ValidationResult:
    if _blank(data.name):
        return ValidationResult.invalid("Bundle name is required")

    if data.pricing_type == PricingType.FLAT_RATE:
        if data.flat_price is None or data.flat_price <= 0:
            return ValidationResult.invalid("Please enter a valid flat rate price")

    if not data.products and not data.services:
        return ValidationResult.invalid("Bundle must contain at least one product or service")

    if data.pricing_type == PricingType.ITEMIZED:
        if data.discount_percentage < 0 or data.discount_percentage > 100:
            return ValidationResult.invalid("Discount percentage must be between 0 and 100")

    return ValidationResult.valid()


# === Outputs ===

class CategoryOut(BaseModel):
    id: UUID
    name: str
    description: Optional[str] = None
    parent_id: Optional[UUID] = None
    sort_order: int = 0

    model_config = ConfigDict(from_attributes=True)


class AttachmentOut(BaseModel):
    id: UUID
    file_name: str
    file_path: str
    file_size: Optional[int] = None
    media_type: MediaType
    title: Optional[str] = None
    description: Optional[str] = None
    content_type: Optional[str] = None
    is_featured: bool = False
    sort_order: int = 0
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ProductOut(BaseModel):
    id: UUID
    name: str
    description: Optional[str] = None
    sku: Optional[str] = None
    price: Decimal
    cost: Optional[Decimal] = None
    stock_quantity: int = 0
    min_stock_level: int = 0
    category_id: Optional[UUID] = None
    taxable: bool = True
    active: bool = True
    featured: bool = False

    model_config = ConfigDict(from_attributes=True)


class ServiceOut(BaseModel):
    id: UUID
    name: str
    description: Optional[str] = None
    price: Decimal
    estimated_duration: Optional[int] = None
    recurring: bool = False
    category_id: Optional[UUID] = None
    taxable: bool = True
    active: bool = True
    featured: bool = False

    model_config = ConfigDict(from_attributes=True)


class BundleLineOut(BaseModel):
    item_id: UUID
    name: str
    unit_price: Optional[Decimal] = None
    quantity: int


class BundleOut(BaseModel):
    id: UUID
    name: str
    description: Optional[str] = None
    pricing_type: PricingType
    discount_percentage: Decimal = Decimal("0")
    flat_price: Optional[Decimal] = None
    category_id: Optional[UUID] = None
    taxable: bool = True
    active: bool = True
    featured: bool = False
    products: List[BundleLineOut] = Field(default_factory=list)
    services: List[BundleLineOut] = Field(default_factory=list)
    list_price: Decimal = Decimal("0")
