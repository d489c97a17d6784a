from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from math import ceil
from typing import Any, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ServiceHistoryPage(BaseModel):
    items: List[Any] = Field(default_factory=list)
    page: int = 1
    limit: int = 10
    total: int = 0

    @property
    def total_pages(self) -> int:
        return max(1, ceil(self.total / self.limit)) if self.limit else 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1


class ActiveJobs(BaseModel):
    one_time: List[Any] = Field(default_factory=list)
    route_stops: List[Any] = Field(default_factory=list)


class BillingSummary(BaseModel):
    open_invoices: int = 0
    balance_due: Decimal = Decimal("0")


class PaymentInput(BaseModel):
    invoice_id: UUID
    amount: Decimal = Field(gt=0)
    payment_method: str
    customer_id: Optional[UUID] = None
    notes: Optional[str] = None


class ReceiptEmail(BaseModel):
    to: Optional[str] = None
    subject: str
    body: str


class QuoteInput(BaseModel):
    customer_id: UUID
    created_by: Optional[UUID] = None
    title: str
    service_type: Optional[str] = None
    description: Optional[str] = None
    amount: Decimal = Field(default=Decimal("0"), ge=0)
    valid_until: Optional[date] = None


class ContactInput(BaseModel):
    customer_id: UUID
    subject: str
    message: str


class ChemicalTrends(BaseModel):
    dates: List[str] = Field(default_factory=list)
    ph: List[Optional[float]] = Field(default_factory=list)
    chlorine: List[Optional[float]] = Field(default_factory=list)
    alkalinity: List[Optional[float]] = Field(default_factory=list)

    def as_rows(self) -> list[dict]:
        return [
            {"date": d, "pH": p, "Chlorine": c, "Alkalinity": a}
            for d, p, c, a in zip(self.dates, self.ph, self.chlorine, self.alkalinity)
        ]


class PoolSummary(BaseModel):
    pool: Any
    days_since_last_service: Optional[int] = None
    suggestion: Optional[str] = None
    trends: Optional[ChemicalTrends] = None

    model_config = ConfigDict(arbitrary_types_allowed=True)


class CustomerOverview(BaseModel):
    next_visit: Optional[date] = None
    next_visit_window: Optional[str] = None
    billing: BillingSummary = Field(default_factory=BillingSummary)
    pending_quotes: int = 0


class QuoteActivityOut(BaseModel):
    activity_type: str
    details: Optional[dict] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
