from typing import Optional
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload
from models.catalog_models import Service
from schemas.catalog_schemas import ServiceInput
from utils.db_transaction import transactional


TOGGLE_FIELDS = ("active", "featured")


def get_services(db: Session, search: Optional[str] = None, category_id=None, active_only: bool = False) -> list[Service]:
    stmt = select(Service).options(selectinload(Service.attachments)).order_by(Service.name)
    if search:
        stmt = stmt.where(Service.name.ilike(f"%{search.strip()}%"))
    if category_id is not None:
        stmt = stmt.where(Service.category_id == category_id)
    if active_only:
        stmt = stmt.where(Service.active == True)
    return db.execute(stmt).scalars().all()

def get_featured_services(db: Session) -> list[Service]:
    """Active services for the public services page, featured first."""
    stmt = (
        select(Service)
        .where(Service.active == True)
        .order_by(Service.featured.desc(), Service.name)
    )
    return db.execute(stmt).scalars().all()

@transactional
def save_service(db: Session, data: ServiceInput) -> Service:
    if data.id is None:
        service = Service()
        db.add(service)
    else:
        service = db.get(Service, data.id)
        if service is None:
            raise LookupError(f"Service {data.id} not found")

    service.name = data.name.strip()
    service.description = (data.description or "").strip() or None
    service.price = data.price
    service.estimated_duration = data.estimated_duration
    service.recurring = data.recurring
    service.category_id = data.category_id
    service.taxable = data.taxable
    service.active = data.active
    service.featured = data.featured

    db.commit()
    return service

@transactional
def set_service_flag(db: Session, service_id, field: str, value: bool) -> None:
    if field not in TOGGLE_FIELDS:
        raise ValueError(f"Unknown service flag: {field}")
    service = db.get(Service, service_id)
    if service is None:
        raise LookupError(f"Service {service_id} not found")
    setattr(service, field, value)
    db.commit()

@transactional
def delete_service(db: Session, service_id) -> None:
    service = db.get(Service, service_id)
    if service is None:
        return
    db.delete(service)
    db.commit()
