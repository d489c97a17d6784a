from typing import Optional
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload
from models.catalog_models import Product
from schemas.catalog_schemas import ProductInput
from utils.db_transaction import transactional


TOGGLE_FIELDS = ("active", "featured")


def get_products(db: Session, search: Optional[str] = None, category_id=None, active_only: bool = False) -> list[Product]:
    stmt = select(Product).options(selectinload(Product.attachments)).order_by(Product.name)
    if search:
        stmt = stmt.where(Product.name.ilike(f"%{search.strip()}%"))
    if category_id is not None:
        stmt = stmt.where(Product.category_id == category_id)
    if active_only:
        stmt = stmt.where(Product.active == True)
    return db.execute(stmt).scalars().all()

@transactional
def save_product(db: Session, data: ProductInput) -> Product:
    if data.id is None:
        product = Product()
        db.add(product)
    else:
        product = db.get(Product, data.id)
        if product is None:
            raise LookupError(f"Product {data.id} not found")

    product.name = data.name.strip()
    product.description = (data.description or "").strip() or None
    product.sku = (data.sku or "").strip() or None
    product.price = data.price
    product.cost = data.cost
    product.stock_quantity = data.stock_quantity
    product.min_stock_level = data.min_stock_level
    product.category_id = data.category_id
    product.taxable = data.taxable
    product.active = data.active
    product.featured = data.featured

    db.commit()
    return product

@transactional
def set_product_flag(db: Session, product_id, field: str, value: bool) -> None:
    if field not in TOGGLE_FIELDS:
        raise ValueError(f"Unknown product flag: {field}")
    product = db.get(Product, product_id)
    if product is None:
        raise LookupError(f"Product {product_id} not found")
    setattr(product, field, value)
    db.commit()

@transactional
def delete_product(db: Session, product_id) -> None:
    # Bundle lines reference products with ON DELETE RESTRICT
    product = db.get(Product, product_id)
    if product is None:
        return
    db.delete(product)
    db.commit()
