from sqlalchemy import select, func
from sqlalchemy.orm import Session
from models.catalog_models import Category
from schemas.catalog_schemas import CategoryInput
from services.category_tree import (
    CategoryForest, build_category_forest, would_create_cycle
)
from utils.db_transaction import transactional


class CategoryHasChildrenError(ValueError):
    pass


class InvalidParentError(ValueError):
    pass


def get_categories(db: Session) -> list[Category]:
    stmt = select(Category).order_by(Category.sort_order, Category.name)
    return db.execute(stmt).scalars().all()

def get_category_forest(db: Session) -> CategoryForest:
    return build_category_forest(get_categories(db))

def get_category_names(db: Session) -> dict:
    """{id: name} for list views that show a category column."""
    return {c.id: c.name for c in get_categories(db)}

@transactional
def save_category(db: Session, data: CategoryInput) -> Category:
    """
    Insert when data.id is empty, update otherwise. Rejects a parent that
    would put the category under itself.
    """
    forest = get_category_forest(db)
    if would_create_cycle(forest, data.id, data.parent_id):
        raise InvalidParentError(
            "A category cannot be its own parent or sit under one of its subcategories"
        )

    if data.id is None:
        category = Category()
        db.add(category)
    else:
        category = db.get(Category, data.id)
        if category is None:
            raise LookupError(f"Category {data.id} not found")

    category.name = data.name.strip()
    category.description = (data.description or "").strip() or None
    category.parent_id = data.parent_id
    category.sort_order = data.sort_order

    db.commit()
    return category

@transactional
def delete_category(db: Session, category_id) -> None:
    child_count = db.execute(
        select(func.count()).select_from(Category).where(Category.parent_id == category_id)
    ).scalar_one()
    if child_count:
        raise CategoryHasChildrenError(
            "Cannot delete a category with subcategories. Please delete or move the subcategories first."
        )

    category = db.get(Category, category_id)
    if category is None:
        return
    db.delete(category)
    db.commit()
