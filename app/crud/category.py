from typing import List, Optional

from sqlalchemy.orm import Session

from app.helpers.utils import ensure_not_null, make_slug
from app.models import Business, Category
from app.schemas.category import CategoryCreate, CategoryUpdate


def get_categories(db: Session) -> List[Category]:
    return db.query(Category).order_by(Category.sort_order.asc(), Category.id.asc()).all()

def get_category_by_id(db: Session, category_id: int) -> Optional[Category]:
    return db.query(Category).filter(Category.id == category_id).first()

def _ensure_unique_slug(db: Session, slug: str, exclude_id: Optional[int] = None):
    query = db.query(Category).filter(Category.slug == slug)
    if exclude_id is not None:
        query = query.filter(Category.id != exclude_id)
    if query.first():
        raise ValueError("slug_exists")

def create_category(db: Session, data: CategoryCreate) -> Category:
    slug = make_slug(data.slug, data.name_en, data.name)
    _ensure_unique_slug(db, slug)

    # New categories go to the end of the list
    last = db.query(Category).order_by(Category.sort_order.desc()).first()
    category = Category(
        name=data.name,
        name_en=data.name_en,
        slug=slug,
        icon=data.icon,
        image_url=data.image_url,
        keywords=data.keywords,
        keywords_en=data.keywords_en,
        sort_order=(last.sort_order or 0) + 1 if last else 0,
    )
    db.add(category)
    db.commit()
    db.refresh(category)
    return category

def update_category(db: Session, category: Category, data: CategoryUpdate) -> Category:
    try:
        data_dict = data.model_dump(exclude_unset=True)
        ensure_not_null(data_dict, "name", "slug", "icon")
        if "slug" in data_dict:
            data_dict["slug"] = make_slug(data_dict["slug"])
            _ensure_unique_slug(db, data_dict["slug"], exclude_id=category.id)

        for field, value in data_dict.items():
            if hasattr(category, field):
                setattr(category, field, value)
        db.commit()
        db.refresh(category)
        return category

    except Exception:
        db.rollback()
        raise

def delete_category(db: Session, category: Category) -> None:
    in_use = db.query(Business.id).filter(Business.category_id == category.id).first()
    if in_use:
        raise ValueError("category_in_use")
    db.delete(category)
    db.commit()

def reorder_categories(db: Session, ids: List[int]) -> None:
    """Set sort_order of each category to its position in `ids`."""
    categories = {c.id: c for c in db.query(Category).filter(Category.id.in_(ids)).all()}
    for index, category_id in enumerate(ids):
        category = categories.get(category_id)
        if category:
            category.sort_order = index
    db.commit()
