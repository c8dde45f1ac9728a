from typing import List, Optional

from sqlalchemy.orm import Session

from app.models import Business, Category, Review
from app.schemas.review import ReviewCreate, ReviewWithBusinessOut

UNKNOWN_NAME = "غير معروف"


def get_reviews(db: Session, business_id: int) -> List[Review]:
    return (
        db.query(Review)
        .filter(Review.business_id == business_id)
        .order_by(Review.created_at.desc(), Review.id.desc())
        .all()
    )

def get_review_by_id(db: Session, review_id: int) -> Optional[Review]:
    return db.query(Review).filter(Review.id == review_id).first()

def create_review(db: Session, business_id: int, data: ReviewCreate) -> Review:
    review = Review(
        business_id=business_id,
        visitor_name=data.visitor_name,
        rating=data.rating,
        comment=data.comment,
    )
    db.add(review)
    db.commit()
    db.refresh(review)
    return review

def delete_review(db: Session, review: Review) -> None:
    db.delete(review)
    db.commit()

def get_all_reviews_with_business(db: Session) -> List[ReviewWithBusinessOut]:
    rows = (
        db.query(Review, Business.name, Business.category_id, Category.name)
        .outerjoin(Business, Review.business_id == Business.id)
        .outerjoin(Category, Business.category_id == Category.id)
        .order_by(Review.created_at.desc(), Review.id.desc())
        .all()
    )
    return [
        ReviewWithBusinessOut(
            id=review.id,
            business_id=review.business_id,
            visitor_name=review.visitor_name,
            rating=review.rating,
            comment=review.comment,
            created_at=review.created_at,
            business_name=business_name or UNKNOWN_NAME,
            category_id=category_id or 0,
            category_name=category_name or UNKNOWN_NAME,
        )
        for review, business_name, category_id, category_name in rows
    ]
