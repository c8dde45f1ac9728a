from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from app.helpers.utils import as_utc, ensure_not_null
from app.models import Business, Offer, OfferRating
from app.schemas.offer import OfferCreate, OfferRatingCreate, OfferUpdate


def get_offers(db: Session, business_id: Optional[int] = None) -> List[Offer]:
    query = db.query(Offer).options(joinedload(Offer.business))
    if business_id:
        query = query.filter(Offer.business_id == business_id)
    return query.order_by(Offer.created_at.desc(), Offer.id.desc()).all()

def is_offer_current(offer: Offer, now: Optional[datetime] = None) -> bool:
    now = now or datetime.now(timezone.utc)
    return bool(offer.is_active) and (offer.valid_until is None or as_utc(offer.valid_until) > now)

def get_active_offers(db: Session, now: Optional[datetime] = None) -> List[Offer]:
    offers = (
        db.query(Offer)
        .options(joinedload(Offer.business))
        .filter(Offer.is_active == True)
        .order_by(Offer.created_at.desc(), Offer.id.desc())
        .all()
    )
    return [offer for offer in offers if is_offer_current(offer, now)]

def get_offer_by_id(db: Session, offer_id: int) -> Optional[Offer]:
    return db.query(Offer).filter(Offer.id == offer_id).first()

def _check_business(db: Session, business_id: Optional[int]) -> None:
    if business_id is not None and not db.query(Business.id).filter(Business.id == business_id).first():
        raise ValueError("business_not_found")

def create_offer(db: Session, data: OfferCreate) -> Offer:
    _check_business(db, data.business_id)
    offer = Offer(
        business_id=data.business_id,
        title=data.title,
        description=data.description,
        image_url=data.image_url,
        valid_until=data.valid_until,
        is_active=True if data.is_active is None else data.is_active,
    )
    db.add(offer)
    db.commit()
    db.refresh(offer)
    return offer

def update_offer(db: Session, offer: Offer, data: OfferUpdate) -> Offer:
    try:
        data_dict = data.model_dump(exclude_unset=True)
        ensure_not_null(data_dict, "business_id", "title")
        _check_business(db, data_dict.get("business_id"))
        for field, value in data_dict.items():
            if hasattr(offer, field):
                setattr(offer, field, value)
        db.commit()
        db.refresh(offer)
        return offer

    except Exception:
        db.rollback()
        raise

def delete_offer(db: Session, offer: Offer) -> None:
    db.delete(offer)
    db.commit()

# Offer Ratings
def create_offer_rating(db: Session, offer_id: int, data: OfferRatingCreate) -> OfferRating:
    rating = OfferRating(offer_id=offer_id, visitor_name=data.visitor_name, rating=data.rating)
    db.add(rating)
    db.commit()
    db.refresh(rating)
    return rating

def get_offer_ratings(db: Session, offer_id: int) -> List[OfferRating]:
    return (
        db.query(OfferRating)
        .filter(OfferRating.offer_id == offer_id)
        .order_by(OfferRating.created_at.desc(), OfferRating.id.desc())
        .all()
    )

def get_offer_average_rating(db: Session, offer_id: int) -> dict:
    avg, count = db.query(
        func.coalesce(func.avg(OfferRating.rating), 0),
        func.count(OfferRating.id),
    ).filter(OfferRating.offer_id == offer_id).one()
    return {"avg": float(avg or 0), "count": int(count or 0)}
