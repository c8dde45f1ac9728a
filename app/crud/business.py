from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple
from zoneinfo import ZoneInfo

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from app.core.config import settings
from app.helpers.utils import ensure_not_null
from app.models import Business, Category, City, Review
from app.models.enums import SubscriptionTier
from app.schemas.business import BusinessCreate, BusinessOut, BusinessUpdate, SubscriptionOut
from app.services.search import matches_business
from app.services.subscription import business_subscription, is_subscription_active
from app.services.working_hours import is_business_open, parse_working_hours

RatingStats = Dict[int, Tuple[float, int]]


def get_rating_stats(db: Session, business_ids: Optional[List[int]] = None) -> RatingStats:
    """Average rating and review count per business, in one grouped query."""
    query = db.query(
        Review.business_id,
        func.coalesce(func.avg(Review.rating), 0),
        func.count(Review.id),
    ).group_by(Review.business_id)
    if business_ids is not None:
        query = query.filter(Review.business_id.in_(business_ids))
    return {business_id: (float(avg), int(count)) for business_id, avg, count in query.all()}

def build_business_out(business: Business, stats: RatingStats, now: Optional[datetime] = None) -> BusinessOut:
    now = now or datetime.now(timezone.utc)
    subscription = business_subscription(business, now=now)
    average_rating, review_count = stats.get(business.id, (0.0, 0))
    local_now = now.astimezone(ZoneInfo(settings.TIMEZONE))

    return BusinessOut.model_validate(business).model_copy(update={
        "average_rating": average_rating,
        "review_count": review_count,
        "subscription": SubscriptionOut(**subscription.to_dict()),
        "is_open": is_business_open(parse_working_hours(business.working_hours_json), local_now),
    })

def _is_listed(business: BusinessOut) -> bool:
    return business.subscription.status in ("trial", "active")

def _base_query(db: Session):
    return db.query(Business).options(
        joinedload(Business.category),
        joinedload(Business.city),
    )

# Get Business model by ID (admin, no subscription check)
def get_business_by_id(db: Session, business_id: int) -> Optional[Business]:
    return db.query(Business).filter(Business.id == business_id).first()

def get_businesses(
    db: Session,
    category_id: Optional[int] = None,
    search: Optional[str] = None,
    min_rating: Optional[float] = None,
    city_id: Optional[int] = None,
    include_expired: bool = False,
    now: Optional[datetime] = None,
) -> List[BusinessOut]:
    rows = _base_query(db).order_by(Business.sort_order.asc(), Business.id.asc()).all()
    stats = get_rating_stats(db)
    businesses = [build_business_out(b, stats, now) for b in rows]

    # Expired subscriptions are hidden from the public directory
    if not include_expired:
        businesses = [b for b in businesses if _is_listed(b)]
    if category_id:
        businesses = [b for b in businesses if b.category_id == category_id]
    if city_id:
        businesses = [b for b in businesses if b.city_id == city_id]
    if search:
        businesses = [b for b in businesses if matches_business(b, search)]
    if min_rating:
        businesses = [b for b in businesses if b.average_rating >= min_rating]

    return businesses

def get_business(db: Session, business_id: int, include_expired: bool = False, now: Optional[datetime] = None) -> Optional[BusinessOut]:
    business = _base_query(db).filter(Business.id == business_id).first()
    if not business:
        return None
    if not include_expired and not is_subscription_active(business_subscription(business, now=now)):
        return None
    return build_business_out(business, get_rating_stats(db, [business.id]), now)

def get_businesses_with_location(db: Session, include_expired: bool = False, now: Optional[datetime] = None) -> List[BusinessOut]:
    rows = (
        _base_query(db)
        .filter(Business.latitude.isnot(None), Business.longitude.isnot(None))
        .order_by(Business.sort_order.asc(), Business.id.asc())
        .all()
    )
    stats = get_rating_stats(db, [b.id for b in rows])
    businesses = [build_business_out(b, stats, now) for b in rows]
    if include_expired:
        return businesses
    return [b for b in businesses if _is_listed(b)]

def _check_references(db: Session, category_id: Optional[int], city_id: Optional[int]) -> None:
    if category_id is not None and not db.query(Category.id).filter(Category.id == category_id).first():
        raise ValueError("category_not_found")
    if city_id is not None and not db.query(City.id).filter(City.id == city_id).first():
        raise ValueError("city_not_found")

# Create Business
def create_business(db: Session, data: BusinessCreate) -> Business:
    _check_references(db, data.category_id, data.city_id)
    values = data.model_dump()
    values["subscription_tier"] = data.subscription_tier.value
    if values.get("join_date") is None:
        values["join_date"] = datetime.now(timezone.utc)
    # VIP listings are always shown as verified
    if data.subscription_tier == SubscriptionTier.VIP:
        values["is_verified"] = True

    new_business = Business(**values)
    db.add(new_business)
    db.commit()
    db.refresh(new_business)
    return new_business

# Update Business
def update_business(db: Session, business: Business, data: BusinessUpdate) -> Business:
    try:
        data_dict = data.model_dump(exclude_unset=True)
        ensure_not_null(data_dict, "category_id", "name")
        _check_references(db, data_dict.get("category_id"), data_dict.get("city_id"))
        tier = data_dict.get("subscription_tier")
        if tier is not None:
            data_dict["subscription_tier"] = SubscriptionTier(tier).value
            if data_dict["subscription_tier"] == SubscriptionTier.VIP.value:
                data_dict["is_verified"] = True

        for field, value in data_dict.items():
            if hasattr(business, field):
                setattr(business, field, value)

        db.commit()
        db.refresh(business)
        return business

    except Exception:
        db.rollback()
        raise

# Delete Business together with its reviews, offers and offer ratings
def delete_business(db: Session, business: Business) -> None:
    db.delete(business)
    db.commit()
