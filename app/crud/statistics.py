from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy.orm import Session

from app.crud import business as crud_business
from app.crud import category as crud_category
from app.crud import offer as crud_offer
from app.crud import review as crud_review
from app.helpers.utils import as_utc
from app.models.enums import SubscriptionTier

# Monthly subscription price per tier
TIER_PRICES = {
    SubscriptionTier.VIP.value: 10000,
    SubscriptionTier.REGULAR.value: 5000,
}
RECENT_REVIEW_DAYS = 30
TOP_LIMIT = 5


def _summary(business) -> dict:
    return {
        "id": business.id,
        "name": business.name,
        "rating": business.average_rating,
        "review_count": business.review_count,
    }

def get_statistics(db: Session, now: Optional[datetime] = None) -> dict:
    """
    Admin dashboard figures.

    Business counts cover listed businesses only; expired subscriptions
    are left out the same way the public directory leaves them out.
    """
    now = now or datetime.now(timezone.utc)
    businesses = crud_business.get_businesses(db, now=now)
    reviews = crud_review.get_all_reviews_with_business(db)
    offers = crud_offer.get_offers(db)
    categories = crud_category.get_categories(db)

    since = now - timedelta(days=RECENT_REVIEW_DAYS)
    average_rating = round(sum(r.rating for r in reviews) / len(reviews), 1) if reviews else 0

    def tier_count(tier: SubscriptionTier) -> int:
        return sum(1 for b in businesses if (b.subscription_tier or SubscriptionTier.TRIAL.value) == tier.value)

    return {
        "total_businesses": len(businesses),
        "verified_businesses": sum(1 for b in businesses if b.is_verified),
        "vip_businesses": tier_count(SubscriptionTier.VIP),
        "regular_businesses": tier_count(SubscriptionTier.REGULAR),
        "trial_businesses": tier_count(SubscriptionTier.TRIAL),
        "total_reviews": len(reviews),
        "average_rating": average_rating,
        "active_offers": sum(1 for o in offers if o.is_active),
        "total_offers": len(offers),
        "total_categories": len(categories),
        "businesses_by_category": [
            {"name": c.name, "count": sum(1 for b in businesses if b.category_id == c.id)}
            for c in categories
        ],
        "recent_reviews": sum(1 for r in reviews if r.created_at and as_utc(r.created_at) >= since),
        "monthly_revenue": sum(TIER_PRICES.get(b.subscription_tier, 0) for b in businesses),
        "top_rated_businesses": [
            _summary(b) for b in sorted(businesses, key=lambda b: b.average_rating, reverse=True)[:TOP_LIMIT]
        ],
        "most_reviewed_businesses": [
            _summary(b) for b in sorted(businesses, key=lambda b: b.review_count, reverse=True)[:TOP_LIMIT]
        ],
    }
