"""
Subscription status calculation.

A business joins on a free trial. Once an admin activates a paid tier
(regular or vip) the listing stays visible for one billing period counted
from the activation date.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from app.helpers.utils import as_utc
from app.models.enums import SubscriptionStatus, SubscriptionTier

TRIAL_DAYS = 60
SUBSCRIPTION_DAYS = 30
SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True)
class SubscriptionInfo:
    status: SubscriptionStatus
    tier: SubscriptionTier
    days_remaining: int
    is_vip: bool
    can_add_offers: bool

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "tier": self.tier.value,
            "days_remaining": self.days_remaining,
            "is_vip": self.is_vip,
            "can_add_offers": self.can_add_offers,
        }


def _days_between(start: datetime, end: datetime) -> int:
    # Floor of whole days, matching a calendar-agnostic millisecond diff.
    return int((end - start).total_seconds() // SECONDS_PER_DAY)


def get_subscription_info(
    join_date: Optional[datetime],
    subscription_activated_at: Optional[datetime],
    subscription_tier: Optional[str],
    now: Optional[datetime] = None,
) -> SubscriptionInfo:
    """
    Compute the subscription status of a business.

    Args:
        join_date: when the business was listed; None means "just now".
        subscription_activated_at: start of the current paid period.
        subscription_tier: "trial", "regular" or "vip"; None means trial.
        now: reference time, defaults to the current UTC time.

    Raises:
        ValueError: if subscription_tier is not a known tier.
    """
    now = as_utc(now) if now else datetime.now(timezone.utc)
    tier = SubscriptionTier(subscription_tier or SubscriptionTier.TRIAL.value)
    join = as_utc(join_date) if join_date else now

    if tier == SubscriptionTier.TRIAL:
        trial_remaining = max(0, TRIAL_DAYS - _days_between(join, now))
        if trial_remaining > 0:
            return SubscriptionInfo(SubscriptionStatus.TRIAL, tier, trial_remaining, False, False)
        return SubscriptionInfo(SubscriptionStatus.TRIAL_EXPIRED, tier, 0, False, False)

    if subscription_activated_at:
        activated = as_utc(subscription_activated_at)
        remaining = max(0, SUBSCRIPTION_DAYS - _days_between(activated, now))
        if remaining > 0:
            is_vip = tier == SubscriptionTier.VIP
            return SubscriptionInfo(SubscriptionStatus.ACTIVE, tier, remaining, is_vip, is_vip)

    return SubscriptionInfo(SubscriptionStatus.EXPIRED, tier, 0, False, False)


def is_subscription_active(info: SubscriptionInfo) -> bool:
    return info.status in (SubscriptionStatus.TRIAL, SubscriptionStatus.ACTIVE)


def business_subscription(business, now: Optional[datetime] = None) -> SubscriptionInfo:
    return get_subscription_info(
        business.join_date,
        business.subscription_activated_at,
        business.subscription_tier,
        now=now,
    )
