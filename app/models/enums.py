import enum

class SubscriptionTier(str, enum.Enum):
    TRIAL = "trial"
    REGULAR = "regular"
    VIP = "vip"

class SubscriptionStatus(str, enum.Enum):
    TRIAL = "trial"
    TRIAL_EXPIRED = "trial_expired"
    ACTIVE = "active"
    EXPIRED = "expired"

class ActivityAction(str, enum.Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    REORDER = "reorder"
    LOGIN = "login"
