from datetime import datetime

from pydantic import BaseModel, ConfigDict
from typing import List, Optional

from app.models.enums import SubscriptionTier
from app.schemas.category import CategoryOut
from app.schemas.city import CityOut


class BusinessBase(BaseModel):
    category_id: int
    city_id: Optional[int] = None
    name: str
    name_en: Optional[str] = None
    description: Optional[str] = None
    description_en: Optional[str] = None
    address: Optional[str] = None
    address_en: Optional[str] = None
    phone: Optional[str] = None
    whatsapp: Optional[str] = None
    image_url: Optional[str] = None
    storefront_image_url: Optional[str] = None
    gallery_images: Optional[List[str]] = None
    is_verified: Optional[bool] = False
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    working_hours_json: Optional[str] = None
    website: Optional[str] = None
    instagram: Optional[str] = None
    facebook: Optional[str] = None
    tiktok: Optional[str] = None
    services: Optional[List[str]] = None
    services_en: Optional[List[str]] = None

class BusinessCreate(BusinessBase):
    join_date: Optional[datetime] = None
    subscription_activated_at: Optional[datetime] = None
    subscription_tier: SubscriptionTier = SubscriptionTier.TRIAL

class BusinessUpdate(BaseModel):
    category_id: Optional[int] = None
    city_id: Optional[int] = None
    name: Optional[str] = None
    name_en: Optional[str] = None
    description: Optional[str] = None
    description_en: Optional[str] = None
    address: Optional[str] = None
    address_en: Optional[str] = None
    phone: Optional[str] = None
    whatsapp: Optional[str] = None
    image_url: Optional[str] = None
    storefront_image_url: Optional[str] = None
    gallery_images: Optional[List[str]] = None
    is_verified: Optional[bool] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    working_hours_json: Optional[str] = None
    website: Optional[str] = None
    instagram: Optional[str] = None
    facebook: Optional[str] = None
    tiktok: Optional[str] = None
    services: Optional[List[str]] = None
    services_en: Optional[List[str]] = None
    sort_order: Optional[int] = None
    join_date: Optional[datetime] = None
    subscription_activated_at: Optional[datetime] = None
    subscription_tier: Optional[SubscriptionTier] = None

class SubscriptionOut(BaseModel):
    status: str
    tier: str
    days_remaining: int
    is_vip: bool
    can_add_offers: bool

class BusinessRecord(BusinessBase):
    """Plain table row, used when a business is embedded in another payload."""
    id: int
    sort_order: Optional[int] = 0
    join_date: Optional[datetime] = None
    subscription_activated_at: Optional[datetime] = None
    subscription_tier: Optional[str] = SubscriptionTier.TRIAL.value

    model_config = ConfigDict(from_attributes=True)

class BusinessOut(BusinessRecord):
    category: Optional[CategoryOut] = None
    city: Optional[CityOut] = None
    average_rating: float = 0
    review_count: int = 0
    subscription: Optional[SubscriptionOut] = None
    is_open: Optional[bool] = None
    distance: Optional[float] = None
