from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from app.schemas.business import BusinessRecord


class OfferCreate(BaseModel):
    business_id: int
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = None
    valid_until: Optional[datetime] = None
    is_active: Optional[bool] = True

class OfferUpdate(BaseModel):
    business_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    valid_until: Optional[datetime] = None
    is_active: Optional[bool] = None

class OfferOut(BaseModel):
    id: int
    business_id: int
    title: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    valid_until: Optional[datetime] = None
    is_active: Optional[bool] = True
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class OfferWithBusinessOut(OfferOut):
    business: Optional[BusinessRecord] = None

class OfferRatingCreate(BaseModel):
    visitor_name: str = Field(..., min_length=1, max_length=100)
    rating: int = Field(..., ge=1, le=5)

class OfferRatingOut(BaseModel):
    id: int
    offer_id: int
    visitor_name: str
    rating: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class OfferRatingSummary(BaseModel):
    ratings: List[OfferRatingOut]
    avg: float
    count: int
