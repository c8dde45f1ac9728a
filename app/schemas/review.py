from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class ReviewCreate(BaseModel):
    visitor_name: str = Field(..., min_length=1, max_length=100)
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = Field(None, max_length=1000)

class ReviewOut(BaseModel):
    id: int
    business_id: int
    visitor_name: str
    rating: int
    comment: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class ReviewWithBusinessOut(ReviewOut):
    business_name: str
    category_id: int
    category_name: str
