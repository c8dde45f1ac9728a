from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class ActivityLogCreate(BaseModel):
    action: str = Field(..., min_length=1)
    entity_type: str = Field(..., min_length=1)
    entity_id: Optional[int] = None
    entity_name: Optional[str] = None
    details: Optional[str] = None

class ActivityLogOut(BaseModel):
    id: int
    action: str
    entity_type: str
    entity_id: Optional[int] = None
    entity_name: Optional[str] = None
    details: Optional[str] = None
    admin_username: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
