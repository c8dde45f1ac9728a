from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class AdminLogin(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=6)

class AdminOut(BaseModel):
    id: int
    username: str
    created_at: Optional[datetime] = None
    last_login_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
