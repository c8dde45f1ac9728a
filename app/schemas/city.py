from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class CityCreate(BaseModel):
    name: str = Field(..., min_length=1, examples=["عمّان"])
    name_en: Optional[str] = Field(None, examples=["Amman"])
    slug: Optional[str] = None

class CityOut(BaseModel):
    id: int
    name: str
    name_en: str
    slug: str

    model_config = ConfigDict(from_attributes=True)
