from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1)
    name_en: Optional[str] = None
    slug: Optional[str] = None
    icon: str = Field(..., min_length=1, examples=["Utensils"])
    image_url: Optional[str] = None
    keywords: Optional[List[str]] = None
    keywords_en: Optional[List[str]] = None

class CategoryUpdate(BaseModel):
    name: Optional[str] = None
    name_en: Optional[str] = None
    slug: Optional[str] = None
    icon: Optional[str] = None
    image_url: Optional[str] = None
    keywords: Optional[List[str]] = None
    keywords_en: Optional[List[str]] = None
    sort_order: Optional[int] = None

class CategoryReorder(BaseModel):
    ids: List[int]

class CategoryOut(BaseModel):
    id: int
    name: str
    name_en: Optional[str] = None
    slug: str
    icon: str
    image_url: Optional[str] = None
    keywords: Optional[List[str]] = None
    keywords_en: Optional[List[str]] = None
    sort_order: Optional[int] = 0

    model_config = ConfigDict(from_attributes=True)
