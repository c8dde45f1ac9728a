from sqlalchemy import JSON, Column, Integer, String
from sqlalchemy.orm import relationship
from app.db.base import Base

class Category(Base):
    __tablename__ = 'categories'

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    name_en = Column(String, nullable=True)
    slug = Column(String, nullable=False, unique=True)
    icon = Column(String, nullable=False)
    image_url = Column(String, nullable=True)
    keywords = Column(JSON, nullable=True)      # list of arabic search keywords
    keywords_en = Column(JSON, nullable=True)
    sort_order = Column(Integer, default=0)

    businesses = relationship("Business", back_populates="category")
