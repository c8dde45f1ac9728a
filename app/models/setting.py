from sqlalchemy import Column, DateTime, Integer, String, Text
from datetime import datetime, timezone
from app.db.base import Base

class AppSetting(Base):
    __tablename__ = "app_settings"

    id = Column(Integer, primary_key=True)
    key = Column(String, unique=True, nullable=False)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

class VisitorCounter(Base):
    __tablename__ = "visitor_counter"

    id = Column(Integer, primary_key=True)
    count = Column(Integer, default=0, nullable=False)
