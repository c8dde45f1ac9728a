from sqlalchemy import JSON, Column, Integer, String, Boolean, DateTime, Float, ForeignKey, Text
from sqlalchemy.orm import relationship
from app.db.base import Base
from datetime import datetime, timezone

from app.models.enums import SubscriptionTier

class Business(Base):
    __tablename__ = "businesses"

    id = Column(Integer, primary_key=True, index=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)
    city_id = Column(Integer, ForeignKey("cities.id"), nullable=True)

    name = Column(String, nullable=False)
    name_en = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    description_en = Column(Text, nullable=True)
    address = Column(String, nullable=True)
    address_en = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    whatsapp = Column(String, nullable=True)

    image_url = Column(String, nullable=True)
    storefront_image_url = Column(String, nullable=True)
    gallery_images = Column(JSON, nullable=True)

    is_verified = Column(Boolean, default=False)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    working_hours_json = Column(Text, nullable=True)

    website = Column(String, nullable=True)
    instagram = Column(String, nullable=True)
    facebook = Column(String, nullable=True)
    tiktok = Column(String, nullable=True)
    services = Column(JSON, nullable=True)
    services_en = Column(JSON, nullable=True)
    sort_order = Column(Integer, default=0)

    # Subscription
    join_date = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    subscription_activated_at = Column(DateTime(timezone=True), nullable=True)
    subscription_tier = Column(String, default=SubscriptionTier.TRIAL.value)

    category = relationship("Category", back_populates="businesses")
    city = relationship("City", back_populates="businesses")
    reviews = relationship("Review", back_populates="business", cascade="all, delete-orphan")
    offers = relationship("Offer", back_populates="business", cascade="all, delete-orphan")
