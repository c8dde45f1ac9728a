from typing import List, Optional

from sqlalchemy.orm import Session

from app.helpers.utils import make_slug
from app.models import Business, City
from app.schemas.city import CityCreate


def get_cities(db: Session) -> List[City]:
    return db.query(City).order_by(City.id.asc()).all()

def get_city_by_id(db: Session, city_id: int) -> Optional[City]:
    return db.query(City).filter(City.id == city_id).first()

def create_city(db: Session, data: CityCreate) -> City:
    slug = make_slug(data.slug, data.name_en, data.name)
    if db.query(City).filter(City.slug == slug).first():
        raise ValueError("slug_exists")

    city = City(name=data.name, name_en=data.name_en or data.name, slug=slug)
    db.add(city)
    db.commit()
    db.refresh(city)
    return city

def delete_city(db: Session, city: City) -> None:
    in_use = db.query(Business.id).filter(Business.city_id == city.id).first()
    if in_use:
        raise ValueError("city_in_use")
    db.delete(city)
    db.commit()
