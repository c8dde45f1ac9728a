"""
Initial directory data.

`seed_database` only runs against an empty catalogue; `seed_admin` makes
sure the configured admin account exists. Both are called on startup when
SEED_ON_STARTUP is enabled, and can be run by hand with
`python -m app.db.seed`.
"""
import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import Session

from app.core.config import settings
from app.crud import admin as crud_admin
from app.db.session import SessionLocal
from app.models import Business, Category, City, Offer, Review

logger = logging.getLogger(__name__)

CITIES = [
    {"name": "عمّان", "name_en": "Amman", "slug": "amman"},
    {"name": "إربد", "name_en": "Irbid", "slug": "irbid"},
    {"name": "الزرقاء", "name_en": "Zarqa", "slug": "zarqa"},
    {"name": "العقبة", "name_en": "Aqaba", "slug": "aqaba"},
]

CATEGORIES = [
    {"name": "مطاعم", "name_en": "Restaurants", "slug": "restaurants", "icon": "Utensils"},
    {"name": "سيارات", "name_en": "Cars", "slug": "cars", "icon": "Car"},
    {"name": "موبايلات", "name_en": "Mobiles", "slug": "mobiles", "icon": "Smartphone"},
    {"name": "صيانة", "name_en": "Maintenance", "slug": "maintenance", "icon": "Wrench"},
    {"name": "صحة", "name_en": "Health", "slug": "health", "icon": "Activity"},
    {"name": "ملابس", "name_en": "Clothing", "slug": "clothes", "icon": "Shirt"},
]

# (category slug, fields)
BUSINESSES = [
    ("restaurants", {
        "name": "شاورما الملك",
        "name_en": "Shawarma King",
        "description": "أطيب شاورما في المدينة، خدمة توصيل سريعة.",
        "description_en": "The best shawarma in town with fast delivery.",
        "address": "شارع فلسطين، وسط البلد",
        "address_en": "Palestine Street, Downtown",
        "phone": "0790000001",
        "whatsapp": "962790000001",
        "is_verified": True,
        "latitude": 31.9539,
        "longitude": 35.9106,
        "instagram": "shawarma_king_jo",
        "services": ["شاورما لحم", "شاورما دجاج", "وجبات عائلية", "توصيل مجاني"],
        "services_en": ["Beef Shawarma", "Chicken Shawarma", "Family Meals", "Free Delivery"],
    }),
    ("restaurants", {
        "name": "برجر هاوس",
        "description": "برجر مشوي على الفحم مع صلصات خاصة.",
        "address": "دوار السابع",
        "phone": "0790000002",
        "whatsapp": "962790000002",
        "latitude": 31.9579,
        "longitude": 35.8947,
        "instagram": "burger_house_amman",
        "facebook": "burgerhouseamman",
        "services": ["برجر كلاسيك", "برجر دبل", "وجبات أطفال", "سلطات"],
    }),
    ("cars", {
        "name": "مركز الأمير للسيارات",
        "description": "بيع وشراء السيارات المستعملة والجديدة. فحص شامل مجاني لكل سيارة.",
        "address": "المنطقة الحرة",
        "phone": "0790000003",
        "whatsapp": "962790000003",
        "is_verified": True,
        "latitude": 31.9730,
        "longitude": 35.8521,
        "website": "https://ameer-cars.jo",
        "services": ["بيع سيارات", "شراء سيارات", "فحص مجاني", "تمويل"],
    }),
    ("mobiles", {
        "name": "تك فيكس",
        "description": "صيانة جميع أنواع الهواتف الذكية وبيع الاكسسوارات الأصلية.",
        "address": "شارع الجامعة",
        "phone": "0790000004",
        "whatsapp": "962790000004",
        "is_verified": True,
        "latitude": 31.9563,
        "longitude": 35.8611,
        "instagram": "techfix_jo",
        "services": ["تصليح شاشات", "تغيير بطاريات", "فتح قفل", "بيع اكسسوارات"],
    }),
    ("maintenance", {
        "name": "المهندس للصيانة المنزلية",
        "description": "سباكة، كهرباء، وتكييف. خدمة طوارئ 24 ساعة.",
        "address": "جبل عمان",
        "phone": "0790000005",
        "whatsapp": "962790000005",
        "latitude": 31.9510,
        "longitude": 35.9234,
        "services": ["سباكة", "كهرباء", "تكييف", "دهان"],
    }),
    ("health", {
        "name": "عيادة الشفاء",
        "description": "عيادة طب عام وأسنان. كادر طبي متخصص وأحدث الأجهزة.",
        "address": "شارع المدينة المنورة",
        "phone": "0790000013",
        "whatsapp": "962790000013",
        "is_verified": True,
        "latitude": 31.9634,
        "longitude": 35.8856,
        "services": ["طب عام", "طب أسنان", "تحاليل", "أشعة"],
    }),
    ("clothes", {
        "name": "بوتيك الأناقة",
        "description": "أحدث صيحات الموضة النسائية والرجالية. ماركات عالمية.",
        "address": "مكة مول",
        "phone": "0790000014",
        "whatsapp": "962790000014",
        "is_verified": True,
        "latitude": 31.9789,
        "longitude": 35.8523,
        "instagram": "elegance_boutique_jo",
        "services": ["ملابس نسائية", "ملابس رجالية", "اكسسوارات", "أحذية"],
    }),
]

# (business index, visitor, rating, comment)
REVIEWS = [
    (0, "أحمد محمد", 5, "أفضل شاورما في عمان! الطعم ممتاز والخدمة سريعة."),
    (0, "سارة علي", 4, "شاورما لذيذة جداً، لكن الانتظار كان طويل قليلاً."),
    (1, "ليلى أحمد", 4, "برجر طازج ولذيذ، الأسعار معقولة."),
    (2, "فادي نادر", 5, "تعامل ممتاز وأسعار منافسة. أنصح بشدة."),
    (3, "رنا سمير", 5, "صلّحوا شاشة هاتفي بسرعة وبسعر ممتاز."),
]

# (business index, title, description, valid days or None)
OFFERS = [
    (0, "خصم 20% على الوجبات العائلية", "احصل على خصم 20% على جميع الوجبات العائلية كل يوم جمعة", 30),
    (1, "وجبة برجر + مشروب مجاني", "اطلب أي وجبة برجر واحصل على مشروب غازي مجاناً", 14),
    (3, "فحص مجاني للهاتف", "فحص مجاني شامل لهاتفك عند أي خدمة صيانة", None),
    (2, "فحص سيارة مجاني", "فحص 50 نقطة مجاناً عند شراء أي سيارة", 60),
]


def seed_database(db: Session) -> bool:
    """Insert sample data into an empty database. Returns True if it seeded."""
    if db.query(Category.id).first():
        return False

    logger.info("Seeding database...")
    now = datetime.now(timezone.utc)

    cities = [City(**data) for data in CITIES]
    categories = {data["slug"]: Category(sort_order=i, **data) for i, data in enumerate(CATEGORIES)}
    db.add_all(cities + list(categories.values()))
    db.flush()

    businesses = []
    for i, (category_slug, data) in enumerate(BUSINESSES):
        businesses.append(Business(
            category_id=categories[category_slug].id,
            city_id=cities[0].id,
            sort_order=i,
            join_date=now,
            **data,
        ))
    db.add_all(businesses)
    db.flush()

    db.add_all(
        Review(business_id=businesses[idx].id, visitor_name=visitor, rating=rating, comment=comment)
        for idx, visitor, rating, comment in REVIEWS
    )
    db.add_all(
        Offer(
            business_id=businesses[idx].id,
            title=title,
            description=description,
            valid_until=now + timedelta(days=days) if days else None,
            is_active=True,
        )
        for idx, title, description, days in OFFERS
    )
    db.commit()
    logger.info("Database seeded successfully")
    return True


def seed_admin(db: Session) -> None:
    if crud_admin.get_admin_by_username(db, settings.ADMIN_USERNAME):
        return
    logger.info("Creating admin user %s", settings.ADMIN_USERNAME)
    crud_admin.create_admin(db, settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)


def run_seed() -> None:
    with SessionLocal() as db:
        seed_database(db)
        seed_admin(db)


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    run_seed()
