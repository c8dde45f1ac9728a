from app.core.config import settings
from app.crud import admin as crud_admin
from app.db.seed import BUSINESSES, CATEGORIES, CITIES, OFFERS, REVIEWS, seed_admin, seed_database
from app.models import AdminUser, Business, Category, City, Offer, Review


def test_seed_populates_empty_database(db_session):
    assert seed_database(db_session) is True

    assert db_session.query(City).count() == len(CITIES)
    assert db_session.query(Category).count() == len(CATEGORIES)
    assert db_session.query(Business).count() == len(BUSINESSES)
    assert db_session.query(Review).count() == len(REVIEWS)
    assert db_session.query(Offer).count() == len(OFFERS)


def test_seed_is_skipped_when_catalogue_exists(db_session):
    seed_database(db_session)
    assert seed_database(db_session) is False
    assert db_session.query(Category).count() == len(CATEGORIES)


def test_seeded_businesses_are_listed(client, db_session):
    seed_database(db_session)
    data = client.get("/api/businesses").json()["data"]
    assert len(data) == len(BUSINESSES)
    assert all(b["subscription"]["status"] == "trial" for b in data)


def test_seed_admin_creates_configured_account_once(db_session):
    seed_admin(db_session)
    seed_admin(db_session)

    assert db_session.query(AdminUser).count() == 1
    assert crud_admin.authenticate_admin(db_session, settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)
