"""
Shared fixtures for the API test-suite.

Every test runs against a fresh in-memory SQLite database wired into the
app through the `get_db` dependency override.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_ON_STARTUP", "false")
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("ADMIN_PASSWORD", "seed-admin-secret")

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.rate_limit import login_tracker
from app.crud import admin as crud_admin
from app.db.base import Base
from app.db.session import get_db
from app.main import app
from app.models import Business, Category, City

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "secret123"


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    login_tracker.reset()
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        login_tracker.reset()


@pytest.fixture
def admin_user(db_session):
    return crud_admin.create_admin(db_session, ADMIN_USERNAME, ADMIN_PASSWORD)


@pytest.fixture
def auth_headers(client, admin_user):
    response = client.post(
        "/api/admin/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200, response.text
    token = response.json()["data"]["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def city(db_session):
    city = City(name="عمّان", name_en="Amman", slug="amman")
    db_session.add(city)
    db_session.commit()
    db_session.refresh(city)
    return city


@pytest.fixture
def category(db_session):
    category = Category(
        name="مطاعم",
        name_en="Restaurants",
        slug="restaurants",
        icon="Utensils",
        keywords=["اكل", "وجبات"],
        keywords_en=["food", "meals"],
        sort_order=0,
    )
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def make_business(db_session, category, city):
    """Factory inserting a business row; defaults to a fresh trial listing."""
    def _make(**fields):
        values = {
            "category_id": category.id,
            "city_id": city.id,
            "name": "شاورما الملك",
            "join_date": datetime.now(timezone.utc),
            "subscription_tier": "trial",
        }
        values.update(fields)
        business = Business(**values)
        db_session.add(business)
        db_session.commit()
        db_session.refresh(business)
        return business

    return _make
