from datetime import datetime, timedelta, timezone

from app.core.security import create_access_token, decode_access_token
from app.models import ActivityLog, Business, Offer, OfferRating, Review
from tests.conftest import ADMIN_PASSWORD, ADMIN_USERNAME


# Authentication
def test_login_returns_bearer_token(client, admin_user):
    response = client.post("/api/admin/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["token_type"] == "bearer"
    assert data["username"] == ADMIN_USERNAME

    me = client.get("/api/admin/me", headers={"Authorization": f"Bearer {data['access_token']}"})
    assert me.json()["data"]["id"] == admin_user.id
    assert me.json()["data"]["username"] == ADMIN_USERNAME


def test_login_is_logged_and_stamps_last_login(client, db_session, auth_headers, admin_user):
    db_session.refresh(admin_user)
    assert admin_user.last_login_at is not None
    log = db_session.query(ActivityLog).one()
    assert log.action == "login"
    assert log.admin_username == ADMIN_USERNAME


def test_wrong_password_reports_remaining_attempts(client, admin_user):
    response = client.post(
        "/api/admin/login",
        json={"username": ADMIN_USERNAME, "password": "wrong-password"},
        headers={"Accept-Language": "en"},
    )
    assert response.status_code == 401
    assert response.json()["data"] == {"remaining_attempts": 4}
    assert response.json()["message"] == "Invalid username or password. Attempts left: 4"


def test_lockout_after_five_failures(client, admin_user):
    for _ in range(4):
        client.post("/api/admin/login", json={"username": ADMIN_USERNAME, "password": "wrong-password"})

    fifth = client.post("/api/admin/login", json={"username": ADMIN_USERNAME, "password": "wrong-password"})
    assert fifth.status_code == 429
    assert "locked_until" in fifth.json()["data"]

    # Even the right password is refused while locked
    locked = client.post("/api/admin/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert locked.status_code == 429


def test_successful_login_resets_failures(client, admin_user):
    for _ in range(3):
        client.post("/api/admin/login", json={"username": ADMIN_USERNAME, "password": "wrong-password"})
    assert client.post("/api/admin/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}).status_code == 200

    response = client.post("/api/admin/login", json={"username": ADMIN_USERNAME, "password": "wrong-password"})
    assert response.json()["data"] == {"remaining_attempts": 4}


def test_admin_routes_require_token(client):
    assert client.get("/api/admin/businesses").status_code == 401
    assert client.get("/api/admin/statistics").status_code == 401
    bad = client.get("/api/admin/me", headers={"Authorization": "Bearer not-a-token"})
    assert bad.status_code == 401
    assert bad.json()["status"] == "error"


def test_logout(client, auth_headers):
    response = client.post("/api/admin/logout", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["data"] == {"success": True}


# Categories
def test_category_crud_and_reorder(client, auth_headers):
    first = client.post(
        "/api/admin/categories",
        json={"name": "مطاعم", "name_en": "Restaurants", "icon": "Utensils"},
        headers=auth_headers,
    )
    assert first.status_code == 201
    assert first.json()["data"]["slug"] == "restaurants"

    second = client.post(
        "/api/admin/categories",
        json={"name": "سيارات", "slug": "cars", "icon": "Car"},
        headers=auth_headers,
    ).json()["data"]
    first = first.json()["data"]
    assert second["sort_order"] > first["sort_order"]

    reorder = client.put("/api/admin/categories/reorder", json={"ids": [second["id"], first["id"]]}, headers=auth_headers)
    assert reorder.status_code == 200
    assert [c["id"] for c in client.get("/api/categories").json()["data"]] == [second["id"], first["id"]]

    updated = client.put(f"/api/admin/categories/{first['id']}", json={"icon": "Pizza"}, headers=auth_headers)
    assert updated.json()["data"]["icon"] == "Pizza"

    assert client.delete(f"/api/admin/categories/{second['id']}", headers=auth_headers).status_code == 200
    assert client.get(f"/api/categories/{second['id']}").status_code == 404


def test_duplicate_category_slug_is_rejected(client, auth_headers, category):
    response = client.post(
        "/api/admin/categories",
        json={"name": "x", "slug": "restaurants", "icon": "Utensils"},
        headers={**auth_headers, "Accept-Language": "en"},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Slug is already in use"


def test_category_in_use_cannot_be_deleted(client, auth_headers, category, make_business):
    make_business()
    response = client.delete(f"/api/admin/categories/{category.id}", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "category_in_use"


# Cities
def test_city_create_and_delete(client, auth_headers):
    created = client.post("/api/admin/cities", json={"name": "إربد", "name_en": "Irbid"}, headers=auth_headers)
    assert created.status_code == 201
    city_id = created.json()["data"]["id"]
    assert created.json()["data"]["slug"] == "irbid"

    assert client.delete(f"/api/admin/cities/{city_id}", headers=auth_headers).status_code == 200
    assert client.get("/api/cities").json()["data"] == []


def test_city_in_use_cannot_be_deleted(client, auth_headers, city, make_business):
    make_business()
    assert client.delete(f"/api/admin/cities/{city.id}", headers=auth_headers).status_code == 400


# Businesses
def test_create_vip_business_is_verified(client, auth_headers, category, city):
    response = client.post(
        "/api/admin/businesses",
        json={
            "category_id": category.id,
            "city_id": city.id,
            "name": "مطعم جديد",
            "subscription_tier": "vip",
            "subscription_activated_at": datetime.now(timezone.utc).isoformat(),
        },
        headers=auth_headers,
    )
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["is_verified"] is True
    assert data["subscription"]["status"] == "active"
    assert data["category"]["id"] == category.id


def test_create_business_with_unknown_category(client, auth_headers):
    response = client.post(
        "/api/admin/businesses",
        json={"category_id": 999, "name": "x"},
        headers=auth_headers,
    )
    assert response.status_code == 400
    assert response.json()["error"] == "category_not_found"


def test_admin_listing_includes_expired(client, auth_headers, make_business):
    make_business(name="unpaid", subscription_tier="regular")
    data = client.get("/api/admin/businesses", headers=auth_headers).json()["data"]
    assert [b["subscription"]["status"] for b in data] == ["expired"]


def test_update_business_renews_subscription(client, auth_headers, make_business):
    business = make_business(subscription_tier="regular")
    response = client.put(
        f"/api/admin/businesses/{business.id}",
        json={"subscription_activated_at": datetime.now(timezone.utc).isoformat(), "phone": "0790000000"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["phone"] == "0790000000"
    assert data["subscription"]["status"] == "active"
    assert data["subscription"]["days_remaining"] == 30


def test_update_missing_business(client, auth_headers):
    assert client.put("/api/admin/businesses/999", json={"name": "x"}, headers=auth_headers).status_code == 404


def test_delete_business_removes_reviews_offers_and_ratings(client, db_session, auth_headers, make_business):
    business = make_business()
    offer = Offer(business_id=business.id, title="خصم")
    db_session.add_all([offer, Review(business_id=business.id, visitor_name="a", rating=5)])
    db_session.commit()
    db_session.add(OfferRating(offer_id=offer.id, visitor_name="b", rating=4))
    db_session.commit()

    response = client.delete(f"/api/admin/businesses/{business.id}", headers=auth_headers)
    assert response.status_code == 200
    assert db_session.query(Business).count() == 0
    assert db_session.query(Review).count() == 0
    assert db_session.query(Offer).count() == 0
    assert db_session.query(OfferRating).count() == 0


# Offers and reviews
def test_offer_crud(client, auth_headers, make_business):
    business = make_business()
    valid_until = (datetime.now(timezone.utc) + timedelta(days=7)).isoformat()
    created = client.post(
        "/api/admin/offers",
        json={"business_id": business.id, "title": "خصم 20%", "valid_until": valid_until},
        headers=auth_headers,
    )
    assert created.status_code == 201
    offer_id = created.json()["data"]["id"]
    assert created.json()["data"]["is_active"] is True

    updated = client.put(f"/api/admin/offers/{offer_id}", json={"is_active": False}, headers=auth_headers)
    assert updated.json()["data"]["is_active"] is False
    assert client.get("/api/offers/active").json()["data"] == []

    listed = client.get("/api/admin/offers", headers=auth_headers).json()["data"]
    assert listed[0]["business"]["id"] == business.id

    assert client.delete(f"/api/admin/offers/{offer_id}", headers=auth_headers).status_code == 200
    assert client.delete(f"/api/admin/offers/{offer_id}", headers=auth_headers).status_code == 404


def test_offer_for_unknown_business(client, auth_headers):
    response = client.post("/api/admin/offers", json={"business_id": 999, "title": "x"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "business_not_found"


def test_review_moderation(client, db_session, auth_headers, make_business):
    business = make_business(name="شاورما الملك")
    review = Review(business_id=business.id, visitor_name="a", rating=1, comment="سيء")
    db_session.add(review)
    db_session.commit()

    listed = client.get("/api/admin/reviews", headers=auth_headers).json()["data"]
    assert listed[0]["business_name"] == "شاورما الملك"
    assert listed[0]["category_name"] == "مطاعم"

    assert client.delete(f"/api/admin/reviews/{review.id}", headers=auth_headers).status_code == 200
    assert client.get("/api/admin/reviews", headers=auth_headers).json()["data"] == []


# Settings, activity log and statistics
def test_settings_upsert(client, auth_headers):
    client.put("/api/admin/settings", json={"site_name": "دليني", "phone": "0790000000"}, headers=auth_headers)
    client.put("/api/admin/settings", json={"site_name": "Delini"}, headers=auth_headers)

    expected = {"site_name": "Delini", "phone": "0790000000"}
    assert client.get("/api/admin/settings", headers=auth_headers).json()["data"] == expected
    assert client.get("/api/settings").json()["data"] == expected


def test_admin_changes_are_recorded(client, auth_headers):
    client.post("/api/admin/cities", json={"name": "العقبة", "name_en": "Aqaba"}, headers=auth_headers)
    client.post(
        "/api/admin/activity-logs",
        json={"action": "export", "entity_type": "report", "details": "monthly"},
        headers=auth_headers,
    )

    logs = client.get("/api/admin/activity-logs", params={"limit": 10}, headers=auth_headers).json()["data"]
    assert [(l["action"], l["entity_type"]) for l in logs] == [
        ("export", "report"),
        ("create", "city"),
        ("login", "admin"),
    ]
    assert {l["admin_username"] for l in logs} == {ADMIN_USERNAME}


def test_activity_log_limit_is_bounded(client, auth_headers):
    assert client.get("/api/admin/activity-logs", params={"limit": 0}, headers=auth_headers).status_code == 400


def test_statistics(client, db_session, auth_headers, make_business, category):
    now = datetime.now(timezone.utc)
    vip = make_business(name="vip", subscription_tier="vip", subscription_activated_at=now, is_verified=True)
    regular = make_business(name="regular", subscription_tier="regular", subscription_activated_at=now)
    make_business(name="trial")
    make_business(name="lapsed", subscription_tier="regular", subscription_activated_at=now - timedelta(days=45))
    db_session.add_all([
        Review(business_id=vip.id, visitor_name="a", rating=5),
        Review(business_id=vip.id, visitor_name="b", rating=4),
        Review(business_id=regular.id, visitor_name="c", rating=3),
        Offer(business_id=vip.id, title="o1"),
        Offer(business_id=vip.id, title="o2", is_active=False),
    ])
    db_session.commit()

    # "lapsed" is past its paid period and is left out
    stats = client.get("/api/admin/statistics", headers=auth_headers).json()["data"]
    assert stats["total_businesses"] == 3
    assert stats["verified_businesses"] == 1
    assert stats["vip_businesses"] == 1
    assert stats["regular_businesses"] == 1
    assert stats["trial_businesses"] == 1
    assert stats["total_reviews"] == 3
    assert stats["average_rating"] == 4.0
    assert stats["recent_reviews"] == 3
    assert stats["total_offers"] == 2
    assert stats["active_offers"] == 1
    assert stats["monthly_revenue"] == 15000
    assert stats["businesses_by_category"] == [{"name": category.name, "count": 3}]
    assert stats["top_rated_businesses"][0]["name"] == "vip"
    assert stats["most_reviewed_businesses"][0]["review_count"] == 2


def test_expired_token_is_rejected(client, admin_user):
    token = create_access_token(admin_user.id, expires_delta=timedelta(minutes=-1))
    assert decode_access_token(token) is None
    assert client.get("/api/admin/me", headers={"Authorization": f"Bearer {token}"}).status_code == 401


def test_token_for_deleted_admin_is_rejected(client, db_session, admin_user):
    token = create_access_token(admin_user.id)
    assert decode_access_token(token) == admin_user.id
    db_session.delete(admin_user)
    db_session.commit()
    assert client.get("/api/admin/me", headers={"Authorization": f"Bearer {token}"}).status_code == 401


def test_lockout_ignores_forwarded_for_header(client, admin_user):
    codes = [
        client.post(
            "/api/admin/login",
            json={"username": ADMIN_USERNAME, "password": "wrong-password"},
            headers={"X-Forwarded-For": f"10.0.0.{i}"},
        ).status_code
        for i in range(6)
    ]
    assert codes == [401, 401, 401, 401, 429, 429]


def test_null_required_business_field_is_rejected(client, auth_headers, make_business):
    business = make_business()
    response = client.put(
        f"/api/admin/businesses/{business.id}",
        json={"category_id": None},
        headers={**auth_headers, "Accept-Language": "en"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "field_required"
    assert response.json()["message"] == "A required field cannot be empty"

    # The session is still usable afterwards
    assert client.get("/api/admin/businesses", headers=auth_headers).status_code == 200
    assert client.put(f"/api/admin/businesses/{business.id}", json={"name": None}, headers=auth_headers).status_code == 400


def test_null_required_offer_and_category_fields_are_rejected(client, db_session, auth_headers, make_business, category):
    offer = Offer(business_id=make_business().id, title="خصم")
    db_session.add(offer)
    db_session.commit()

    response = client.put(f"/api/admin/offers/{offer.id}", json={"title": None}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "field_required"

    response = client.put(f"/api/admin/categories/{category.id}", json={"icon": None}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "field_required"
    assert client.get(f"/api/categories/{category.id}").json()["data"]["icon"] == "Utensils"
