from types import SimpleNamespace

from app.services.search import fuzzy_match, matches_business, normalize_arabic


def make_business(**fields):
    category = SimpleNamespace(
        name="مطاعم",
        keywords=["وجبات", "اكل"],
        keywords_en=["food", "restaurant"],
    )
    values = {
        "name": "شاورما الملك",
        "description": "أطيب شاورما في المدينة",
        "address": "شارع فلسطين",
        "services": ["توصيل مجاني"],
        "category": category,
    }
    values.update(fields)
    return SimpleNamespace(**values)


def test_normalize_folds_alef_forms():
    assert normalize_arabic("أحمد إبراهيم آمال") == "احمد ابراهيم امال"


def test_normalize_folds_taa_marbuta_and_alef_maqsura():
    assert normalize_arabic("مدرسة مستشفى") == "مدرسه مستشفي"


def test_normalize_strips_diacritics():
    assert normalize_arabic("مَطْعَم") == "مطعم"


def test_fuzzy_match_needs_seventy_percent_in_order():
    assert fuzzy_match("shwrma", "shawarma")
    assert not fuzzy_match("xyzq", "shawarma")


def test_fuzzy_match_ignores_single_characters():
    assert not fuzzy_match("s", "shawarma")


def test_matches_name_with_spelling_variants():
    business = make_business(name="مطعم الأمير")
    assert matches_business(business, "الامير")


def test_matches_description_address_and_services():
    business = make_business()
    assert matches_business(business, "اطيب")
    assert matches_business(business, "فلسطين")
    assert matches_business(business, "توصيل")


def test_matches_category_name_and_keywords():
    business = make_business()
    assert matches_business(business, "مطاعم")
    assert matches_business(business, "وجبات")
    assert matches_business(business, "FOOD")


def test_no_match_for_unrelated_query():
    business = make_business()
    assert not matches_business(business, "سيارات")


def test_missing_category_is_tolerated():
    business = make_business(category=None, services=None, description=None)
    assert matches_business(business, "شاورما")
    assert not matches_business(business, "food")
