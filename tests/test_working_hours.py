import json
from datetime import datetime

from app.services.working_hours import is_business_open, parse_working_hours

# 2025-06-02 is a Monday
MONDAY = datetime(2025, 6, 2)


def at(hour, minute=0, day=MONDAY):
    return day.replace(hour=hour, minute=minute)


def hours(**days):
    return parse_working_hours(json.dumps(days))


def test_no_hours_means_open():
    assert parse_working_hours(None) is None
    assert is_business_open(None, at(3))


def test_malformed_json_is_ignored():
    assert parse_working_hours("{not json") is None
    assert parse_working_hours("[1, 2]") is None


def test_camel_case_keys_are_accepted():
    parsed = hours(monday={"isOpen": True, "openTime": "09:00", "closeTime": "17:00"})
    assert parsed["monday"] == {"is_open": True, "open_time": "09:00", "close_time": "17:00"}


def test_open_within_regular_window():
    parsed = hours(monday={"is_open": True, "open_time": "09:00", "close_time": "17:00"})
    assert is_business_open(parsed, at(9))
    assert is_business_open(parsed, at(17))
    assert not is_business_open(parsed, at(8, 59))
    assert not is_business_open(parsed, at(17, 1))


def test_closed_day():
    parsed = hours(monday={"isOpen": False, "openTime": "09:00", "closeTime": "17:00"})
    assert not is_business_open(parsed, at(12))


def test_day_missing_from_schedule_is_closed():
    parsed = hours(sunday={"isOpen": True, "openTime": "09:00", "closeTime": "17:00"})
    assert not is_business_open(parsed, at(12))


def test_overnight_window():
    parsed = hours(monday={"isOpen": True, "openTime": "18:00", "closeTime": "02:00"})
    assert is_business_open(parsed, at(23))
    assert is_business_open(parsed, at(1, 30))
    assert not is_business_open(parsed, at(12))


def test_open_day_without_times_is_open_all_day():
    parsed = hours(monday={"isOpen": True})
    assert is_business_open(parsed, at(4))


def test_non_boolean_is_open_counts_as_closed():
    parsed = hours(monday={"isOpen": "false", "openTime": "09:00", "closeTime": "17:00"})
    assert parsed["monday"]["is_open"] is False
    assert not is_business_open(parsed, at(12))


def test_non_string_times_are_treated_as_unset():
    parsed = hours(monday={"isOpen": True, "openTime": 900, "closeTime": 1700})
    assert parsed["monday"]["open_time"] is None
    assert parsed["monday"]["close_time"] is None
    assert is_business_open(parsed, at(12))


def test_unparseable_times_do_not_raise():
    parsed = {"monday": {"is_open": True, "open_time": 900, "close_time": "9am"}}
    assert is_business_open(parsed, at(12))
