"""
Search helpers for Arabic and English business listings.

Arabic spelling varies a lot in user input (hamza forms, taa marbuta,
alef maqsura, diacritics), so both the query and the searched text are
folded to a common form before comparing.
"""
import re
from typing import Iterable, Optional

_ALEF_FORMS = re.compile("[أإآا]")
_DIACRITICS = re.compile("[\u064B-\u065F]")

_LETTER_MAP = str.maketrans({
    "ة": "ه",
    "ى": "ي",
    "ؤ": "و",
    "ئ": "ي",
})

FUZZY_THRESHOLD = 0.7


def normalize_arabic(text: str) -> str:
    text = _ALEF_FORMS.sub("ا", text)
    text = text.translate(_LETTER_MAP)
    return _DIACRITICS.sub("", text)


def fuzzy_match(search: str, target: str) -> bool:
    """True when most of `search` appears in `target` as an ordered subsequence."""
    if len(search) < 2:
        return False
    search_idx = 0
    for char in target:
        if search_idx >= len(search):
            break
        if char == search[search_idx]:
            search_idx += 1
    return search_idx >= len(search) * FUZZY_THRESHOLD


def _fold(text: Optional[str]) -> str:
    return normalize_arabic((text or "").lower())


def _fold_all(values: Optional[Iterable[str]]) -> str:
    return " ".join(_fold(v) for v in (values or []))


def matches_business(business, query: str) -> bool:
    """
    Check a loaded business (with its category) against a free-text query.

    Substring match on name, description, address, category name, services
    and category keywords; falls back to a fuzzy match on the name.
    """
    query_lower = query.lower()
    needle = normalize_arabic(query_lower)
    category = business.category

    name = _fold(business.name)
    haystacks = [
        name,
        _fold(business.description),
        _fold(business.address),
        _fold(category.name if category else None),
        _fold_all(business.services),
        _fold_all(category.keywords if category else None),
    ]
    if any(needle in text for text in haystacks):
        return True

    keywords_en = " ".join(k.lower() for k in ((category.keywords_en if category else None) or []))
    if query_lower in keywords_en:
        return True

    return fuzzy_match(needle, name)
