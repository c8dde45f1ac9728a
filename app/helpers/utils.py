from datetime import datetime, timezone
from typing import Optional

from fastapi import Request
from slugify import slugify

from app.core.config import settings


def get_lang_from_request(request: Request):
    header = request.headers.get("Accept-Language", settings.DEFAULT_LANGUAGE)
    # "en-US,en;q=0.9" -> "en"
    return header.split(",")[0].split("-")[0].strip().lower() or settings.DEFAULT_LANGUAGE

def get_client_ip(request: Request) -> str:
    # Peer address only; behind a proxy run uvicorn with --proxy-headers
    return request.client.host if request.client else "unknown"

def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes (e.g. read back from SQLite) as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)

def make_slug(*candidates: Optional[str]) -> str:
    for candidate in candidates:
        if candidate:
            slug = slugify(candidate)
            if slug:
                return slug
    raise ValueError("slug_required")

def ensure_not_null(values: dict, *fields: str) -> None:
    """Reject an explicit null for a required column in a partial update."""
    for field in fields:
        if field in values and values[field] is None:
            raise ValueError("field_required")
