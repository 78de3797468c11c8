# core/utils.py

import math
import re
import uuid
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Sequence

from core.errors import PayloadError


# -------------------------------------------------------------
# Ids + timestamps (assigned client-side)
# -------------------------------------------------------------
def new_document_id() -> str:
    return str(uuid.uuid4())


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def timestamp_ms() -> int:
    return int(datetime.now(timezone.utc).timestamp() * 1000)


# -------------------------------------------------------------
# Normalize blank → None
# -------------------------------------------------------------
def clean(value):
    if value is None:
        return None
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


# -------------------------------------------------------------
# Numeric form fields
# -------------------------------------------------------------
# Blank means "not provided". Anything else must parse, or the whole
# submission is rejected before a write happens.
def parse_float(value, field: str) -> Optional[float]:
    value = clean(value)
    if value is None:
        return None
    if isinstance(value, bool):
        raise PayloadError(f"{field} must be a number", field=field)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise PayloadError(f"{field} must be a number, got {value!r}", field=field)
    if not math.isfinite(number):
        raise PayloadError(f"{field} must be a finite number", field=field)
    return number


def parse_int(value, field: str) -> Optional[int]:
    value = clean(value)
    if value is None:
        return None
    if isinstance(value, bool):
        raise PayloadError(f"{field} must be a whole number", field=field)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise PayloadError(f"{field} must be a whole number", field=field)
        return int(value)
    if isinstance(value, str) and re.fullmatch(r"[+-]?\d+", value):
        return int(value)
    raise PayloadError(f"{field} must be a whole number, got {value!r}", field=field)


# -------------------------------------------------------------
# Filename sanitizer (blob keys)
# -------------------------------------------------------------
def safe_filename(filename: str) -> str:
    return re.sub(r"[^A-Za-z0-9._-]", "_", filename)


# -------------------------------------------------------------
# Free-text search over a fixed set of fields
# -------------------------------------------------------------
def matches_search(document: dict, fields: Sequence[str], term: Optional[str]) -> bool:
    if not term:
        return True
    needle = term.lower()
    for field in fields:
        value = document.get(field)
        if isinstance(value, str) and needle in value.lower():
            return True
    return False


def filter_documents(documents: Iterable[dict], fields: Sequence[str], term: Optional[str]) -> List[dict]:
    """
    Case-insensitive substring match; re-scans the whole list every call.
    Filtering an already-filtered list by the same term changes nothing.
    """
    return [doc for doc in documents if matches_search(doc, fields, term)]
