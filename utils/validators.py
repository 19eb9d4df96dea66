"""
Input validators shared by the auth and catalog services.
"""

from __future__ import annotations

import re
from typing import Any, Iterable

from utils.errors import ValidationError

_EMAIL_RE = re.compile(r".+@.+\..+")

MIN_RATING = 1
MAX_RATING = 5

INVALID_TEXT = "Fields must be valid UTF-8 text"


def require_fields(values: Iterable[Any], message: str) -> None:
    """Raise ``ValidationError(message)`` if any value is missing or empty."""
    for value in values:
        if value is None:
            raise ValidationError(message)
        if isinstance(value, str) and not value.strip():
            raise ValidationError(message)


def is_utf8_text(value: str) -> bool:
    """False for strings holding lone surrogates (valid in JSON, not in UTF-8)."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def require_text(values: Iterable[Any], message: str) -> None:
    """Raise ``ValidationError(message)`` if a string value is not UTF-8 encodable."""
    for value in values:
        if isinstance(value, str) and not is_utf8_text(value):
            raise ValidationError(message)


def is_valid_email(email: str) -> bool:
    """Loose shape check: ``local@domain.suffix``."""
    return bool(_EMAIL_RE.fullmatch(email))


def validate_rating(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError("Rating must be between 1 and 5")
    if value < MIN_RATING or value > MAX_RATING:
        raise ValidationError("Rating must be between 1 and 5")
    return float(value)
