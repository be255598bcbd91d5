from __future__ import annotations

import re
from typing import Optional

from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required", details={"field": field_name})
    return str(value).strip()


def require_length(value: str, field_name: str, min_len: int, max_len: int) -> str:
    if value is None or not (min_len <= len(value) <= max_len):
        raise ValidationError(
            f"{field_name} must be between {min_len} and {max_len} characters",
            details={"field": field_name},
        )
    return value


def require_email(value: Optional[str], field_name: str = "email") -> str:
    email = require_non_empty(value, field_name)
    if not _EMAIL_RE.match(email):
        raise ValidationError(f"{field_name} should be valid", details={"field": field_name})
    return email


def optional_text(value: Optional[str]) -> Optional[str]:
    """Blank strings are stored as None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None
