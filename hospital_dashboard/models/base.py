"""
Shared helpers for the JSON-backed record types.
"""
from datetime import date, datetime
from typing import Any, Dict, Iterable, Optional, Tuple

from hospital_dashboard.exceptions import InvalidFormat


def text(value: Any) -> str:
    """Coerce a stored value to a stripped string; None becomes ''."""
    if value is None:
        return ''
    return str(value).strip()


def optional_text(value: Any) -> Optional[str]:
    value = text(value)
    return value or None


def split_extra(data: Dict[str, Any], known: Iterable[str]) -> Dict[str, Any]:
    """Return the fields a record type does not know about, so they survive a rewrite."""
    known = set(known)
    return {k: v for k, v in data.items() if k not in known}


def parse_date(date_string: Any) -> Optional[date]:
    """Parse YYYY-MM-DD; returns None when missing or malformed."""
    if not date_string:
        return None
    try:
        return datetime.strptime(str(date_string)[:10], '%Y-%m-%d').date()
    except ValueError:
        return None


def require_fields(record_name: str, values: Iterable[Tuple[str, Any]]) -> None:
    for field_name, value in values:
        if not value:
            raise InvalidFormat(f'{record_name} field "{field_name}" is required')


def require_choice(field_name: str, value: str, choices: Iterable[str]) -> None:
    choices = tuple(choices)
    if value not in choices:
        raise InvalidFormat(f'Field "{field_name}" must be one of: {", ".join(choices)}')


def known_only(data: Dict[str, Any], known: Iterable[str]) -> Dict[str, Any]:
    """Drop the fields a record type does not define (used for client input)."""
    known = set(known)
    return {k: v for k, v in data.items() if k in known}
