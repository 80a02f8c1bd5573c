"""Utility helpers shared across the package."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional


def uniq_preserve_order(items: Iterable[str]) -> List[str]:
    """Deduplicate while preserving first-seen order."""
    seen = set()
    out: List[str] = []
    for it in items:
        if not it:
            continue
        key = it.strip().lower()
        if key in seen:
            continue
        seen.add(key)
        out.append(it)
    return out


def get_str(payload: Dict[str, Any], key: str) -> Optional[str]:
    """Return a non-empty string field, or None when missing, null or not a string."""
    val = payload.get(key)
    if isinstance(val, str):
        val = val.strip()
        return val or None
    return None


def get_number(payload: Dict[str, Any], key: str) -> Optional[float]:
    val = payload.get(key)
    # bool is an int subclass; a flag is never a number here.
    if isinstance(val, bool) or not isinstance(val, (int, float)):
        return None
    return float(val)


def get_str_list(payload: Dict[str, Any], key: str) -> List[str]:
    """Return the string members of a list field, skipping anything else."""
    val = payload.get(key)
    if not isinstance(val, list):
        return []
    return [it.strip() for it in val if isinstance(it, str) and it.strip()]


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Normalize provider timestamps to timezone-aware UTC datetimes.

    Accepts ISO-8601 strings (with or without a zone, ``Z`` suffix allowed) and
    epoch numbers in seconds or milliseconds. Anything else yields None.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)

    if isinstance(value, (int, float)):
        ts = float(value)
        # Some feeds send epoch in ms; convert if so.
        if ts > 1e12:
            ts /= 1000.0
        try:
            return datetime.fromtimestamp(ts, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    return None


def contains_ci(haystack: Optional[str], needle: str) -> bool:
    """Case-insensitive substring test that treats a missing haystack as empty."""
    return needle.lower() in (haystack or "").lower()
