"""
Timezone utilities for moodjournal.

Resolves the timezone used to place entry timestamps on a local calendar
date and parses the ISO-8601 instants entries are stored with.
"""

import os
from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from moodjournal.config import TIMEZONE_ENV


# Common timezone abbreviations to full IANA names
TIMEZONE_ABBREVIATIONS: dict[str, str] = {
    "PST": "America/Los_Angeles",
    "PDT": "America/Los_Angeles",
    "MST": "America/Denver",
    "MDT": "America/Denver",
    "CST": "America/Chicago",
    "CDT": "America/Chicago",
    "EST": "America/New_York",
    "EDT": "America/New_York",
    "GMT": "Europe/London",
    "UTC": "UTC",
    "BST": "Europe/London",
    "CET": "Europe/Paris",
    "CEST": "Europe/Paris",
    "IST": "Asia/Kolkata",
    "JST": "Asia/Tokyo",
    "AEST": "Australia/Sydney",
    "AEDT": "Australia/Sydney",
}


def get_full_timezone_name(abbrev: str) -> Optional[str]:
    """
    Convert a timezone abbreviation to full IANA timezone name.

    Args:
        abbrev: Timezone abbreviation (e.g., "PST", "EST", "JST")

    Returns:
        Full IANA timezone name or None if not recognized
    """
    return TIMEZONE_ABBREVIATIONS.get(abbrev.upper())


def validate_timezone(tz_str: str) -> Optional[str]:
    """
    Validate and normalize a timezone string.

    Args:
        tz_str: Timezone string (abbreviation or IANA name)

    Returns:
        Valid IANA timezone name or None if invalid
    """
    if not tz_str:
        return None

    tz_str = tz_str.strip()

    full_name = get_full_timezone_name(tz_str)
    if full_name:
        return full_name

    try:
        ZoneInfo(tz_str)
        return tz_str
    except Exception:
        return None


def get_timezone_info(timezone_str: Optional[str]) -> Optional[ZoneInfo]:
    """
    Get ZoneInfo object for a timezone string.

    Args:
        timezone_str: IANA timezone name or abbreviation

    Returns:
        ZoneInfo object or None for system default
    """
    name = validate_timezone(timezone_str) if timezone_str else None
    if name:
        return ZoneInfo(name)
    return None


def resolve_timezone(timezone_str: Optional[str] = None) -> Optional[str]:
    """
    Pick the timezone for local calendar dates.

    Explicit argument wins, then the MOODJOURNAL_TZ environment variable.

    Returns:
        IANA timezone name or None to use the system local time
    """
    for candidate in (timezone_str, os.environ.get(TIMEZONE_ENV)):
        if candidate and (name := validate_timezone(candidate)):
            return name
    return None


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 instant such as ``2025-03-01T09:30:00.000Z``.

    Naive values are taken to be UTC.

    Returns:
        Timezone-aware datetime, or None if the value cannot be parsed
    """
    if not value:
        return None

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def to_local(dt: datetime, timezone_str: Optional[str]) -> datetime:
    """
    Convert a datetime to the user's timezone.

    Args:
        dt: Datetime to convert (naive values are assumed UTC)
        timezone_str: User's timezone, or None for the system local zone

    Returns:
        Aware datetime in the target timezone
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    tz = get_timezone_info(timezone_str)
    if tz:
        return dt.astimezone(tz)
    return dt.astimezone()


def format_time_for_user(dt: datetime, timezone_str: Optional[str], fmt: str = "%b %d, %Y %I:%M %p") -> str:
    """
    Format a datetime for display in user's timezone.

    Args:
        dt: Datetime to format
        timezone_str: User's timezone
        fmt: strftime format string

    Returns:
        Formatted time string
    """
    return to_local(dt, timezone_str).strftime(fmt)
