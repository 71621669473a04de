"""
Journal data model.

Defines journal entries, the closed mood tag set and the user profile,
plus conversion to and from the camelCase JSON records the store keeps.
"""

import re
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from moodjournal.config import MOOD_VALUES, UNRECOGNIZED_MOOD_VALUE
from moodjournal.utils.timezone import parse_timestamp

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class ValidationError(ValueError):
    """Raised when entry or profile data has the wrong shape."""


class Mood(Enum):
    """Mood tag attached to an entry by its author."""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"
    # Any stored value outside the three tags above
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def parse(cls, value: Any) -> "Mood":
        """
        Map a stored mood value onto the closed tag set.

        Args:
            value: Stored mood (string, Mood, or anything else).

        Returns:
            The matching Mood, or Mood.UNRECOGNIZED.
        """
        if isinstance(value, Mood):
            return value
        if isinstance(value, str):
            for mood in (cls.POSITIVE, cls.NEUTRAL, cls.NEGATIVE):
                if value == mood.value:
                    return mood
        return cls.UNRECOGNIZED

    @property
    def score(self) -> int:
        """Numeric value used on the mood trend chart."""
        return MOOD_VALUES.get(self.value, UNRECOGNIZED_MOOD_VALUE)


class Theme(Enum):
    """Display theme preference."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


def _optional_str(data: dict[str, Any], key: str) -> str:
    """Read a text field, treating a missing value as empty."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"Field '{key}' must be text, got {type(value).__name__}")
    return value


def utc_now_iso(now: Optional[datetime] = None) -> str:
    """
    Format an instant the way entries store it.

    Args:
        now: Instant to format (defaults to the current time).

    Returns:
        UTC timestamp like ``2025-03-01T09:30:00.000Z``.
    """
    ts = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return ts.strftime("%Y-%m-%dT%H:%M:%S.") + f"{ts.microsecond // 1000:03d}Z"


@dataclass(frozen=True)
class JournalEntry:
    """One journal record."""

    id: str
    title: str
    content: str
    mood: Mood
    timestamp: str
    raw_mood: Any = None
    cover_image: Optional[dict[str, Any]] = None
    text_style: Optional[dict[str, bool]] = None
    text_color: Optional[str] = None

    @classmethod
    def create(
        cls,
        title: str,
        content: str,
        mood: Mood = Mood.NEUTRAL,
        now: Optional[datetime] = None,
        **extras: Any,
    ) -> "JournalEntry":
        """
        Create a new entry with a fresh id and the current timestamp.

        Args:
            title: Entry title (must not be blank).
            content: Entry body (must not be blank).
            mood: Mood tag, neutral by default.
            now: Creation instant (defaults to the current time).
            **extras: cover_image, text_style or text_color.

        Returns:
            The new entry.

        Raises:
            ValidationError: If title or content is blank or the mood is unknown.
        """
        if Mood.parse(mood) is Mood.UNRECOGNIZED:
            raise ValidationError(f"Unknown mood: {mood}")

        entry = cls(
            id=uuid.uuid4().hex,
            title=title,
            content=content,
            mood=Mood.parse(mood),
            timestamp=utc_now_iso(now),
            **extras,
        )
        entry.validate()
        return entry

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "JournalEntry":
        """
        Build an entry from a stored record.

        Missing fields become empty strings and unknown moods map to
        Mood.UNRECOGNIZED. Fields of the wrong type are rejected.

        Args:
            data: Record in the camelCase wire format.

        Returns:
            The parsed entry.

        Raises:
            ValidationError: If the record or one of its text fields has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValidationError(f"Entry must be an object, got {type(data).__name__}")

        raw_mood = data.get("mood")
        mood = Mood.parse(raw_mood)
        entry_id = data.get("id")

        return cls(
            id="" if entry_id is None else str(entry_id),
            title=_optional_str(data, "title"),
            content=_optional_str(data, "content"),
            mood=mood,
            timestamp=_optional_str(data, "timestamp"),
            raw_mood=raw_mood if mood is Mood.UNRECOGNIZED else None,
            cover_image=data.get("coverImage"),
            text_style=data.get("textStyle"),
            text_color=data.get("textColor"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the entry as a camelCase record."""
        record: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "mood": self.raw_mood if self.mood is Mood.UNRECOGNIZED else self.mood.value,
            "timestamp": self.timestamp,
        }
        if self.cover_image is not None:
            record["coverImage"] = self.cover_image
        if self.text_style is not None:
            record["textStyle"] = self.text_style
        if self.text_color is not None:
            record["textColor"] = self.text_color
        return record

    def validate(self) -> None:
        """
        Check the text fields before the entry is saved.

        Raises:
            ValidationError: If the title or content is blank.
        """
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValidationError("Title is required")
        if not isinstance(self.content, str) or not self.content.strip():
            raise ValidationError("Content is required")

    @property
    def created_at(self) -> Optional[datetime]:
        """Parsed timestamp, or None if it is missing or malformed."""
        return parse_timestamp(self.timestamp)

    def with_changes(self, **changes: Any) -> "JournalEntry":
        """
        Return a copy with some fields replaced. The id never changes.

        Raises:
            ValidationError: If an id change is requested.
        """
        if "id" in changes and changes["id"] != self.id:
            raise ValidationError("Entry id cannot be changed")
        if "mood" in changes:
            raw = changes["mood"]
            changes["mood"] = Mood.parse(raw)
            unrecognized = changes["mood"] is Mood.UNRECOGNIZED and not isinstance(raw, Mood)
            changes["raw_mood"] = raw if unrecognized else None
        return replace(self, **changes)


def is_valid_email(email: str) -> bool:
    """Check an email address against a loose pattern."""
    return bool(EMAIL_REGEX.match(email))


@dataclass
class UserProfile:
    """Profile settings shown on the profile screen."""

    name: str = ""
    email: str = ""
    reminder_enabled: bool = False
    theme: Theme = field(default=Theme.SYSTEM)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserProfile":
        """
        Build a profile from a stored record.

        Raises:
            ValidationError: If the record has the wrong shape.
        """
        if not isinstance(data, dict):
            raise ValidationError(f"Profile must be an object, got {type(data).__name__}")

        try:
            theme = Theme(data.get("theme", Theme.SYSTEM.value))
        except ValueError:
            theme = Theme.SYSTEM

        return cls(
            name=_optional_str(data, "name"),
            email=_optional_str(data, "email"),
            reminder_enabled=bool(data.get("reminderEnabled", False)),
            theme=theme,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the profile as a camelCase record."""
        return {
            "name": self.name,
            "email": self.email,
            "reminderEnabled": self.reminder_enabled,
            "theme": self.theme.value,
        }

    def validate(self) -> None:
        """
        Check the profile before it is saved.

        Raises:
            ValidationError: If the name is blank, the email is malformed,
                             or the theme is not a Theme.
        """
        if not self.name.strip():
            raise ValidationError("Please enter your name.")
        if self.email and not is_valid_email(self.email):
            raise ValidationError("Please enter a valid email address.")
        if not isinstance(self.theme, Theme):
            raise ValidationError(f"Unknown theme: {self.theme}")
