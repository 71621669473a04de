"""
Configuration and constants for moodjournal.

Defines file paths, storage keys, the quote endpoint and analytics defaults.

Cross-platform support:
- Set MOODJOURNAL_ROOT environment variable to override the data root
- Defaults to ~/.moodjournal on every platform
"""

import os
from pathlib import Path
from typing import Final


def _get_default_project_root() -> Path:
    """Get the default data root."""
    if env_root := os.environ.get("MOODJOURNAL_ROOT"):
        return Path(env_root).expanduser()
    return Path.home() / ".moodjournal"


# Project root and directory structure
PROJECT_ROOT: Final[Path] = _get_default_project_root()
DATA_DIR: Final[Path] = PROJECT_ROOT / "data"
STORE_PATH: Final[Path] = DATA_DIR / "store.json"

# Storage keys (flat key-value layout)
ENTRIES_KEY: Final[str] = "journal_entries"
PROFILE_KEY: Final[str] = "user_profile"

# Quote provider
QUOTE_API_URL: Final[str] = os.environ.get(
    "MOODJOURNAL_QUOTE_URL", "https://api.quotable.io/random"
)
QUOTE_TIMEOUT_SECONDS: Final[int] = 10
FALLBACK_QUOTE_TEXT: Final[str] = "Believe you can and you're halfway there."
FALLBACK_QUOTE_AUTHOR: Final[str] = "Theodore Roosevelt"

# Analytics constants
TREND_SAMPLE_SIZE: Final[int] = 7
TREND_LABEL_FORMAT: Final[str] = "%m/%d"
COMMON_WORDS_LIMIT: Final[int] = 20
MIN_WORD_LENGTH: Final[int] = 4  # Shorter tokens are dropped
SENTIMENT_BOUND: Final[int] = 5
MOOD_VALUES: Final[dict[str, int]] = {
    "positive": 3,
    "neutral": 2,
    "negative": 1,
}
UNRECOGNIZED_MOOD_VALUE: Final[int] = 0

# Insight time windows
TIME_RANGE_DAYS: Final[dict[str, int]] = {
    "7days": 7,
    "30days": 30,
    "90days": 90,
}
ALL_TIME_RANGE: Final[str] = "all"
DEFAULT_TIME_RANGE: Final[str] = "30days"

# Calendar
CALENDAR_DATE_FORMAT: Final[str] = "%Y-%m-%d"

# Timezone override for local calendar dates (IANA name or abbreviation)
TIMEZONE_ENV: Final[str] = "MOODJOURNAL_TZ"

# Logging
LOG_LEVEL: Final[str] = "INFO"
