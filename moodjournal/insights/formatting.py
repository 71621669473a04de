"""
Date and text formatting used by the analytics engine.

Kept behind a small class so analysis can run against a fixed timezone
and normalizer instead of the machine's locale and clock.
"""

from datetime import datetime
from typing import Callable, Optional

from moodjournal.config import TREND_LABEL_FORMAT
from moodjournal.utils.timezone import to_local


class EntryFormatter:
    """
    Formats trend labels and normalizes text for word counting.

    Args:
        timezone_str: Timezone for local calendar dates, or None for the
                      system local zone.
        label_format: strftime format for trend labels.
        normalizer: Function applied to text before tokenizing.
    """

    def __init__(
        self,
        timezone_str: Optional[str] = None,
        label_format: str = TREND_LABEL_FORMAT,
        normalizer: Callable[[str], str] = str.lower,
    ):
        self.timezone_str = timezone_str
        self.label_format = label_format
        self.normalizer = normalizer

    def trend_label(self, dt: datetime) -> str:
        """Format an instant as its local month/day, e.g. ``03/01``."""
        return to_local(dt, self.timezone_str).strftime(self.label_format)

    def normalize(self, text: str) -> str:
        """Case-fold text before it is split into words."""
        return self.normalizer(text)
