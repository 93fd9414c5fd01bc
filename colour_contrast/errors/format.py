"""
Format error classification for colour string parsing.

Every rejection raised while turning a colour string into an RGB triple is a
FormatError, so callers only ever need to catch a single exception type.
"""

from typing import Any, Optional


class ColourContrastError(Exception):
    """Base class for all errors raised by the colour contrast package."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class FormatError(ColourContrastError, ValueError):
    """Colour input is not a string or is not in a recognised format."""

    def __init__(self, message: str, raw_data: Any = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format
