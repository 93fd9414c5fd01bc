"""
Configuration error classification.

Raised when merged configuration values fail validation before an evaluator
is built from them.
"""

from typing import Any, Optional

from .format import ColourContrastError


class ConfigurationError(ColourContrastError):
    """Configuration values are invalid and no evaluator can be built."""

    def __init__(self, message: str, errors: Optional[list[Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
