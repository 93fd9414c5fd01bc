"""
Error classification for colour parsing and contrast evaluation.

Parsing failures are reported as FormatError; configuration problems found
while building an evaluator are reported as ConfigurationError.
"""

from .configuration import ConfigurationError
from .format import ColourContrastError, FormatError

__all__ = [
    "ColourContrastError",
    "FormatError",
    "ConfigurationError",
]
