"""Relative luminance and contrast ratio calculations"""

from .contrast import conformance_level, contrast_ratio
from .luminance import linearize_channel, relative_luminance

__all__ = [
    "relative_luminance",
    "linearize_channel",
    "contrast_ratio",
    "conformance_level",
]
