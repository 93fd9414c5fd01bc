"""
Colour Contrast - WCAG contrast ratio calculation

Parses web colour strings (hex, rgb()/rgba(), hsl()/hsla()), converts them
to relative luminance and computes the WCAG contrast ratio between two
colours.
"""

from .engine import ContrastEvaluator, compare_colour_contrast_ratio
from .errors import FormatError
from .metrics import contrast_ratio, relative_luminance
from .models import ContrastReport
from .parsing import parse_colour

__version__ = "0.1.0"

__all__ = [
    "compare_colour_contrast_ratio",
    "parse_colour",
    "relative_luminance",
    "contrast_ratio",
    "ContrastEvaluator",
    "ContrastReport",
    "FormatError",
]
