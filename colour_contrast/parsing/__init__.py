"""Colour string parsing into RGB triples"""

from .parsers import (
    convert_to_percentage,
    hsl_to_rgb,
    parse_colour,
    parse_hex,
    parse_hsl,
    parse_rgb,
)

__all__ = [
    "parse_colour",
    "parse_hex",
    "parse_rgb",
    "parse_hsl",
    "convert_to_percentage",
    "hsl_to_rgb",
]
