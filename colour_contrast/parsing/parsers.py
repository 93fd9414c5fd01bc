"""
Web colour string parsers.

This module turns hex, rgb()/rgba() and hsl()/hsla() colour strings into
(red, green, blue) triples. Parsing is deliberately lenient: numeric tokens
are scanned from anywhere in the string rather than parsed structurally,
missing values fall back to their maximum, and alpha is read but dropped.
"""

import re
from collections.abc import Sequence
from typing import Any, Optional

from ..errors import FormatError
from ..logging.config import get_logger
from ..models.colour import RGBTriple

logger = get_logger(__name__)

RGB_LIMITS = (255, 255, 255)
HSL_LIMITS = (360, 1, 1)

# Value used for any channel the input does not supply
DEFAULT_TOKEN = "100%"

_NUMERIC_TOKEN = re.compile(r"[0-9.%]+")
_NUMBER_WITH_UNIT = re.compile(r"([0-9.]+)(%)?")
_HEX_DIGIT = re.compile(r"[0-9A-F]", re.IGNORECASE)
_HEX_PAIR = re.compile(r"[0-9A-F]{2}", re.IGNORECASE)

EXPECTED_COLOUR_FORMAT = "'#rgb', '#rrggbb', 'rgb()', 'rgba()', 'hsl()' or 'hsla()'"


def _reject(message: str, raw_data: Any, expected_format: str) -> FormatError:
    logger.debug("Colour input rejected", reason=message, raw_data=repr(raw_data))
    return FormatError(message, raw_data=raw_data, expected_format=expected_format)


def parse_colour(colour: Any) -> RGBTriple:
    """
    Parse a colour string into an RGB triple.

    Dispatch is by prefix, first match wins:
    'hsl...' -> HSL, anything containing 'rgb' -> RGB, '#...' -> hex.

    Args:
        colour: Colour string, e.g. '#fff', 'rgba(0, 0, 0, .5)', 'hsl(120, 100%, 50%)'

    Returns:
        (red, green, blue) with each channel nominally in [0, 255]

    Raises:
        FormatError: If colour is not a string, matches no known format,
            or contains an unparseable number
    """
    if not isinstance(colour, str):
        raise _reject(
            f"Colour must be a string, got {type(colour).__name__}",
            colour,
            "str",
        )

    if colour.startswith("hsl"):
        return parse_hsl(colour)
    if "rgb" in colour:
        return parse_rgb(colour)
    if colour.startswith("#"):
        return parse_hex(colour)

    raise _reject(f"Colour {colour!r} is in an unrecognised format", colour, EXPECTED_COLOUR_FORMAT)


def parse_hex(colour: str) -> RGBTriple:
    """
    Parse a '#rgb' or '#rrggbb' colour code.

    Codes with fewer than 6 hex digits are read as shorthand with each
    digit doubled. Missing channels default to 0xff and any digits past
    the third channel (alpha) are ignored.
    """
    digits = _HEX_DIGIT.findall(colour)
    if len(digits) < 6:
        return tuple(  # type: ignore[return-value]
            int(_pick(digits, i, "f") * 2, 16) for i in range(3)
        )

    pairs = _HEX_PAIR.findall("".join(digits))
    return tuple(  # type: ignore[return-value]
        int(_pick(pairs, i, "ff"), 16) for i in range(3)
    )


def parse_rgb(colour: str) -> RGBTriple:
    """Parse an 'rgb()' or 'rgba()' colour; alpha is ignored."""
    return convert_to_percentage(_NUMERIC_TOKEN.findall(colour), RGB_LIMITS)


def parse_hsl(colour: str) -> RGBTriple:
    """Parse an 'hsl()' or 'hsla()' colour; alpha is ignored."""
    hsl = convert_to_percentage(_NUMERIC_TOKEN.findall(colour), HSL_LIMITS)
    return hsl_to_rgb(hsl)


def convert_to_percentage(numbers: Sequence[str], limits: Sequence[float]) -> RGBTriple:
    """
    Convert raw numeric tokens against per-position limits.

    A token ending in '%' becomes limit * number / 100; a plain number is
    taken as-is and the limit is not applied. Positions with no token are
    treated as '100%'. Tokens beyond len(limits) are ignored.

    Args:
        numbers: Raw tokens such as ['255', '50%', '.5']
        limits: Maximum value for each position

    Returns:
        One converted value per limit

    Raises:
        FormatError: If a token is not a number with an optional '%' suffix
    """
    converted = []
    for index, limit in enumerate(limits):
        token = _pick(numbers, index, DEFAULT_TOKEN)
        match = _NUMBER_WITH_UNIT.search(token)
        if not match:
            raise _reject(f"Number {token!r} is in an incorrect format", token, "number or percentage")

        try:
            value = float(match.group(1))
        except ValueError:
            raise _reject(
                f"Number {token!r} is in an incorrect format", token, "number or percentage"
            ) from None

        if match.group(2):
            converted.append(limit * value / 100)
        else:
            converted.append(value)

    return tuple(converted)  # type: ignore[return-value]


def hsl_to_rgb(hsl: Sequence[float]) -> RGBTriple:
    """
    Convert (hue, saturation, lightness) to an RGB triple.

    Hue is in degrees, saturation and lightness in [0, 1]. Hue is not
    wrapped: values of 360 or more fall through to the last sextant.
    """
    hue, saturation, lightness = hsl[0], hsl[1], hsl[2]

    if lightness < 0.5:
        high = 255 * (lightness + saturation * lightness)
        low = 255 * (lightness - saturation * lightness)
    else:
        high = 255 * (lightness + saturation * (1 - lightness))
        low = 255 * (lightness - saturation * (1 - lightness))

    spread = high - low

    if hue < 60:
        return (high, hue / 60 * spread + low, low)
    elif hue < 120:
        return ((120 - hue) / 60 * spread + low, high, low)
    elif hue < 180:
        return (low, high, (hue - 120) / 60 * spread + low)
    elif hue < 240:
        return (low, (240 - hue) / 60 * spread + low, high)
    elif hue < 300:
        return ((hue - 240) / 60 * spread + low, low, high)
    return (high, low, (360 - hue) / 60 * spread + low)


def _pick(values: Sequence[str], index: int, default: str) -> str:
    """Return values[index], or default when it is missing or empty."""
    value: Optional[str] = values[index] if index < len(values) else None
    return value or default
