"""Relative luminance calculations"""

from typing import TYPE_CHECKING, Optional

from ..config.defaults import LuminanceParams

if TYPE_CHECKING:
    from ..models.colour import RGBTriple

_DEFAULT_PARAMS = LuminanceParams()


def linearize_channel(channel: float, linear_threshold: float = _DEFAULT_PARAMS.linear_threshold) -> float:
    """
    Convert one gamma-encoded sRGB channel to linear light

    Args:
        channel: Channel value in [0, 255]
        linear_threshold: Upper bound of the linear segment near black

    Returns:
        Linear-light channel value in [0, 1]
    """
    normalized = channel / 255
    if normalized <= linear_threshold:
        return normalized / 12.92
    return ((normalized + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: "RGBTriple", params: Optional[LuminanceParams] = None) -> float:
    """
    Calculate relative luminance of an RGB triple

    L = 0.2126 * R + 0.7152 * G + 0.0722 * B   (R, G, B linearized)

    Args:
        rgb: (red, green, blue) channels in [0, 255]
        params: Coefficients and linear threshold (defaults to sRGB)

    Returns:
        Relative luminance in [0, 1]
    """
    params = params or _DEFAULT_PARAMS

    luminance = 0.0
    for coefficient, channel in zip(params.coefficients, rgb):
        luminance += coefficient * linearize_channel(channel, params.linear_threshold)
    return luminance
