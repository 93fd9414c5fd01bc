"""Colour value types shared by the parsers and the luminance calculator."""

from typing import Union

# Channels are ordered (red, green, blue) and nominally lie in [0, 255].
# Hex input yields ints; rgb() and hsl() input yields floats.
Channel = Union[int, float]
RGBTriple = tuple[Channel, Channel, Channel]
