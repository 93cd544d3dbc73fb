"""
Chromaramp Color Space Conversions
==================================

Scalar and vectorized (numpy) conversions between RGB, HSV and hex strings.

Conversion Functions
--------------------

RGB → HSV:
    rgb_to_hsv(r, g, b)
        Integer RGB (0-255) to (hue degrees, saturation %, value %)
    unit_rgb_to_hsv(r, g, b)
        Unit-interval kernel
    np_rgb_to_hsv(rgb), np_unit_rgb_to_hsv(r, g, b)
        Vectorized twins

HSV → RGB:
    hsv_to_rgb(h, s, v)
        (hue degrees, saturation %, value %) to integer RGB, rounded half-up
    hsv_to_unit_rgb(h, s, v)
        Unit-interval kernel
    np_hsv_to_rgb(hsv), np_hsv_to_unit_rgb(h, s, v)
        Vectorized twins

Hex:
    rgb_to_hex(r, g, b)     -> '#rrggbb'
    hex_to_rgb(text)        -> (r, g, b), black when the text does not parse
    parse_hex(text)         -> (r, g, b), raises HexParseError
    is_hex_color(text)      -> bool

High-Level API
--------------
    convert(color, from_space, to_space, input_type, output_type)
    np_convert(color, from_space, to_space, input_type, output_type)

Examples
--------
>>> from chromaramp.conversions import rgb_to_hsv, hsv_to_rgb, rgb_to_hex
>>> h, s, v = rgb_to_hsv(74, 144, 226)
>>> rgb_to_hex(*hsv_to_rgb(h, s, v))
'#4a90e2'
"""

from .to_hsv import (
    unit_rgb_to_hsv,
    rgb_to_hsv,
    np_unit_rgb_to_hsv,
    np_rgb_to_hsv,
)
from .to_rgb import (
    hsv_to_unit_rgb,
    hsv_to_rgb,
    np_hsv_to_unit_rgb,
    np_hsv_to_rgb,
)
from .hex import (
    rgb_to_hex,
    hex_to_rgb,
    parse_hex,
    is_hex_color,
    HEX_PATTERN,
    BLACK,
)
from .wrapper import convert, np_convert

from ..types.format_type import FormatType

__all__ = [
    # RGB → HSV
    'unit_rgb_to_hsv',
    'rgb_to_hsv',
    'np_unit_rgb_to_hsv',
    'np_rgb_to_hsv',

    # HSV → RGB
    'hsv_to_unit_rgb',
    'hsv_to_rgb',
    'np_hsv_to_unit_rgb',
    'np_hsv_to_rgb',

    # Hex
    'rgb_to_hex',
    'hex_to_rgb',
    'parse_hex',
    'is_hex_color',
    'HEX_PATTERN',
    'BLACK',

    # High-level API
    'convert',
    'np_convert',

    # Types
    'FormatType',
]
