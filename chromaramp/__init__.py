"""
Chromaramp - hue-preserving palette ramps
=========================================

Generate a 9-step color ramp from one anchor color. Saturation runs linearly
between fixed endpoints and the anchor; value follows a configurable power
curve; the anchor's hue is kept for every step.

Quick Start
-----------
>>> from chromaramp import PaletteGenerator, GenerationConfig, hex_to_rgb
>>> generator = PaletteGenerator()
>>> config = GenerationConfig.from_curve_power(200)
>>> codes = generator.make_gradient(hex_to_rgb("#4a90e2"), 4, config)
>>> len(codes)
9

Modules
-------
- conversions: RGB/HSV/hex conversions (scalar and numpy)
- colors: immutable ColorRGB / PercentageHSV values
- palette: generator, configuration, CSS export, picker state
- exceptions: error kinds
"""
import logging

from .conversions import (
    rgb_to_hsv,
    hsv_to_rgb,
    rgb_to_hex,
    hex_to_rgb,
    parse_hex,
    is_hex_color,
    np_rgb_to_hsv,
    np_hsv_to_rgb,
    convert,
    np_convert,
    FormatType,
)
from .colors import ColorRGB, PercentageHSV
from .palette import (
    GenerationConfig,
    InterpolationMode,
    Palette,
    PaletteGenerator,
    PalettePicker,
    EdgeAnchorWarning,
    join_hex,
    to_css_variables,
    write_css,
    CSS_FILENAME,
)
from .exceptions import (
    PaletteError,
    InvalidAnchorError,
    InvalidConfigurationError,
    HexParseError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Conversions
    "rgb_to_hsv", "hsv_to_rgb", "rgb_to_hex", "hex_to_rgb", "parse_hex", "is_hex_color",
    "np_rgb_to_hsv", "np_hsv_to_rgb", "convert", "np_convert", "FormatType",

    # Color values
    "ColorRGB", "PercentageHSV",

    # Palette
    "GenerationConfig", "InterpolationMode", "Palette", "PaletteGenerator", "PalettePicker",
    "EdgeAnchorWarning", "join_hex", "to_css_variables", "write_css", "CSS_FILENAME",

    # Errors
    "PaletteError", "InvalidAnchorError", "InvalidConfigurationError", "HexParseError",

    "__version__",
]
