"""
Chromaramp Color Classes
========================

Immutable value types for the two color spaces the palette engine uses.

>>> from chromaramp.colors import ColorRGB
>>> brand = ColorRGB.from_hex("#4A90E2")
>>> brand.value
(74, 144, 226)
>>> brand.hex
'#4a90e2'
>>> round(brand.to_hsv().hue, 2)
212.37

Notes
-----
- Instances are frozen after initialization
- Values are clamped to the class maxima and cast to the format's type
- Constructing from another ColorBase converts between spaces
"""

from .color_base import ColorBase
from .rgb import ColorRGB, RGB
from .hsv import PercentageHSV, HSV

__all__ = ['ColorBase', 'ColorRGB', 'RGB', 'PercentageHSV', 'HSV']
