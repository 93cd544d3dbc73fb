from __future__ import annotations
from typing import ClassVar, Tuple, TYPE_CHECKING

from ..conversions import rgb_to_hex, hex_to_rgb, parse_hex, rgb_to_hsv
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace, HexColor
from .color_base import ColorBase

if TYPE_CHECKING:
    from .hsv import PercentageHSV


class ColorRGB(ColorBase):
    """Immutable integer RGB color, each channel in [0, 255]."""

    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "rgb"
    maxima: ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    null_value: ClassVar[Tuple[int, int, int]] = (0, 0, 0)
    format_type: ClassVar[FormatType] = FormatType.INT

    @classmethod
    def from_hex(cls, text: str, strict: bool = False) -> ColorRGB:
        """Build from ``#rrggbb``; malformed text gives black unless ``strict``."""
        return cls(parse_hex(text) if strict else hex_to_rgb(text))

    @property
    def hex(self) -> HexColor:
        return rgb_to_hex(*self.value)

    def to_hsv(self) -> PercentageHSV:
        from .hsv import PercentageHSV
        return PercentageHSV(rgb_to_hsv(*self.value))


RGB = ColorRGB
