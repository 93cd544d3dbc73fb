from __future__ import annotations
from typing import ClassVar, Tuple

from ..conversions import hsv_to_rgb
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase
from .rgb import ColorRGB


class PercentageHSV(ColorBase):
    """Immutable HSV: hue in degrees, saturation and value in percent."""

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace] = "hsv"
    maxima:     ClassVar[Tuple[float, float, float]] = (360.0, 100.0, 100.0)
    null_value: ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    format_type: ClassVar[FormatType] = FormatType.PERCENTAGE

    @property
    def hue(self) -> float:
        return self.value[0]

    @property
    def saturation(self) -> float:
        return self.value[1]

    @property
    def brightness(self) -> float:
        return self.value[2]

    def to_rgb(self) -> ColorRGB:
        return ColorRGB(hsv_to_rgb(*self.value))


HSV = PercentageHSV
