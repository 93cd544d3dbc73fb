from __future__ import annotations

import os
from typing import Optional

from ..conversions import hex_to_rgb
from ..exceptions import InvalidConfigurationError
from ..types.color_types import RGBTuple, HexColor
from ..types.palette_types import CURVE_POWER_MIN, CURVE_POWER_MAX
from .config import GenerationConfig, InterpolationMode
from .export import join_hex, write_css
from .generator import Palette, PaletteGenerator, validate_anchor

DEFAULT_BRAND_COLOR = "#4a90e2"
DEFAULT_ANCHOR = 4
DEFAULT_CURVE_POWER = 200


class PalettePicker:
    """
    Headless state of the interactive picker: brand color, anchor, curve power.

    Changing a control only updates state; ``generate`` rebuilds the palette.
    An initial palette is generated on construction.
    """

    def __init__(
        self,
        generator: Optional[PaletteGenerator] = None,
        brand_color: HexColor = DEFAULT_BRAND_COLOR,
        anchor_index: int = DEFAULT_ANCHOR,
        curve_power: int = DEFAULT_CURVE_POWER,
        interpolation: InterpolationMode = InterpolationMode.LEGACY,
    ) -> None:
        self.generator = generator if generator is not None else PaletteGenerator()
        self.interpolation = InterpolationMode(interpolation)
        self.color_input: str = brand_color
        self.brand_color: RGBTuple = hex_to_rgb(brand_color)
        self.anchor_index: int = validate_anchor(anchor_index)
        self.curve_power: int = DEFAULT_CURVE_POWER
        self.set_curve_power(curve_power)
        self.palette: Palette = self.generate()

    @property
    def config(self) -> GenerationConfig:
        return GenerationConfig.from_curve_power(self.curve_power, interpolation=self.interpolation)

    def set_color_input(self, text: str) -> None:
        """Typed or picked color text; malformed text selects black."""
        self.color_input = text
        self.brand_color = hex_to_rgb(text)

    def select_swatch(self, index: int) -> None:
        """Take a displayed swatch as the new brand color, pinned at its position."""
        index = validate_anchor(index)
        color = self.palette[index]
        self.brand_color = hex_to_rgb(color)
        self.anchor_index = index
        self.color_input = color

    def set_curve_power(self, power: int) -> None:
        if not CURVE_POWER_MIN <= power <= CURVE_POWER_MAX:
            raise InvalidConfigurationError(
                f"curve power must be within [{CURVE_POWER_MIN}, {CURVE_POWER_MAX}], got {power!r}"
            )
        self.curve_power = power

    def generate(self) -> Palette:
        self.palette = self.generator.generate(self.brand_color, self.anchor_index, self.config)
        return self.palette

    def copy_swatch(self, index: int) -> HexColor:
        return self.palette[validate_anchor(index)]

    def copy_all(self) -> str:
        return join_hex(self.palette)

    def export_css(self, directory: str | os.PathLike = ".") -> str:
        return write_css(self.palette, directory)
