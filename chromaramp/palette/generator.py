from __future__ import annotations

import logging
import operator
import warnings
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union

import numpy as np

from ..colors.rgb import ColorRGB
from ..conversions import rgb_to_hsv, hsv_to_rgb, rgb_to_hex, np_hsv_to_rgb
from ..exceptions import InvalidAnchorError
from ..types.color_types import RGBTuple, HSVTuple, HexColor
from ..types.palette_types import PALETTE_SIZE, LAST_INDEX, LEFT_X, RIGHT_X, LEFT_Y, RIGHT_Y
from ..utils.num_utils import round_half_up
from .axes import linear_axis, weighted_axis
from .config import GenerationConfig, DEFAULT_CONFIG, curve_power_to_exponent

logger = logging.getLogger(__name__)

RGBInput = Union[ColorRGB, RGBTuple]


class EdgeAnchorWarning(UserWarning):
    """The anchor sits on an endpoint, so one side of the ramp is empty."""


def validate_anchor(anchor_index: object) -> int:
    if isinstance(anchor_index, bool):
        raise InvalidAnchorError(anchor_index, PALETTE_SIZE)
    try:
        index = operator.index(anchor_index)
    except TypeError:
        raise InvalidAnchorError(anchor_index, PALETTE_SIZE) from None
    if not 0 <= index <= LAST_INDEX:
        raise InvalidAnchorError(anchor_index, PALETTE_SIZE)
    return index


@dataclass(frozen=True)
class Palette:
    """
    One generated ramp: 9 hex codes plus the coordinates they came from.

    Iterating, indexing and ``len`` operate on the hex codes.
    """
    hex_codes: Tuple[HexColor, ...]
    hue: float
    saturations: Tuple[float, ...]
    values: Tuple[float, ...]
    anchor_index: int
    config: GenerationConfig = DEFAULT_CONFIG

    def __iter__(self) -> Iterator[HexColor]:
        return iter(self.hex_codes)

    def __len__(self) -> int:
        return len(self.hex_codes)

    def __getitem__(self, index: int) -> HexColor:
        return self.hex_codes[index]

    @property
    def anchor_hex(self) -> HexColor:
        return self.hex_codes[self.anchor_index]

    def hsv(self) -> List[HSVTuple]:
        return [(self.hue, s, v) for s, v in zip(self.saturations, self.values)]

    def rgb(self) -> List[RGBTuple]:
        return [hsv_to_rgb(h, s, v) for h, s, v in self.hsv()]

    def to_array(self) -> np.ndarray:
        """(9, 3) int64 array of RGB channels."""
        return np_hsv_to_rgb(np.array(self.hsv(), dtype=float))


class PaletteGenerator:
    """
    Builds 9-step hue-preserving ramps around an anchor color.

    Saturation runs linearly from 8% through the anchor to 98%; value runs
    from 95% through the anchor to 20% along a power curve. The hue of the
    anchor is used for every position.

    The configuration can be passed per call::

        >>> gen = PaletteGenerator()
        >>> gen.make_gradient((74, 144, 226), 4, GenerationConfig(value_exponent=2.0))[4]
        '#4b91e3'

    or set beforehand with the slider-style setters (``set_power2(200)``),
    which replace the generator's stored config.
    """

    left_x: float = LEFT_X
    right_x: float = RIGHT_X
    left_y: float = LEFT_Y
    right_y: float = RIGHT_Y

    def __init__(self, config: GenerationConfig = DEFAULT_CONFIG) -> None:
        self._config = config

    @property
    def config(self) -> GenerationConfig:
        return self._config

    @config.setter
    def config(self, config: GenerationConfig) -> None:
        self._config = config

    def set_power1(self, power: float) -> None:
        self._config = self._config.with_saturation_exponent(curve_power_to_exponent(power))

    def set_power2(self, power: float) -> None:
        self._config = self._config.with_value_exponent(curve_power_to_exponent(power))

    def generate(
        self,
        rgb: RGBInput,
        anchor_index: int,
        config: Optional[GenerationConfig] = None,
    ) -> Palette:
        anchor = validate_anchor(anchor_index)
        if config is None:
            config = self._config
        color = rgb if isinstance(rgb, ColorRGB) else ColorRGB(rgb)

        if anchor in (0, LAST_INDEX):
            warnings.warn(
                f"anchor index {anchor} is an endpoint; the ramp is interpolated from one side only",
                EdgeAnchorWarning,
                stacklevel=2,
            )

        h, s, v = rgb_to_hsv(*color.value)

        saturations = linear_axis(self.left_x, round_half_up(s), self.right_x, anchor)
        values = weighted_axis(
            self.left_y,
            round_half_up(v),
            self.right_y,
            anchor,
            config.value_exponent,
            config.interpolation,
        )

        hex_codes = tuple(
            rgb_to_hex(*hsv_to_rgb(h, x, y)) for x, y in zip(saturations, values)
        )
        logger.debug(
            "palette anchor=%d hue=%.2f exponent=%s mode=%s -> %s",
            anchor, h, config.value_exponent, config.interpolation.value, ", ".join(hex_codes),
        )
        return Palette(
            hex_codes=hex_codes,
            hue=h,
            saturations=tuple(saturations),
            values=tuple(values),
            anchor_index=anchor,
            config=config,
        )

    def make_gradient(
        self,
        rgb: RGBInput,
        anchor_index: int,
        config: Optional[GenerationConfig] = None,
    ) -> List[HexColor]:
        """Return the 9 ``#rrggbb`` codes for ``rgb`` pinned at ``anchor_index``."""
        return list(self.generate(rgb, anchor_index, config).hex_codes)
