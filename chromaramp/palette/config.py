from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, replace
from enum import Enum

from ..exceptions import InvalidConfigurationError
from ..types.palette_types import CURVE_POWER_MIN, CURVE_POWER_MAX, CURVE_POWER_SCALE


class InterpolationMode(str, Enum):
    """
    How value-axis steps are weighted to the right of the anchor.

    LEGACY:    position ``i`` steps by ``p ** (3 - (i - 5))``, i.e. the largest
               steps sit next to the anchor and shrink towards the right end.
    SYMMETRIC: step ``k`` (counted from the anchor) uses ``p ** (k - 1)``, the
               same orientation as the left side.
    """
    LEGACY = "legacy"
    SYMMETRIC = "symmetric"


def curve_power_to_exponent(power: float) -> float:
    """Map a 0-300 slider setting to an effective exponent (divide by 100)."""
    return power / CURVE_POWER_SCALE


def _check_exponent(name: str, value: float) -> None:
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        raise InvalidConfigurationError(f"{name} must be a real number, got {value!r}")
    if not math.isfinite(value) or value < 0:
        raise InvalidConfigurationError(f"{name} must be finite and >= 0, got {value!r}")


@dataclass(frozen=True)
class GenerationConfig:
    """
    Immutable shaping parameters for one palette generation.

    ``saturation_exponent`` is carried for parity with the value axis; the
    saturation axis itself is always linear.
    """
    saturation_exponent: float = 2.0
    value_exponent: float = 2.0
    interpolation: InterpolationMode = InterpolationMode.LEGACY

    def __post_init__(self) -> None:
        _check_exponent("saturation_exponent", self.saturation_exponent)
        _check_exponent("value_exponent", self.value_exponent)
        object.__setattr__(self, "interpolation", InterpolationMode(self.interpolation))

    @classmethod
    def from_curve_power(
        cls,
        value_power: float,
        saturation_power: float = 200,
        interpolation: InterpolationMode = InterpolationMode.LEGACY,
    ) -> GenerationConfig:
        """Build from the user-facing 0-300 curve power settings."""
        for name, power in (("value_power", value_power), ("saturation_power", saturation_power)):
            if not CURVE_POWER_MIN <= power <= CURVE_POWER_MAX:
                raise InvalidConfigurationError(
                    f"{name} must be within [{CURVE_POWER_MIN}, {CURVE_POWER_MAX}], got {power!r}"
                )
        return cls(
            saturation_exponent=curve_power_to_exponent(saturation_power),
            value_exponent=curve_power_to_exponent(value_power),
            interpolation=interpolation,
        )

    def with_value_exponent(self, exponent: float) -> GenerationConfig:
        return replace(self, value_exponent=exponent)

    def with_saturation_exponent(self, exponent: float) -> GenerationConfig:
        return replace(self, saturation_exponent=exponent)


DEFAULT_CONFIG = GenerationConfig()
