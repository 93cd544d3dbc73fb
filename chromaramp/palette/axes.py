"""
Axis interpolation for the 9-position ramp.

Both axes start from ``[left, 0, ..., 0, right]``, get the anchor's own
coordinate written at ``anchor``, then fill the slots between the anchor and
each endpoint. Every step rounds the running value (half-up), so rounding
error accumulates along the axis rather than being corrected per slot.
"""
from __future__ import annotations

from typing import List

from ..exceptions import InvalidConfigurationError
from ..types.palette_types import LAST_INDEX, PALETTE_SIZE
from ..utils.num_utils import round_half_up
from .config import InterpolationMode

AxisArray = List[float]


def reset_axis(left: float, right: float) -> AxisArray:
    axis: AxisArray = [0] * PALETTE_SIZE
    axis[0] = left
    axis[LAST_INDEX] = right
    return axis


def calculate_increments(span: int, power: float) -> float:
    """Sum of ``power ** (i - 1)`` for ``i`` in ``1..span``; 0 for an empty span."""
    return sum(power ** (i - 1) for i in range(1, span + 1))


def _anchored_axis(left: float, anchor_value: float, right: float, anchor: int) -> AxisArray:
    axis = reset_axis(left, right)
    axis[anchor] = anchor_value
    return axis


def linear_axis(left: float, anchor_value: float, right: float, anchor: int) -> AxisArray:
    """
    Equal steps from ``left`` to the anchor and from the anchor to ``right``.

    >>> linear_axis(8, 67, 98, 4)
    [8, 23, 38, 53, 67, 75, 83, 91, 98]
    """
    axis = _anchored_axis(left, anchor_value, right, anchor)

    if anchor > 0:
        increment = (axis[anchor] - axis[0]) / anchor
        for i in range(1, anchor):
            axis[i] = round_half_up(axis[i - 1] + increment)

    if anchor < LAST_INDEX:
        increment = (axis[LAST_INDEX] - axis[anchor]) / (LAST_INDEX - anchor)
        for i in range(anchor + 1, LAST_INDEX):
            axis[i] = round_half_up(axis[i - 1] + increment)

    return axis


def _normalized_step(span_delta: float, span: int, power: float) -> float:
    total = calculate_increments(span, power)
    if total == 0:
        raise InvalidConfigurationError(
            f"exponent {power!r} gives a zero normalization over {span} steps"
        )
    return span_delta / total


def right_step_exponent(position: int, anchor: int, mode: InterpolationMode) -> int:
    if InterpolationMode(mode) is InterpolationMode.SYMMETRIC:
        return position - anchor - 1
    return 3 - (position - 5)


def weighted_axis(
    left: float,
    anchor_value: float,
    right: float,
    anchor: int,
    power: float,
    mode: InterpolationMode = InterpolationMode.LEGACY,
) -> AxisArray:
    """
    Power-weighted steps, used for the value axis.

    Left of the anchor, step ``i`` (1-indexed from position 0) has size
    ``base * power ** (i - 1)`` where ``base`` normalizes the weights so the
    unrounded steps cover exactly ``axis[0] - axis[anchor]``. The right side
    uses the same normalization over ``8 - anchor`` steps with the exponent
    chosen by ``mode``.

    Raises:
        InvalidConfigurationError: if the weights over a non-empty side sum to 0
    """
    axis = _anchored_axis(left, anchor_value, right, anchor)

    if anchor > 0:
        step = _normalized_step(axis[0] - axis[anchor], anchor, power)
        for i in range(1, anchor):
            axis[i] = round_half_up(axis[i - 1] - step * power ** (i - 1))

    if anchor < LAST_INDEX:
        step = _normalized_step(axis[anchor] - axis[LAST_INDEX], LAST_INDEX - anchor, power)
        for i in range(anchor + 1, LAST_INDEX):
            axis[i] = round_half_up(
                axis[i - 1] - step * power ** right_step_exponent(i, anchor, mode)
            )

    return axis
