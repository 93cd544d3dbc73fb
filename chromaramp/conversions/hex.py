import re
from typing import Optional

from boundednumbers.functions import clamp

from ..exceptions import HexParseError
from ..types.color_types import RGBTuple, HexColor
from ..types.format_type import max_non_hue, FormatType
from ..utils.num_utils import round_half_up

HEX_PATTERN = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)

BLACK: RGBTuple = (0, 0, 0)

_RGB_MAX = max_non_hue[FormatType.INT]


def _channel(value: float) -> int:
    return int(clamp(round_half_up(value), 0, _RGB_MAX))


def rgb_to_hex(r: float, g: float, b: float) -> HexColor:
    """
    Format RGB channels as lowercase ``#rrggbb``.

    Channels are rounded half-up and clamped to [0, 255].

    >>> rgb_to_hex(74, 144, 226)
    '#4a90e2'
    """
    return f"#{_channel(r):02x}{_channel(g):02x}{_channel(b):02x}"


def _match(text: object) -> Optional[re.Match]:
    if not isinstance(text, str):
        return None
    return HEX_PATTERN.fullmatch(text)


def is_hex_color(text: object) -> bool:
    """True for 6 hex digits with an optional leading ``#`` (any case)."""
    return _match(text) is not None


def parse_hex(text: str) -> RGBTuple:
    """Strict hex parsing: raises HexParseError instead of falling back to black."""
    match = _match(text)
    if match is None:
        raise HexParseError(text)
    r, g, b = (int(group, 16) for group in match.groups())
    return r, g, b


def hex_to_rgb(text: str) -> RGBTuple:
    """
    Parse ``#rrggbb`` / ``rrggbb`` (case-insensitive).

    Anything that does not match yields black ``(0, 0, 0)``; use
    parse_hex to tell a failed parse apart from a real black.
    """
    try:
        return parse_hex(text)
    except HexParseError:
        return BLACK
