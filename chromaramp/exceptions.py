"""Error kinds raised by chromaramp.

Every error derives from ``ValueError`` so callers that already guard
conversions with ``except ValueError`` keep working.
"""


class PaletteError(ValueError):
    """Base class for palette generation errors."""


class InvalidAnchorError(PaletteError):
    """Anchor index is not an integer in ``[0, 8]``."""

    def __init__(self, anchor_index: object, size: int = 9) -> None:
        self.anchor_index = anchor_index
        super().__init__(
            f"anchor index must be an int in [0, {size - 1}], got {anchor_index!r}"
        )


class InvalidConfigurationError(PaletteError):
    """A shaping exponent or curve power cannot produce a defined ramp."""


class HexParseError(PaletteError):
    """Raised by the strict hex parser when the text is not ``#rrggbb``."""

    def __init__(self, text: object) -> None:
        self.text = text
        super().__init__(f"expected 6 hex digits with optional '#', got {text!r}")
