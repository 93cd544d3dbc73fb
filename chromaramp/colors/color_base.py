from __future__ import annotations
from typing import Any, ClassVar, Iterator, Tuple, cast

from boundednumbers.functions import clamp

from ..conversions import convert, FormatType
from ..types.format_type import format_classes
from ..types.color_types import ColorSpace, Scalar, ScalarVector, HUE_SPACES
from ..utils import get_dimension, round_half_up


class ColorBase:
    __slots__ = ('_value',)  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace]
    maxima:     ClassVar[Tuple[Scalar, ...]]
    null_value: ClassVar[Tuple[Scalar, ...]]
    format_type: ClassVar[FormatType]
    _is_frozen: bool = False   # class-level default (instance gets its own slot)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ScalarVector | ColorBase) -> None:
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode == self.mode and value.format_type == self.format_type:
                value = value.value
            else:
                value = cast(ScalarVector, convert(
                    color=value.value,
                    from_space=value.mode,
                    to_space=self.mode,
                    input_type=value.format_type,
                    output_type=self.format_type,
                ))

        if get_dimension(value) != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.num_channels} channels, got {value!r}")

        # type enforcement, then clamp value
        cast_to = round_half_up if self.format_type == FormatType.INT else format_classes[self.format_type]
        value = tuple(
            cast_to(clamp(v, 0, m)) for v, m in zip(cast(Tuple[Any, ...], value), self.maxima)
        )

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Scalar, ...]:
        return self._value

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index: int) -> Scalar:
        return self._value[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColorBase):
            return (self.mode, self.format_type, self._value) == (other.mode, other.format_type, other._value)
        if isinstance(other, tuple):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.mode, self.format_type, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"
