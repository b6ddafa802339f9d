from __future__ import annotations
from numbers import Real
from typing import Any, Callable, ClassVar, List, Optional, Self, Tuple, cast
from abc import ABC

from ..conversions import convert, channels_to_packed, packed_to_channels
from ..conversions.numbers import wrap_hue
from ..types.channel_format import PACKED_BLACK, PACKED_WHITE
from ..types.color_types import ColorSpace, HUE_SPACES, ALPHA_SPACES, Scalar, ScalarVector
from ..utils import get_dimension


class ColorBase:
    __slots__ = ('_value',)  # prevents adding new attributes → immutability

    num_channels:  ClassVar[int] = 1
    mode:          ClassVar[ColorSpace]
    _type:         ClassVar[type]
    channel_names: ClassVar[Tuple[str, ...]]
    maxima:        ClassVar[Tuple[Scalar, ...]]
    _is_frozen: bool = False   # class-level default (instance gets its own slot)

    # injected by .color and .derived
    convert:       Callable[..., ColorBase]
    lighten:       Callable[..., Self]
    darken:        Callable[..., Self]
    shades:        Callable[..., List[Self]]
    tints:         Callable[..., List[Self]]
    complementary: Callable[..., Self]
    triadic:       Callable[..., Tuple[Self, Self]]
    tetradic:      Callable[..., Tuple[Self, Self, Self]]
    analogous:     Callable[..., Tuple[Self, Self]]
    is_dark:       Callable[..., bool]
    luminance:     Callable[..., float]
    contrasting:   Callable[..., ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(self, *value: Any) -> None:
        # Accept ColorRGB(1, 2, 3), ColorRGB((1, 2, 3)) and ColorRGB(other_color)
        if len(value) == 1 and isinstance(value[0], (ColorBase, tuple, list)):
            value = value[0]

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            value = convert(value.channels, value.mode, self.mode)

        value = tuple(cast(Tuple[Any, ...], value))
        if get_dimension(value) != self.num_channels:
            raise ValueError(
                f"{self.mode} expects {self.num_channels} channels {self.channel_names}, got {len(value)}"
            )

        # safe assignment; __setattr__ still allows it during init
        self._value = self._coerce(value)

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    def _coerce(self, value: Tuple[Any, ...]) -> Tuple[Any, ...]:
        """Enforce channel types and clamp every channel to its range (hue wraps)."""
        coerced = []
        for index, (v, m) in enumerate(zip(value, self.maxima)):
            if isinstance(v, bool) or not isinstance(v, Real):
                raise TypeError(
                    f"{self.mode} channel {self.channel_names[index]!r} must be a number, got {type(v).__name__}"
                )
            v = self._type(v)
            if index == 0 and self.has_hue:
                v = wrap_hue(v)
            else:
                v = max(self._type(0), min(v, m))
            coerced.append(v)
        return tuple(coerced)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def channels(self) -> Tuple[Any, ...]:
        return self._value

    def to_tuple(self) -> Tuple[Any, ...]:
        return tuple(self._value)

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return self.mode in ALPHA_SPACES

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    # ------------------ PACKED FORM ------------------
    def to_packed(self) -> int:
        """Return the color as an unsigned 32-bit ``0xAARRGGBB`` int."""
        return channels_to_packed(self._value, self.mode)

    @classmethod
    def from_packed(cls, packed: int) -> Self:
        """Build an instance from a packed color int (signed ints are accepted)."""
        return cls(packed_to_channels(packed, cls.mode))

    @classmethod
    def white(cls) -> Self:
        return cls.from_packed(PACKED_WHITE)

    @classmethod
    def black(cls) -> Self:
        return cls.from_packed(PACKED_BLACK)

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == cast(ColorBase, other)._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __iter__(self):
        return iter(self._value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(repr(v) for v in self._value)})"

    def __str__(self) -> str:
        return " / ".join(str(v) for v in self._value)


def channel_property(index: int, doc: Optional[str] = None) -> property:
    """Read-only named accessor for one channel of ``ColorBase._value``."""
    def getter(self: ColorBase) -> Any:
        return self._value[index]
    return property(getter, doc=doc)


def format_unit_channels(values: ScalarVector, hue: bool = False) -> str:
    """Locale-independent ``"339.61º / 0.82 / 0.52"`` style display."""
    parts = [f"{float(v):.2f}" for v in values]
    if hue:
        parts[0] += "º"
    return " / ".join(parts)


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Subclasses set ``alpha_index`` to the position of alpha in their channels.
    """

    # Tell static checkers these come from the real subclass (ColorBase)
    num_channels: ClassVar[int]
    maxima: ClassVar[Tuple[Scalar, ...]]
    mode: ClassVar[ColorSpace]
    channels: Tuple[Any, ...]

    alpha_index: ClassVar[int] = -1
    alpha_max:   ClassVar[Scalar]

    @property
    def alpha(self) -> Scalar:
        """Get alpha channel value."""
        return self.channels[self.alpha_index]

    def with_alpha(self, alpha: Scalar) -> Self:
        """
        Return a new instance with modified alpha channel.

        Args:
            alpha: New alpha value, clamped to ``[0, alpha_max]``.

        Returns:
            New color instance with updated alpha.
        """
        a = max(0, min(alpha, self.alpha_max))
        values = list(self.channels)
        values[self.alpha_index] = a
        return self.__class__(tuple(values))  # type: ignore
