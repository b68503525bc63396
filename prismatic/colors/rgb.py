from __future__ import annotations
from typing import Callable, ClassVar, Tuple, Type, TYPE_CHECKING

from ..channels import Channel, F32, U8, U16
from ..conversions.hex import format_hex, parse_hex
from ..conversions.transfer import linear_to_srgb, srgb_to_linear
from ..errors import ColorParseError
from .color_base import ColorBase, coerce_channel
from .spaces import LinearSpace, SRGBSpace

if TYPE_CHECKING:
    from .hsv import HSVColor


class RGBColor(ColorBase):
    """Red, green and blue channels of one type, tagged with a color space.

    Specialize with the channel type and space: ``RGBColor[U8, SRGBSpace]``.
    Components are clamped into the channel's range on construction.
    """

    __slots__ = ()

    num_channels: ClassVar[int] = 3
    channel_names: ClassVar[Tuple[str, ...]] = ('r', 'g', 'b')
    param_names: ClassVar[Tuple[str, ...]] = ('channel', 'space')
    channel: ClassVar[Type[Channel]]
    # attached by .color
    to_hsv: Callable[..., "HSVColor"]
    hsv: Callable[..., "HSVColor"]
    from_base: Callable[..., "RGBColor"]

    def __init__(self, r, g, b) -> None:
        self._require_specialized()
        ch = self.channel
        self._set(self._normalize_channels(tuple(coerce_channel(ch, v) for v in (r, g, b))))

    @classmethod
    def _normalize_channels(cls, channels):
        return tuple(c.clamp() for c in channels)

    def is_normal(self) -> bool:
        return all(c.in_range() for c in self._channels)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def r(self) -> Channel:
        return self._channels[0]

    @property
    def g(self) -> Channel:
        return self._channels[1]

    @property
    def b(self) -> Channel:
        return self._channels[2]

    @property
    def has_alpha(self) -> bool:
        return False

    # ------------------ CONVERSIONS ------------------
    def conv(self, channel: Type[Channel]) -> RGBColor:
        """Rescale every channel into ``channel``, keeping the color space."""
        target = self.generic[channel, self.space]
        return target._from_channels(tuple(c.conv(channel) for c in self._channels))

    def _transfer(self, space, curve: Callable[[float], float]) -> RGBColor:
        ch = self.channel
        rgb = tuple(ch.from_fraction(curve(c.fraction())) for c in self._channels[:3])
        target = self.generic[ch, space]
        return target._from_channels(rgb + self._channels[3:])

    def std_decode(self) -> RGBColor:
        """Decode sRGB into linear light with the standard sRGB curve. Alpha is kept as is."""
        if self.space is not SRGBSpace:
            raise TypeError(f"std_decode expects an sRGB color, got {type(self).__name__}")
        return self._transfer(LinearSpace, srgb_to_linear)

    def std_encode(self) -> RGBColor:
        """Encode linear light into sRGB with the standard sRGB curve."""
        if self.space is not LinearSpace:
            raise TypeError(f"std_encode expects a linear color, got {type(self).__name__}")
        return self._transfer(SRGBSpace, linear_to_srgb)

    def with_alpha(self, alpha=None) -> RGBAColor:
        """Return an RGBA color with the given alpha, fully opaque by default."""
        r, g, b = self._channels
        return RGBAColor[self.channel, self.space](r, g, b, alpha)

    # ------------------ HEX ------------------
    def to_hex(self, upper: bool = True) -> str:
        """Hex digits of the 8-bit rendition of this color."""
        return format_hex(self.conv(U8).tuple(), upper)

    @classmethod
    def from_hex(cls, text: str):
        """Parse ``'#RRGGBB'`` (or the 3-digit shorthand) into this color type."""
        cls._require_specialized()
        values = parse_hex(text)
        if len(values) > cls.num_channels:
            raise ColorParseError(text, f"{cls.__name__} has no alpha channel")
        return cls.generic[U8, cls.space](*values).conv(cls.channel)

    def __format__(self, spec: str) -> str:
        if spec == "X":
            return self.to_hex()
        if spec == "x":
            return self.to_hex(upper=False)
        if spec == "":
            return str(self)
        raise ValueError(f"Unknown format code {spec!r} for {type(self).__name__}")

    def __str__(self) -> str:
        return f"#{self.to_hex()}"


class RGBAColor(RGBColor):
    """RGB with an alpha channel of the same type, stored last."""

    __slots__ = ()

    num_channels: ClassVar[int] = 4
    channel_names: ClassVar[Tuple[str, ...]] = ('r', 'g', 'b', 'a')

    def __init__(self, r, g, b, a=None) -> None:
        self._require_specialized()
        ch = self.channel
        alpha = ch.ch_max() if a is None else a
        self._set(self._normalize_channels(tuple(coerce_channel(ch, v) for v in (r, g, b, alpha))))

    @property
    def a(self) -> Channel:
        return self._channels[3]

    @property
    def has_alpha(self) -> bool:
        return True

    def with_alpha(self, alpha=None) -> RGBAColor:
        """Return a copy with alpha replaced, fully opaque by default."""
        r, g, b, _ = self._channels
        return type(self)(r, g, b, alpha)

    def without_alpha(self) -> RGBColor:
        return RGBColor[self.channel, self.space]._from_channels(self._channels[:3])


SRGB24Color = RGBColor[U8, SRGBSpace]
SRGB48Color = RGBColor[U16, SRGBSpace]
SRGBColor = RGBColor[F32, SRGBSpace]
SRGBAColor = RGBAColor[F32, SRGBSpace]
LinRGB48Color = RGBColor[U16, LinearSpace]
LinRGBColor = RGBColor[F32, LinearSpace]

RGB = SRGB24Color
RGBA = RGBAColor[U8, SRGBSpace]


def rgb_class(channel: Type[Channel], space=SRGBSpace, alpha: bool = False) -> type:
    """Look up the specialized RGB class for ``channel`` and ``space``."""
    return (RGBAColor if alpha else RGBColor)[channel, space]
