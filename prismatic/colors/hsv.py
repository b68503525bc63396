from __future__ import annotations
from typing import Callable, ClassVar, Optional, Tuple, Type, TYPE_CHECKING

from ..channels import AngleDeg, Channel, F32
from .color_base import ColorBase, coerce_channel
from .spaces import LinearSpace, SRGBSpace

if TYPE_CHECKING:
    from .rgb import RGBColor


class HSVColor(ColorBase):
    """A HSV color.

    Specialized with the hue channel type, the saturation/value channel type
    and the color space: ``HSVColor[AngleDeg, F32, SRGBSpace]``.

    The color is normalized on creation:

    - if value is zero, black is stored (hue and saturation are zeroed);
    - if saturation is zero, hue is zeroed;
    - otherwise hue is wrapped into one turn and saturation/value are clamped.

    Saturation and value are clamped before these checks, so ``(-90, 2.0, -5.0)``
    is black.
    """

    __slots__ = ()

    num_channels: ClassVar[int] = 3
    channel_names: ClassVar[Tuple[str, ...]] = ('h', 's', 'v')
    param_names: ClassVar[Tuple[str, ...]] = ('hue_channel', 'channel', 'space')
    hue_channel: ClassVar[Type[Channel]]
    channel: ClassVar[Type[Channel]]
    # attached by .color
    to_rgb: Callable[..., "RGBColor"]
    rgb: Callable[..., "RGBColor"]
    from_base: Callable[..., "HSVColor"]

    def __init__(self, h, s, v) -> None:
        self._require_specialized()
        raw = (
            coerce_channel(self.hue_channel, h),
            coerce_channel(self.channel, s),
            coerce_channel(self.channel, v),
        )
        self._set(self._normalize_channels(raw))

    @classmethod
    def default(cls):
        """Black."""
        t0 = cls.channel.ch_zero()
        return cls._from_channels((cls.hue_channel.ch_zero(), t0, t0))

    @classmethod
    def _normalize_channels(cls, channels):
        h, s, v = channels
        s, v = s.clamp(), v.clamp()
        t0 = cls.channel.ch_zero()

        if v == t0:
            return (cls.hue_channel.ch_zero(), t0, t0)
        elif s == t0:
            return (cls.hue_channel.ch_zero(), t0, v)
        return (h.to_range(), s, v)

    def is_normal(self) -> bool:
        h, s, v = self._channels
        h0, t0 = self.hue_channel.ch_zero(), self.channel.ch_zero()

        if not (h.in_range() and s.in_range() and v.in_range()):
            return False
        elif v == t0:
            # color black
            return h == h0 and s == t0
        elif s == t0:
            # a grey color
            return h == h0
        return True

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def h(self) -> Channel:
        return self._channels[0]

    @property
    def s(self) -> Channel:
        return self._channels[1]

    @property
    def v(self) -> Channel:
        return self._channels[2]

    def conv(self, hue_channel: Optional[Type[Channel]] = None, channel: Optional[Type[Channel]] = None) -> HSVColor:
        """Rescale hue into ``hue_channel`` and saturation/value into ``channel``.

        Omitted types are kept. The result is not renormalized; narrowing to
        an integer channel can round a tiny value down to zero, call
        ``normalize()`` on the result if that matters.
        """
        hue_channel = hue_channel or self.hue_channel
        channel = channel or self.channel
        h, s, v = self._channels
        target = HSVColor[hue_channel, channel, self.space]
        return target._from_channels((h.conv(hue_channel), s.conv(channel), v.conv(channel)))

    def __str__(self) -> str:
        degrees = float(self.h.conv(AngleDeg))
        return f"{degrees:>5.1f}°,{self.s.fraction() * 100:>5.1f}%,{self.v.fraction() * 100:>5.1f}%"


StdHSVColor = HSVColor[AngleDeg, F32, SRGBSpace]
LinHSVColor = HSVColor[AngleDeg, F32, LinearSpace]

HSV = StdHSVColor
