from __future__ import annotations
from typing import Optional, Type

from ..channels import AngleDeg, Channel, F64
from ..conversions.hsv import hsv_to_unit_rgb, unit_rgb_to_hsv
from ..types.format_type import DEGREES_FULL_TURN
from .base_color import BaseColor
from .hsv import HSVColor
from .rgb import RGBAColor, RGBColor
from .spaces import LinearSpace, SRGBSpace


def rgb_to_hsv(
    self: RGBColor,
    hue_channel: Type[Channel] = AngleDeg,
    channel: Optional[Type[Channel]] = None,
) -> HSVColor:
    """
    Convert this color to HSV in the same color space.

    Args:
        hue_channel: Channel type of the hue. Defaults to degrees.
        channel: Channel type of saturation and value. Defaults to this color's channel.

    Returns:
        A normalized ``HSVColor[hue_channel, channel, space]``. Alpha is dropped.
    """
    channel = channel or self.channel
    r, g, b = (c.fraction() for c in self.tuple()[:3])
    h, s, v = unit_rgb_to_hsv(r, g, b)

    target = HSVColor[hue_channel, channel, self.space]
    return target(
        hue_channel.from_fraction(h / DEGREES_FULL_TURN),
        channel.from_fraction(s),
        channel.from_fraction(v),
    )


def hsv_to_rgb(self: HSVColor, channel: Optional[Type[Channel]] = None) -> RGBColor:
    """
    Convert this color to RGB in the same color space.

    The color is expected to be normalized, which construction guarantees.

    Args:
        channel: Channel type of the result. Defaults to this color's saturation/value channel.
    """
    channel = channel or self.channel
    degrees = float(self.h.conv(AngleDeg))
    r, g, b = hsv_to_unit_rgb(degrees, self.s.fraction(), self.v.fraction())

    target = RGBColor[channel, self.space]
    return target(channel.from_fraction(r), channel.from_fraction(g), channel.from_fraction(b))


def hsv_from_base(cls: Type[HSVColor], base_color: BaseColor) -> HSVColor:
    """Build a base color in this HSV type."""
    cls._require_specialized()
    if cls.space is SRGBSpace:
        h, s, v = base_color.hsv
        return cls(
            AngleDeg(h).conv(cls.hue_channel),
            F64(s).conv(cls.channel),
            F64(v).conv(cls.channel),
        )
    return rgb_from_base(RGBColor[F64, cls.space], base_color).to_hsv(cls.hue_channel, cls.channel)


def rgb_from_base(cls: Type[RGBColor], base_color: BaseColor) -> RGBColor:
    """Build a base color in this RGB type.

    Base colors are defined in sRGB; linear colors are their decoded form.
    """
    cls._require_specialized()
    srgb = HSVColor[AngleDeg, F64, SRGBSpace].from_base(base_color).to_rgb()
    if cls.space is LinearSpace:
        srgb = srgb.std_decode()
    elif cls.space is not SRGBSpace:
        raise TypeError(f"No base colors are defined for {cls.space.__name__}")

    color = srgb.conv(cls.channel)
    return color.with_alpha() if issubclass(cls, RGBAColor) else color


RGBColor.to_hsv = rgb_to_hsv
RGBColor.hsv = rgb_to_hsv
RGBColor.from_base = classmethod(rgb_from_base)
HSVColor.to_rgb = hsv_to_rgb
HSVColor.rgb = hsv_to_rgb
HSVColor.from_base = classmethod(hsv_from_base)
