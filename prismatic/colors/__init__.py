"""
Prismatic Color Classes
=======================

Immutable RGB and HSV colors, generic over channel type and color space.

A generic class is specialized by indexing it with channel types and a
space marker; specializations are cached, so the same parameters always
give the same class.

Usage
-----
>>> from prismatic.channels import U8, F32, AngleDeg
>>> from prismatic.colors import RGBColor, HSVColor, SRGBSpace
>>>
>>> rgb = RGBColor[U8, SRGBSpace](128, 255, 55)
>>> hsv = rgb.conv(F32).to_hsv()
>>> hsv.to_rgb().conv(U8) == rgb
True
>>> HSVColor[AngleDeg, F32, SRGBSpace](-90.0, 2.0, 0.5).tuple()
(AngleDeg(270.0), F32(1.0), F32(0.5))

Color Classes
-------------
    - RGBColor[T, S]: red, green, blue
    - RGBAColor[T, S]: red, green, blue, alpha
    - HSVColor[H, T, S]: hue, saturation, value

Aliases
-------
    - SRGB24Color, SRGB48Color, SRGBColor, SRGBAColor
    - LinRGB48Color, LinRGBColor
    - StdHSVColor, LinHSVColor

Notes
-----
- Construction clamps RGB channels and normalizes HSV channels
- ``conv`` rescales channel types without renormalizing
- Crossing color spaces needs ``std_decode`` / ``std_encode``
"""

from .color_base import ColorBase
from .spaces import ColorSpace, SRGBSpace, LinearSpace
from .rgb import (
    RGBColor,
    RGBAColor,
    SRGB24Color,
    SRGB48Color,
    SRGBColor,
    SRGBAColor,
    LinRGB48Color,
    LinRGBColor,
    RGB,
    RGBA,
    rgb_class,
)
from .hsv import HSVColor, StdHSVColor, LinHSVColor, HSV
from .base_color import BaseColor
from .color import rgb_to_hsv, hsv_to_rgb

__all__ = [
    'ColorBase',
    'ColorSpace',
    'SRGBSpace',
    'LinearSpace',
    'RGBColor',
    'RGBAColor',
    'HSVColor',
    'SRGB24Color',
    'SRGB48Color',
    'SRGBColor',
    'SRGBAColor',
    'LinRGB48Color',
    'LinRGBColor',
    'StdHSVColor',
    'LinHSVColor',
    'RGB',
    'RGBA',
    'HSV',
    'BaseColor',
    'rgb_class',
    'rgb_to_hsv',
    'hsv_to_rgb',
]
