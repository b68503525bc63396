"""
Prismatic Scalar Conversions
============================

Plain-float algorithms the color classes are built on.

RGB ↔ HSV:
    hsv_to_unit_rgb(h, s, v)
        Hue-sector HSV (hue in degrees) to RGB fractions
    unit_rgb_to_hsv(r, g, b)
        RGB fractions to HSV (hue in degrees)
    sector_components(position, c, x)
        Chroma assignment for one hue sector

sRGB ↔ Linear RGB:
    srgb_to_linear(c)
    linear_to_srgb(c)

Hexadecimal:
    parse_hex(text)
        '#RRGGBB' style strings to 8-bit values
    format_hex(values, upper=True)
        8-bit values to hex digits

Examples
--------
>>> from prismatic.conversions import unit_rgb_to_hsv, hsv_to_unit_rgb
>>> unit_rgb_to_hsv(1.0, 0.5, 0.0)
(30.0, 1.0, 1.0)
>>> hsv_to_unit_rgb(30.0, 1.0, 1.0)
(1.0, 0.5, 0.0)
"""

from .hsv import hsv_to_unit_rgb, unit_rgb_to_hsv, sector_components
from .transfer import srgb_to_linear, linear_to_srgb
from .hex import parse_hex, format_hex

__all__ = [
    # RGB ↔ HSV
    'hsv_to_unit_rgb',
    'unit_rgb_to_hsv',
    'sector_components',

    # sRGB ↔ Linear RGB
    'srgb_to_linear',
    'linear_to_srgb',

    # Hexadecimal
    'parse_hex',
    'format_hex',
]
