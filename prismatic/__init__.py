"""Prismatic: color channels and RGB/HSV conversion."""

from .channels import (
    Channel,
    U8,
    U16,
    U32,
    F32,
    F64,
    Angle,
    AngleDeg,
    AngleRad,
)
from .colors import (
    ColorBase,
    ColorSpace,
    SRGBSpace,
    LinearSpace,
    RGBColor,
    RGBAColor,
    HSVColor,
    SRGB24Color,
    SRGB48Color,
    SRGBColor,
    SRGBAColor,
    LinRGB48Color,
    LinRGBColor,
    StdHSVColor,
    LinHSVColor,
    BaseColor,
)
from .conversions import (
    hsv_to_unit_rgb,
    unit_rgb_to_hsv,
    srgb_to_linear,
    linear_to_srgb,
)
from .errors import PrismaticError, HueSectorError, ColorParseError
from .formatting import ansi_bgcolor, ansi_fgcolor

__version__ = "0.1.0"

__all__ = [
    # channels
    "Channel",
    "U8",
    "U16",
    "U32",
    "F32",
    "F64",
    "Angle",
    "AngleDeg",
    "AngleRad",
    # colors
    "ColorBase",
    "ColorSpace",
    "SRGBSpace",
    "LinearSpace",
    "RGBColor",
    "RGBAColor",
    "HSVColor",
    "SRGB24Color",
    "SRGB48Color",
    "SRGBColor",
    "SRGBAColor",
    "LinRGB48Color",
    "LinRGBColor",
    "StdHSVColor",
    "LinHSVColor",
    "BaseColor",
    # conversions
    "hsv_to_unit_rgb",
    "unit_rgb_to_hsv",
    "srgb_to_linear",
    "linear_to_srgb",
    # errors
    "PrismaticError",
    "HueSectorError",
    "ColorParseError",
    # formatting
    "ansi_bgcolor",
    "ansi_fgcolor",
    "__version__",
]
