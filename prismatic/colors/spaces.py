"""
Color space markers.

A space is never instantiated and never stored on a color instance: it is a
class-level parameter of the specialized color classes, so
``RGBColor[F32, SRGBSpace]`` and ``RGBColor[F32, LinearSpace]`` are different
types and moving between them needs an explicit transform
(``std_decode`` / ``std_encode``).
"""

from typing import ClassVar


class ColorSpace:
    __slots__ = ()

    name: ClassVar[str]

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} is a marker type and cannot be instantiated")


class SRGBSpace(ColorSpace):
    """Gamma-encoded, display-referred sRGB."""
    __slots__ = ()
    name: ClassVar[str] = "srgb"


class LinearSpace(ColorSpace):
    """Linear-light RGB with sRGB primaries."""
    __slots__ = ()
    name: ClassVar[str] = "linear"


def is_space(value) -> bool:
    return isinstance(value, type) and issubclass(value, ColorSpace) and value is not ColorSpace
