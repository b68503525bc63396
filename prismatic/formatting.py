"""24-bit ANSI terminal rendering of colors."""

import re

from .channels import U8
from .colors.color_base import ColorBase
from .colors.hsv import HSVColor
from .colors.spaces import LinearSpace

RESET = "\033[0m"
_ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def _srgb24(color: ColorBase):
    """8-bit sRGB red, green and blue of any color."""
    if isinstance(color, HSVColor):
        color = color.to_rgb()
    if color.space is LinearSpace:
        color = color.std_encode()
    return tuple(int(c) for c in color.conv(U8).tuple()[:3])


def ansi_fgcolor(color: ColorBase, text: str) -> str:
    r, g, b = _srgb24(color)
    return f"\033[38;2;{r};{g};{b}m{text}{RESET}"


def ansi_bgcolor(color: ColorBase, text: str) -> str:
    r, g, b = _srgb24(color)
    return f"\033[48;2;{r};{g};{b}m{text}{RESET}"


def visible_len(s: str) -> int:
    """Length of ``s`` without ANSI escape sequences."""
    return len(_ANSI_ESCAPE.sub('', s))
