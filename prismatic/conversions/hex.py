"""Hexadecimal encoding of 8-bit channel values."""

import re
from typing import Iterable, Tuple

from ..errors import ColorParseError

_HEX_RE = re.compile(r"[0-9A-Fa-f]+")


def parse_hex(text: str) -> Tuple[int, ...]:
    """Parse ``RGB``, ``RGBA``, ``RRGGBB`` or ``RRGGBBAA`` (optional ``#``) into 8-bit values.

    Shorthand digits are doubled, so ``'F80'`` is ``(255, 136, 0)``.
    """
    if not isinstance(text, str):
        raise ColorParseError(repr(text), "expected a string")
    digits = text.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    if not _HEX_RE.fullmatch(digits):
        raise ColorParseError(text, "expected hexadecimal digits")

    if len(digits) in (3, 4):
        digits = "".join(d * 2 for d in digits)
    if len(digits) not in (6, 8):
        raise ColorParseError(text, f"expected 3, 4, 6 or 8 digits, got {len(digits)}")

    return tuple(int(digits[i:i + 2], 16) for i in range(0, len(digits), 2))


def format_hex(values: Iterable[int], upper: bool = True) -> str:
    """Two hex digits per 8-bit value."""
    code = "".join(f"{int(v):02X}" for v in values)
    return code if upper else code.lower()
