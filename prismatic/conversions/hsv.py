"""
Scalar RGB ↔ HSV algorithms.

Both functions work on plain floats: RGB components and saturation/value
are fractions in ``[0, 1]``, hue is in degrees. The color classes rescale
their channels into fractions before calling in here.
"""

import math
from typing import Tuple

from ..errors import HueSectorError
from ..types.format_type import DEGREES_FULL_TURN, HUE_SECTOR, HUE_SECTORS


def sector_components(position: float, c: float, x: float) -> Tuple[float, float, float]:
    """Assign chroma ``c`` and secondary chroma ``x`` to (r, g, b) by hue sector.

    ``position`` is the hue divided by the sector width, in ``[0, 6]``; 6 is
    only reachable through rounding at a full turn and shares sector 5.
    Anything else means hue was never wrapped and raises ``HueSectorError``.
    """
    if not math.isfinite(position):
        raise HueSectorError(position)

    sector = math.floor(position)
    if sector == 0:
        return c, x, 0.0
    elif sector == 1:
        return x, c, 0.0
    elif sector == 2:
        return 0.0, c, x
    elif sector == 3:
        return 0.0, x, c
    elif sector == 4:
        return x, 0.0, c
    elif sector in (5, 6):
        return c, 0.0, x
    raise HueSectorError(position)


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """Hue-sector HSV to RGB.

    Args:
        h: Hue in degrees, [0, 360]
        s: Saturation, [0, 1]
        v: Value, [0, 1]

    Returns:
        (r, g, b) fractions in [0, 1]
    """
    position = h / HUE_SECTOR

    # largest, second largest and the smallest component
    c = s * v
    x = c * (1.0 - abs(position % 2.0 - 1.0))
    m = v - c

    r, g, b = sector_components(position, c, x)
    return r + m, g + m, b + m


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """RGB fractions to (hue in degrees [0, 360), saturation, value)."""
    v = max(r, g, b)
    chroma = v - min(r, g, b)
    s = chroma / v if v > 0 else 0.0

    if chroma == 0:
        h = 0.0
    elif v == r:
        h = HUE_SECTOR * (((g - b) / chroma) % HUE_SECTORS)
    elif v == g:
        h = HUE_SECTOR * ((b - r) / chroma + 2.0)
    else:
        h = HUE_SECTOR * ((r - g) / chroma + 4.0)

    return h % DEGREES_FULL_TURN, s, v
