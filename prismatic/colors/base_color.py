from enum import Enum
from typing import Tuple

from ..errors import ColorParseError


class BaseColor(Enum):
    """Named primary, secondary and grey colors, valued as sRGB (hue°, saturation, value)."""

    BLACK = (0.0, 0.0, 0.0)
    GREY = (0.0, 0.0, 0.5)
    WHITE = (0.0, 0.0, 1.0)
    RED = (0.0, 1.0, 1.0)
    YELLOW = (60.0, 1.0, 1.0)
    GREEN = (120.0, 1.0, 1.0)
    CYAN = (180.0, 1.0, 1.0)
    BLUE = (240.0, 1.0, 1.0)
    MAGENTA = (300.0, 1.0, 1.0)

    @property
    def hsv(self) -> Tuple[float, float, float]:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "BaseColor":
        key = str(name).strip().upper()
        if key == "GRAY":
            key = "GREY"
        try:
            return cls[key]
        except KeyError:
            raise ColorParseError(name, "unknown base color") from None
