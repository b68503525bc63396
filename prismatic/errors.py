class PrismaticError(Exception):
    """Base class for errors raised by prismatic."""


class HueSectorError(PrismaticError, AssertionError):
    """A hue fell outside the six hue sectors.

    Normalization wraps hue into a single turn, so this signals a broken
    internal invariant rather than bad user input.
    """

    def __init__(self, position: float) -> None:
        super().__init__(f"Invalid hue value: {position!r} is not within the sectors 0..6")
        self.position = position


class ColorParseError(PrismaticError, ValueError):
    """Text could not be parsed into a color."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Cannot parse color {text!r}: {reason}")
        self.text = text
        self.reason = reason
