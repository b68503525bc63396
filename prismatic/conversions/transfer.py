"""sRGB transfer curve (IEC 61966-2-1), used to cross between sRGB and linear RGB."""

# Transfer curve constants
SRGB_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_DIVISOR = 1.055
SRGB_GAMMA = 2.4
SRGB_TO_LINEAR_TH = 0.04045
LINEAR_TO_SRGB_TH = 0.0031308


def srgb_to_linear(c: float) -> float:
    """Convert nonlinear sRGB (0..1) to linear-light RGB."""
    if c <= SRGB_TO_LINEAR_TH:
        return c / SRGB_SLOPE
    return ((c + SRGB_OFFSET) / SRGB_DIVISOR) ** SRGB_GAMMA


def linear_to_srgb(c: float) -> float:
    """Convert linear-light RGB (0..1) to nonlinear sRGB."""
    if c <= LINEAR_TO_SRGB_TH:
        return SRGB_SLOPE * c
    return SRGB_DIVISOR * (c ** (1 / SRGB_GAMMA)) - SRGB_OFFSET
