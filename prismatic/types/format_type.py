import math
import numpy as np


# Full turns for the angle channels
DEGREES_FULL_TURN = 360.0
RADIANS_FULL_TURN = 2.0 * math.pi

# Hue-sector algorithm
HUE_SECTOR = 60.0
HUE_SECTORS = 6

# Maximum of the float-valued channels
UNIT_MAX = 1.0


def dtype_max(dtype: type) -> int:
    """Largest representable value of an unsigned integer dtype."""
    return int(np.iinfo(dtype).max)
