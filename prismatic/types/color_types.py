from __future__ import annotations
from typing import Union

Scalar = Union[int, float]


def is_nan(value: Scalar) -> bool:
    """NaN is the only value that does not compare equal to itself."""
    return value != value
