"""Angular channels used for hue."""

from __future__ import annotations
import math
import warnings
from typing import ClassVar

import numpy as np
from boundednumbers import BoundType

from ..types.format_type import DEGREES_FULL_TURN, RADIANS_FULL_TURN
from .channel import FloatChannel


class Angle(FloatChannel):
    """A float channel whose maximum is one full turn.

    Rescaling between angle units and plain channels goes through ``conv``
    like any other channel. ``to_range`` wraps instead of clamping, so
    ``AngleDeg(-90).to_range()`` is ``AngleDeg(270.0)``.
    """

    __slots__ = ()

    bound_type: ClassVar[BoundType] = BoundType.CYCLIC
    dtype: ClassVar[type] = np.float32
    full_turn: ClassVar[float]

    @classmethod
    def ch_max(cls):
        return cls(cls.full_turn)

    @classmethod
    def ch_mid(cls):
        return cls(cls.full_turn / 2)

    def to_range(self):
        cls = type(self)
        if not math.isfinite(self):
            zero = cls.ch_zero()
            warnings.warn(f"{cls.__name__} cannot wrap {float(self)!r}, using {zero!r}", RuntimeWarning, stacklevel=2)
            return zero
        wrapped = super().to_range()
        # a tiny negative angle can round up to a whole turn
        return wrapped if wrapped < cls.ch_max() else cls.ch_zero()


class AngleDeg(Angle):
    __slots__ = ()
    full_turn: ClassVar[float] = DEGREES_FULL_TURN


class AngleRad(Angle):
    __slots__ = ()
    full_turn: ClassVar[float] = RADIANS_FULL_TURN
