"""
Numeric channel types.

A channel is one numeric color component (red, saturation, hue...). Every
channel type knows its own valid range through the class methods
``ch_zero``, ``ch_mid`` and ``ch_max`` and can rescale itself into any other
channel type with ``conv``, so color models can be written once and used
with any numeric encoding.

Integer channels (``U8``, ``U16``, ``U32``) span ``0..dtype max``, float
channels (``F32``, ``F64``) span ``0.0..1.0``.

>>> U8(255).conv(F32)
F32(1.0)
>>> F32(0.5).conv(U8)
U8(128)
"""

from __future__ import annotations
import math
import warnings
from abc import ABC, abstractmethod
from typing import ClassVar, Type, TypeVar

import numpy as np
from boundednumbers import BoundType, boundtype_to_function, clamp01

from ..types.format_type import UNIT_MAX, dtype_max
from ..types.color_types import Scalar, is_nan

C = TypeVar("C", bound="Channel")
D = TypeVar("D", bound="Channel")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going up."""
    return int(math.floor(value + 0.5))


class Channel(ABC):
    """Contract shared by all channel types.

    Concrete channels combine this mixin with ``int`` or ``float`` so a
    channel value is an ordinary immutable number that also knows its range.
    """

    __slots__ = ()

    INTEGER: ClassVar[bool]
    dtype: ClassVar[type]
    bound_type: ClassVar[BoundType] = BoundType.CLAMP

    @classmethod
    @abstractmethod
    def ch_max(cls: Type[C]) -> C:
        """Maximum value for this channel, inclusive."""

    @classmethod
    @abstractmethod
    def ch_mid(cls: Type[C]) -> C:
        """Half of ``ch_max``."""

    @classmethod
    def ch_zero(cls: Type[C]) -> C:
        return cls(0)

    @classmethod
    def _nan_replacement(cls: Type[C]) -> C:
        zero = cls.ch_zero()
        warnings.warn(f"{cls.__name__} received NaN, using {zero!r}", RuntimeWarning, stacklevel=4)
        return zero

    def in_range(self) -> bool:
        cls = type(self)
        return cls.ch_zero() <= self <= cls.ch_max()

    def _bound(self: C, bound_type: BoundType) -> C:
        cls = type(self)
        if is_nan(self):
            return cls._nan_replacement()
        bound = boundtype_to_function[bound_type]
        return cls(bound(self.raw(), cls.ch_zero().raw(), cls.ch_max().raw()))

    def clamp(self: C) -> C:
        """Return this value clamped to the channel's range.

        NaN is treated as out of range and becomes ``ch_zero()``.
        """
        return self._bound(BoundType.CLAMP)

    def to_range(self: C) -> C:
        """Bring this value into range using the channel's ``bound_type``."""
        return self._bound(type(self).bound_type)

    def fraction(self) -> float:
        """The clamped value as a fraction of ``ch_max``."""
        return float(self.clamp()) / float(type(self).ch_max())

    @classmethod
    def from_fraction(cls: Type[C], fraction: float) -> C:
        """Build a channel value from a fraction of this channel's maximum.

        Integer channels round to the nearest value, float channels keep the
        exact scaled result.
        """
        if is_nan(fraction):
            return cls._nan_replacement()
        scaled = clamp01(fraction) * float(cls.ch_max())
        return cls(round_half_up(scaled) if cls.INTEGER else scaled)

    def conv(self, target: Type[D]) -> D:
        """Convert this value into any other channel type.

        The channel ranges are taken into account, e.g. ``F32(1.0)`` becomes
        ``U8(255)``. The value is clamped before it is rescaled.
        """
        return target.from_fraction(self.fraction())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.raw()!r})"

    def __str__(self) -> str:
        return str(self.raw())

    @abstractmethod
    def raw(self) -> Scalar:
        """The value as a plain ``int`` or ``float``."""


class IntChannel(Channel, int):
    __slots__ = ()

    INTEGER: ClassVar[bool] = True

    def __new__(cls, value: Scalar = 0):
        if isinstance(value, (float, np.floating)):
            if is_nan(value):
                return cls._nan_replacement()
            if math.isinf(value):
                return cls.ch_max() if value > 0 else cls.ch_zero()
            value = round_half_up(value)
        return super().__new__(cls, value)

    @classmethod
    def ch_max(cls):
        return cls(dtype_max(cls.dtype))

    @classmethod
    def ch_mid(cls):
        return cls(dtype_max(cls.dtype) // 2)

    def raw(self) -> int:
        return int(self)


class FloatChannel(Channel, float):
    __slots__ = ()

    INTEGER: ClassVar[bool] = False

    def __new__(cls, value: Scalar = 0.0):
        # stored at the precision of the channel's dtype
        return super().__new__(cls, float(cls.dtype(value)))

    @classmethod
    def ch_max(cls):
        return cls(UNIT_MAX)

    @classmethod
    def ch_mid(cls):
        return cls(UNIT_MAX / 2)

    def raw(self) -> float:
        return float(self)


class U8(IntChannel):
    __slots__ = ()
    dtype: ClassVar[type] = np.uint8


class U16(IntChannel):
    __slots__ = ()
    dtype: ClassVar[type] = np.uint16


class U32(IntChannel):
    __slots__ = ()
    dtype: ClassVar[type] = np.uint32


class F32(FloatChannel):
    __slots__ = ()
    dtype: ClassVar[type] = np.float32


class F64(FloatChannel):
    __slots__ = ()
    dtype: ClassVar[type] = np.float64
