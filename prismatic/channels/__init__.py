from .channel import Channel, IntChannel, FloatChannel, U8, U16, U32, F32, F64, round_half_up
from .angle import Angle, AngleDeg, AngleRad

__all__ = [
    'Channel',
    'IntChannel',
    'FloatChannel',
    'U8',
    'U16',
    'U32',
    'F32',
    'F64',
    'Angle',
    'AngleDeg',
    'AngleRad',
    'round_half_up',
]
