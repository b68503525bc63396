from __future__ import annotations
import threading
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Iterator, Tuple, Type, cast

from ..channels import Channel
from .spaces import ColorSpace, is_space

# (generic class, parameters) -> specialized class
_specializations: Dict[Tuple[type, Tuple[type, ...]], type] = {}
_specializations_lock = threading.Lock()


def coerce_channel(channel: Type[Channel], value: Any) -> Channel:
    """Turn ``value`` into an instance of ``channel``.

    Plain numbers are taken as raw values of the channel, channel values of
    another type are rescaled with ``conv``.
    """
    if type(value) is channel:
        return value
    if isinstance(value, Channel):
        return value.conv(channel)
    return channel(value)


class ColorBase(ABC):
    """Immutable tuple of channels, specialized by channel types and space.

    Subclasses are generic (``RGBColor``, ``HSVColor``); indexing them with
    their parameters returns a cached concrete class, e.g.
    ``RGBColor[U8, SRGBSpace]``. Only concrete classes can be instantiated.
    """

    __slots__ = ('_channels', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int]
    channel_names: ClassVar[Tuple[str, ...]]
    param_names: ClassVar[Tuple[str, ...]]
    params: ClassVar[Tuple[type, ...]] = ()
    generic: ClassVar[type]
    space: ClassVar[Type[ColorSpace]]

    def __setattr__(self, name, value):
        """Block attribute changes after construction finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __class_getitem__(cls, params):
        if cls.params:
            raise TypeError(f"{cls.__name__} is already specialized")
        if not isinstance(params, tuple):
            params = (params,)
        return cls._specialize(params)

    @classmethod
    def _specialize(cls, params: Tuple[type, ...]) -> type:
        key = (cls, params)
        specialized = _specializations.get(key)
        if specialized is not None:
            return specialized

        with _specializations_lock:
            # another thread may have built it while we waited
            specialized = _specializations.get(key)
            if specialized is None:
                cls._check_params(params)
                name = f"{cls.__name__}[{', '.join(p.__name__ for p in params)}]"
                namespace: Dict[str, Any] = {
                    '__slots__': (),
                    '__module__': cls.__module__,
                    '__qualname__': name,
                    'params': params,
                    'generic': cls,
                }
                namespace.update(zip(cls.param_names, params))
                specialized = type(cls)(name, (cls,), namespace)
                _specializations[key] = specialized
        return specialized

    @classmethod
    def _check_params(cls, params: Tuple[type, ...]) -> None:
        if len(params) != len(cls.param_names):
            raise TypeError(
                f"{cls.__name__} expects {len(cls.param_names)} parameters "
                f"({', '.join(cls.param_names)}), got {len(params)}"
            )
        *channels, space = params
        for channel in channels:
            if not (isinstance(channel, type) and issubclass(channel, Channel)):
                raise TypeError(f"{cls.__name__} expects channel types, got {channel!r}")
        if not is_space(space):
            raise TypeError(f"{cls.__name__} expects a color space marker, got {space!r}")

    @classmethod
    def _require_specialized(cls) -> None:
        if not cls.params:
            raise TypeError(
                f"{cls.__name__} must be specialized before use, "
                f"e.g. {cls.__name__}[{', '.join(cls.param_names)}]"
            )

    def _set(self, channels: Tuple[Channel, ...]) -> None:
        # safe assignment; __setattr__ still allows it during construction
        self._channels = channels
        # freeze instance: no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _from_channels(cls, channels: Tuple[Channel, ...]):
        """Build an instance from channels that are already normal."""
        cls._require_specialized()
        color = cls.__new__(cls)
        color._set(tuple(channels))
        return color

    @classmethod
    @abstractmethod
    def _normalize_channels(cls, channels: Tuple[Channel, ...]) -> Tuple[Channel, ...]:
        """Bring raw channels into their canonical form."""

    def normalize(self):
        """Return the canonical form of this color."""
        return self._from_channels(self._normalize_channels(self._channels))

    @abstractmethod
    def is_normal(self) -> bool:
        """Whether the stored channels are already canonical."""

    # ------------------ DECOMPOSITION ------------------
    def tuple(self) -> Tuple[Channel, ...]:
        """Deconstruct this color into a tuple of its channels."""
        return self._channels

    def __iter__(self) -> Iterator[Channel]:
        return iter(self._channels)

    def __len__(self) -> int:
        return self.num_channels

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._channels == cast(ColorBase, other)._channels

    def __hash__(self) -> int:
        return hash((type(self), self._channels))

    def __repr__(self) -> str:
        fields = ", ".join(f"{n}={c.raw()!r}" for n, c in zip(self.channel_names, self._channels))
        return f"{type(self).__name__}({fields})"
