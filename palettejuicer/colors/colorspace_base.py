from __future__ import annotations
import math
from typing import Callable, ClassVar, Iterator, Optional, Tuple

from ..types.color_types import ChannelInfo, ColorKind, ColorTriple, HUE_CHANNEL_INDEX


class ColorspaceValue:
    """
    Three raw channel values tagged with a colorspace kind.

    Subclasses fix ``kind`` and ``channels``. Instances are immutable; every
    edit returns a new value.
    """
    __slots__ = ('_values',)  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 3
    kind: ClassVar[ColorKind]
    channels: ClassVar[Tuple[ChannelInfo, ...]]
    null_value: ClassVar[ColorTriple] = (0.0, 0.0, 0.0)
    _is_frozen: bool = False   # class-level default (instance gets its own slot)
    # convert(self, to_kind, previous_hue=None) -> ColorspaceValue, bound in colorspaces.py
    convert: Callable[[ColorspaceValue, ColorKind, Optional[float]], ColorspaceValue]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, values: Optional[Tuple[float, ...]] = None) -> None:
        if values is None:
            values = self.null_value
        values = tuple(float(v) for v in values)
        if len(values) != self.num_channels:
            raise ValueError(
                f"{self.kind.value} expects {self.num_channels} channels, got {len(values)}"
            )
        self._values = values
        super().__setattr__('_is_frozen', True)

    @property
    def values(self) -> ColorTriple:
        return self._values  # type: ignore[return-value]

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __getitem__(self, index: int) -> float:
        return self._values[index]

    def __len__(self) -> int:
        return self.num_channels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorspaceValue):
            return NotImplemented
        if self.kind != other.kind:
            return False
        return all(
            a == b or (math.isnan(a) and math.isnan(b))
            for a, b in zip(self._values, other._values)
        )

    def __hash__(self) -> int:
        return hash((self.kind, tuple(None if math.isnan(v) else v for v in self._values)))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}{self._values!r}"

    # ---- Channels ----

    @classmethod
    def channel_index(cls, name: str) -> int:
        """Position of the channel called ``name``. Raises KeyError if there is none."""
        for i, info in enumerate(cls.channels):
            if info.name == name:
                return i
        raise KeyError(f"{cls.kind.value} has no channel named {name!r}")

    @classmethod
    def channel_info(cls, name: str) -> ChannelInfo:
        return cls.channels[cls.channel_index(name)]

    @classmethod
    def hue_index(cls) -> Optional[int]:
        return HUE_CHANNEL_INDEX.get(cls.kind)

    def channel(self, name: str) -> float:
        return self._values[self.channel_index(name)]

    def with_channel(self, name: str, value: float) -> ColorspaceValue:
        values = list(self._values)
        values[self.channel_index(name)] = value
        return self.__class__(tuple(values))

    def with_values(self, values: Tuple[float, ...]) -> ColorspaceValue:
        return self.__class__(values)

    @property
    def hue(self) -> Optional[float]:
        """The hue channel, or None for kinds without one. May be NaN when undefined."""
        index = self.hue_index()
        return None if index is None else self._values[index]

    @property
    def has_undefined_hue(self) -> bool:
        hue = self.hue
        return hue is not None and math.isnan(hue)

    # ---- Display units ----

    def transformed(self) -> ColorTriple:
        """Channel values in display units (e.g. 0-255 for RGB, 0-100 for OkLab L)."""
        return tuple(  # type: ignore[return-value]
            info.to_display(v) for info, v in zip(self.channels, self._values)
        )

    @classmethod
    def transformed_to_raw(cls, values: Tuple[float, ...]) -> ColorTriple:
        """Convert display-unit values (or deltas) to raw units."""
        return tuple(  # type: ignore[return-value]
            info.from_display(v) for info, v in zip(cls.channels, values)
        )

    @classmethod
    def from_transformed(cls, values: Tuple[float, ...]) -> ColorspaceValue:
        return cls(cls.transformed_to_raw(values))


def build_registry(*classes: type[ColorspaceValue]) -> dict[ColorKind, type[ColorspaceValue]]:
    return {cls.kind: cls for cls in classes}
