from typing import ClassVar, Tuple

from ..types.color_types import ChannelInfo, ChannelType, ColorKind
from .colorspace_base import ColorspaceValue


class Lab(ColorspaceValue):
    """CIE Lab, D50 white."""
    kind: ClassVar[ColorKind] = ColorKind.LAB
    channels: ClassVar[Tuple[ChannelInfo, ...]] = (
        ChannelInfo("lightness", "L", ChannelType.LIGHTNESS, (0.0, 100.0), (0.0, 100.0), 2),
        ChannelInfo("a", "A", ChannelType.NONE, (-125.0, 125.0), (-125.0, 125.0), 5),
        ChannelInfo("b", "B", ChannelType.NONE, (-125.0, 125.0), (-125.0, 125.0), 5),
    )

    @property
    def lightness(self) -> float:
        return self._values[0]

    @property
    def a(self) -> float:
        return self._values[1]

    @property
    def b(self) -> float:
        return self._values[2]


class LCh(ColorspaceValue):
    """Cylindrical CIE Lab."""
    kind: ClassVar[ColorKind] = ColorKind.LCH
    channels: ClassVar[Tuple[ChannelInfo, ...]] = (
        ChannelInfo("lightness", "L", ChannelType.LIGHTNESS, (0.0, 100.0), (0.0, 100.0), 2),
        ChannelInfo("chroma", "C", ChannelType.CHROMA, (0.0, 150.0), (0.0, 150.0), 5),
        ChannelInfo("hue", "H", ChannelType.HUE, (0.0, 360.0), (0.0, 360.0), 5),
    )

    @property
    def lightness(self) -> float:
        return self._values[0]

    @property
    def chroma(self) -> float:
        return self._values[1]
