from typing import ClassVar, Tuple

from ..types.color_types import ChannelInfo, ChannelType, ColorKind
from .colorspace_base import ColorspaceValue


class OkLab(ColorspaceValue):
    kind: ClassVar[ColorKind] = ColorKind.OKLAB
    channels: ClassVar[Tuple[ChannelInfo, ...]] = (
        ChannelInfo("lightness", "L", ChannelType.LIGHTNESS, (0.0, 1.0), (0.0, 100.0), 2),
        ChannelInfo("a", "A", ChannelType.NONE, (-0.4, 0.4), (-40.0, 40.0), 2),
        ChannelInfo("b", "B", ChannelType.NONE, (-0.4, 0.4), (-40.0, 40.0), 2),
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


class OkLCh(ColorspaceValue):
    kind: ClassVar[ColorKind] = ColorKind.OKLCH
    channels: ClassVar[Tuple[ChannelInfo, ...]] = (
        ChannelInfo("lightness", "L", ChannelType.LIGHTNESS, (0.0, 1.0), (0.0, 100.0), 2),
        ChannelInfo("chroma", "C", ChannelType.CHROMA, (0.0, 0.4), (0.0, 40.0), 1),
        ChannelInfo("hue", "H", ChannelType.HUE, (0.0, 360.0), (0.0, 360.0), 5),
    )

    @property
    def lightness(self) -> float:
        return self._values[0]

    @property
    def chroma(self) -> float:
        return self._values[1]
