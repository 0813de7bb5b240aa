from typing import ClassVar, Tuple

from ..types.color_types import ChannelInfo, ChannelType, ColorKind
from .colorspace_base import ColorspaceValue


class HSV(ColorspaceValue):
    kind: ClassVar[ColorKind] = ColorKind.HSV
    channels: ClassVar[Tuple[ChannelInfo, ...]] = (
        ChannelInfo("hue", "H", ChannelType.HUE, (0.0, 360.0), (0.0, 360.0), 5),
        ChannelInfo("saturation", "S", ChannelType.SATURATION, (0.0, 100.0), (0.0, 100.0), 2),
        ChannelInfo("value", "V", ChannelType.LIGHTNESS, (0.0, 100.0), (0.0, 100.0), 2),
    )

    @property
    def saturation(self) -> float:
        return self._values[1]

    @property
    def value(self) -> float:
        return self._values[2]
