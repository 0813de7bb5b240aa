from __future__ import annotations
from typing import ClassVar, Optional, Tuple

from ..conversions.gamut import out_of_gamut_distance
from ..conversions.hex import format_hex, parse_hex, rgb_to_int
from ..defaults import GAMUT_ROUNDING_ERROR
from ..types.color_types import ChannelInfo, ChannelType, ColorKind
from .colorspace_base import ColorspaceValue


class RGB(ColorspaceValue):
    """Gamma-encoded sRGB. Raw channels are nominally [0, 1] but may leave it."""
    kind: ClassVar[ColorKind] = ColorKind.RGB
    channels: ClassVar[Tuple[ChannelInfo, ...]] = (
        ChannelInfo("red", "R", ChannelType.NONE, (0.0, 1.0), (0.0, 255.0), 5),
        ChannelInfo("green", "G", ChannelType.NONE, (0.0, 1.0), (0.0, 255.0), 5),
        ChannelInfo("blue", "B", ChannelType.NONE, (0.0, 1.0), (0.0, 255.0), 5),
    )

    @property
    def red(self) -> float:
        return self._values[0]

    @property
    def green(self) -> float:
        return self._values[1]

    @property
    def blue(self) -> float:
        return self._values[2]

    @classmethod
    def from_hex(cls, text: str) -> Optional[RGB]:
        """Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``. Returns None if malformed."""
        rgb = parse_hex(text)
        return None if rgb is None else cls(rgb)

    @classmethod
    def from_int(cls, red: int, green: int, blue: int) -> RGB:
        return cls((red / 255, green / 255, blue / 255))

    @property
    def hex(self) -> str:
        return format_hex(self.values)

    def int_normalized(self) -> tuple[int, int, int]:
        """Channels as clamped 0-255 integers."""
        return rgb_to_int(self.values)

    def out_of_gamut_distance(self) -> float:
        return out_of_gamut_distance(self.values)

    def in_gamut(self) -> bool:
        return self.out_of_gamut_distance() <= GAMUT_ROUNDING_ERROR
