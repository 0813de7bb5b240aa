# No dependencies
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

ColorTriple = Tuple[float, float, float]


class ColorKind(str, Enum):
    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"
    LAB = "lab"
    LCH = "lch"
    OKLAB = "oklab"
    OKLCH = "oklch"
    OKHSL = "okhsl"
    OKHSV = "okhsv"


class ChannelType(str, Enum):
    NONE = "none"
    LIGHTNESS = "lightness"
    CHROMA = "chroma"
    SATURATION = "saturation"
    HUE = "hue"


@dataclass(frozen=True)
class ChannelInfo:
    """
    Describes one channel of a colorspace.

    ``range`` is the raw numeric range the conversion math works in.
    ``display_range`` is the range shown to users; ``step`` is the
    increment a slider or spinner uses, in display units.
    """
    name: str
    label: str
    channel_type: ChannelType
    range: Tuple[float, float]
    display_range: Tuple[float, float]
    step: float

    @property
    def scale(self) -> float:
        """Factor turning a raw value into a display value."""
        raw_span = self.range[1] - self.range[0]
        display_span = self.display_range[1] - self.display_range[0]
        return display_span / raw_span

    def to_display(self, value: float) -> float:
        return value * self.scale

    def from_display(self, value: float) -> float:
        return value / self.scale

    @property
    def is_hue(self) -> bool:
        return self.channel_type == ChannelType.HUE


# Kinds whose hue angles are measured the same way; a hue of one member is a
# reasonable stand-in for an undefined hue of another.
HUE_FAMILIES: Tuple[frozenset[ColorKind], ...] = (
    frozenset({ColorKind.HSL, ColorKind.HSV}),
    frozenset({ColorKind.LCH}),
    frozenset({ColorKind.OKLCH, ColorKind.OKHSL, ColorKind.OKHSV}),
)


def hue_family(kind: ColorKind) -> frozenset[ColorKind]:
    """
    Return the set of kinds sharing a hue angle with ``kind``.

    Kinds without a hue channel get an empty set.
    """
    for family in HUE_FAMILIES:
        if kind in family:
            return family
    return frozenset()


# Position of the hue channel within each hue-bearing kind.
HUE_CHANNEL_INDEX: dict[ColorKind, int] = {
    ColorKind.HSL: 0,
    ColorKind.HSV: 0,
    ColorKind.LCH: 2,
    ColorKind.OKLCH: 2,
    ColorKind.OKHSL: 0,
    ColorKind.OKHSV: 0,
}
