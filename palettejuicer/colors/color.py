from __future__ import annotations
import math
from typing import Optional, Tuple, cast

from ..conversions.gamut import GamutMapAlgorithm, to_gamut
from ..conversions.interpolate import HueMode, value_steps
from ..defaults import DESCRIBE_DECIMALS
from ..types.color_types import ColorKind, hue_family
from .colorspace_base import ColorspaceValue
from .colorspaces import COLORSPACE_CLASSES, colorspace_class, convert
from .rgb import RGB
from .hsl import HSL
from .hsv import HSV
from .lab import Lab, LCh
from .oklab import OkLab, OkLCh
from .okhsl import Okhsl, Okhsv


def _format_channel(value: float) -> str:
    if math.isnan(value):
        return "none"
    rounded = round(value, DESCRIBE_DECIMALS)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.{DESCRIBE_DECIMALS}f}"


class Color:
    """
    One color seen through every supported colorspace.

    A Color holds an authoritative value (the one last edited) and a
    projection of it in each other kind, all computed at construction, so an
    inconsistent Color cannot be observed. Edits return new Colors.

    Hues are never left undefined: when a projection comes out achromatic its
    hue is taken from the authoritative value if it measures hue the same way,
    else from the previous Color's projection, else 0. This is what lets a
    user drop saturation to 0 and raise it again without losing the hue.

    >>> c = Color(HSL((260, 50, 50)))
    >>> c.adjust_channel(ColorKind.HSL, "saturation", 0).hsv.hue
    260.0
    """
    __slots__ = ('_data', '_projections', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Optional[ColorspaceValue] = None, previous: Optional[Color] = None) -> None:
        if value is None:
            value = RGB()
        if not isinstance(value, ColorspaceValue):
            raise TypeError(f"Color expects a ColorspaceValue, got {type(value).__name__}")

        value = self._fill_hue(value, value, previous)
        projections: dict[ColorKind, ColorspaceValue] = {value.kind: value}

        for kind in COLORSPACE_CLASSES:
            if kind == value.kind:
                continue
            projected = convert(value, kind, self._fallback_hue(kind, value, previous))
            projections[kind] = self._fill_hue(projected, value, previous)

        self._data = value
        self._projections = projections
        super().__setattr__('_is_frozen', True)

    @staticmethod
    def _fallback_hue(kind: ColorKind, source: ColorspaceValue, previous: Optional[Color]) -> Optional[float]:
        if source.kind != kind and source.kind in hue_family(kind):
            hue = source.hue
            if hue is not None and not math.isnan(hue):
                return hue
        if previous is not None:
            hue = previous._projections[kind].hue
            if hue is not None and not math.isnan(hue):
                return hue
        return None

    @classmethod
    def _fill_hue(cls, value: ColorspaceValue, source: ColorspaceValue, previous: Optional[Color]) -> ColorspaceValue:
        if not value.has_undefined_hue:
            return value
        hue = cls._fallback_hue(value.kind, source, previous)
        index = cast(int, value.hue_index())
        values = list(value.values)
        values[index] = 0.0 if hue is None else hue
        return value.with_values(tuple(values))

    # ---- Construction ----

    @classmethod
    def from_value(cls, value: ColorspaceValue) -> Color:
        return cls(value)

    @classmethod
    def from_kind(cls, kind: ColorKind, values: Tuple[float, float, float]) -> Color:
        return cls(colorspace_class(kind)(values))

    @classmethod
    def from_hex(cls, text: str) -> Optional[Color]:
        """Parse a hex string. Returns None when it is not a valid hex color."""
        rgb = RGB.from_hex(text)
        return None if rgb is None else cls(rgb)

    @classmethod
    def from_rgb_int(cls, red: int, green: int, blue: int) -> Color:
        return cls(RGB.from_int(red, green, blue))

    # ---- Reading ----

    @property
    def data(self) -> ColorspaceValue:
        """The authoritative value."""
        return self._data

    @property
    def kind(self) -> ColorKind:
        return self._data.kind

    def projection(self, kind: ColorKind) -> ColorspaceValue:
        return self._projections[ColorKind(kind)]

    __getitem__ = projection

    @property
    def rgb(self) -> RGB:
        return cast(RGB, self._projections[ColorKind.RGB])

    @property
    def hsl(self) -> HSL:
        return cast(HSL, self._projections[ColorKind.HSL])

    @property
    def hsv(self) -> HSV:
        return cast(HSV, self._projections[ColorKind.HSV])

    @property
    def lab(self) -> Lab:
        return cast(Lab, self._projections[ColorKind.LAB])

    @property
    def lch(self) -> LCh:
        return cast(LCh, self._projections[ColorKind.LCH])

    @property
    def oklab(self) -> OkLab:
        return cast(OkLab, self._projections[ColorKind.OKLAB])

    @property
    def oklch(self) -> OkLCh:
        return cast(OkLCh, self._projections[ColorKind.OKLCH])

    @property
    def okhsl(self) -> Okhsl:
        return cast(Okhsl, self._projections[ColorKind.OKHSL])

    @property
    def okhsv(self) -> Okhsv:
        return cast(Okhsv, self._projections[ColorKind.OKHSV])

    def channel(self, kind: ColorKind, name: str) -> float:
        """Raw value of channel ``name`` in the ``kind`` projection. Unknown names raise KeyError."""
        return self.projection(kind).channel(name)

    @property
    def hex(self) -> str:
        return self.rgb.hex

    def in_gamut(self) -> bool:
        return self.rgb.in_gamut()

    def out_of_gamut_distance(self) -> float:
        return self.rgb.out_of_gamut_distance()

    def describe(self) -> str:
        """Human-readable dump of the authoritative value in display units, e.g. ``oklch(65, 12.3, 301.4)``."""
        channels = ", ".join(_format_channel(v) for v in self._data.transformed())
        return f"{self.kind.value}({channels})"

    # ---- Editing ----

    def with_value(self, value: ColorspaceValue) -> Color:
        """Make ``value`` authoritative and recompute every other projection."""
        return Color(value, previous=self)

    def with_kind(self, kind: ColorKind, values: Tuple[float, float, float]) -> Color:
        return self.with_value(colorspace_class(kind)(values))

    def adjust_channel(self, kind: ColorKind, name: str, value: float) -> Color:
        """
        Replace one channel of one projection.

        Args:
            kind: Projection to edit; it becomes the authoritative value
            name: Channel name within ``kind`` (e.g. "saturation")
            value: New raw channel value

        Returns:
            New Color with every projection recomputed
        """
        return self.with_value(self.projection(kind).with_channel(name, value))

    def converted(self, kind: ColorKind) -> Color:
        """Same color with the ``kind`` projection as its authoritative value."""
        kind = ColorKind(kind)
        if kind == self.kind:
            return self
        return Color(self._projections[kind], previous=self)

    def to_gamut(self, algorithm: GamutMapAlgorithm = GamutMapAlgorithm.CSS) -> Color:
        """Map into sRGB with ``algorithm``. In-gamut colors come back unchanged."""
        if self.in_gamut():
            return self
        mapped = to_gamut(self._data.values, self.kind, algorithm)
        return self.with_value(self._data.with_values(mapped))

    # ---- Dunder ----

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"Color({self._data!r})"


def _blend_values(color: Color, kind: ColorKind) -> Tuple[float, float, float]:
    # A gray end keeps a NaN hue unless its own value defines one, so the
    # blend borrows the hue of the other end instead of a filled-in 0.
    if color.kind == kind:
        return color.data.values
    if color.kind in hue_family(kind):
        return color[kind].values
    return convert(color.data, kind).values


def color_steps(
    start: Color,
    end: Color,
    kind: ColorKind,
    num_steps: int,
    hue_mode: HueMode = HueMode.SHORTEST,
    power_curve: float = 1.0,
) -> list[Color]:
    """
    Interpolate ``num_steps`` colors from ``start`` to ``end`` inclusive in ``kind``.

    The blend parameter is eased with ``p ** power_curve`` before mixing.
    """
    kind = ColorKind(kind)
    cls = colorspace_class(kind)
    steps = value_steps(_blend_values(start, kind), _blend_values(end, kind), kind, num_steps, hue_mode, power_curve)
    return [Color(cls(values)) for values in steps]
