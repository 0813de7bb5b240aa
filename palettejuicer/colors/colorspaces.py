from __future__ import annotations
from typing import Optional

from ..conversions.wrapper import convert_values
from ..types.color_types import ColorKind
from .colorspace_base import ColorspaceValue, build_registry
from .rgb import RGB
from .hsl import HSL
from .hsv import HSV
from .lab import Lab, LCh
from .oklab import OkLab, OkLCh
from .okhsl import Okhsl, Okhsv

COLORSPACE_CLASSES: dict[ColorKind, type[ColorspaceValue]] = build_registry(
    RGB, HSL, HSV, Lab, LCh, OkLab, OkLCh, Okhsl, Okhsv,
)


def colorspace_class(kind: ColorKind) -> type[ColorspaceValue]:
    return COLORSPACE_CLASSES[ColorKind(kind)]


def convert(
    value: ColorspaceValue,
    to_kind: ColorKind,
    previous_hue: Optional[float] = None,
) -> ColorspaceValue:
    """
    Convert a colorspace value to another kind.

    Args:
        value: Source value
        to_kind: Destination kind
        previous_hue: Hue to keep if the result's hue is undefined (achromatic)

    Returns:
        New value of ``to_kind``. Its hue is NaN only when the color is
        achromatic and no ``previous_hue`` was given.
    """
    to_kind = ColorKind(to_kind)
    if value.kind == to_kind:
        return value
    values = convert_values(value.values, value.kind, to_kind, previous_hue)
    return COLORSPACE_CLASSES[to_kind](values)


ColorspaceValue.convert = convert  # type: ignore[assignment]
