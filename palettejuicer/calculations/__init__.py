"""
Palettejuicer Calculations
==========================

Declarative transforms run by a palette, in order, to fill its computed
overlay. Each kind is a frozen dataclass registered under a kind tag.

Kinds
-----
- ``copy_colors``: CopyColors, repeat a rectangle at an offset
- ``interpolate_strip``: InterpolateStrip, blend between two cels
- ``extrapolate_strip``: ExtrapolateStrip, ramp out from one cel
- ``gamut_map``: GamutMap, pull colors into sRGB

>>> from palettejuicer.calculations import CopyColors
>>> from palettejuicer.types import CelIndex
>>> calc = CopyColors(start_cel=CelIndex(0, 0), end_cel=CelIndex(1, 0), offset=CelIndex(0, 1), copies=2)
>>> calc.output_cels(16, 16)
[CelIndex(x=0, y=1), CelIndex(x=1, y=1), CelIndex(x=0, y=2), CelIndex(x=1, y=2)]
"""
from .base import Calculation, CalculationCel, new_uid
from .copy_colors import CopyColors
from .interpolate_strip import InterpolateStrip
from .extrapolate_strip import ExtrapolateStrip, ExtrapolateColorspace, StripAdjustment
from .gamut_map import GamutMap
from .registry import (
    CALCULATION_REGISTRY,
    EDITOR_REGISTRY,
    calculation_class,
    editor_for,
    create_calculation,
)

__all__ = [
    "Calculation",
    "CalculationCel",
    "new_uid",
    "CopyColors",
    "InterpolateStrip",
    "ExtrapolateStrip",
    "ExtrapolateColorspace",
    "StripAdjustment",
    "GamutMap",
    "CALCULATION_REGISTRY",
    "EDITOR_REGISTRY",
    "calculation_class",
    "editor_for",
    "create_calculation",
]
