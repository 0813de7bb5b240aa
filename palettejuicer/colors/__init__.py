"""
Palettejuicer Color Classes
===========================

Immutable colorspace values for RGB, HSL, HSV, Lab, LCh, OkLab, OkLCh,
Okhsl and Okhsv, and the Color aggregate that keeps one projection per kind
in sync.

Features
--------
- Immutable values (frozen after initialization)
- Channel descriptors (label, raw range, display range, step, semantic type)
- Conversion between every pair of kinds through linear sRGB
- Hue kept across achromatic states (gray, black, white)
- Gamut queries and gamut mapping

Usage
-----
>>> from palettejuicer.colors import Color, HSL, ColorKind
>>>
>>> color = Color(HSL((260, 50, 50)))
>>> color.hex
'#6a40bf'
>>> gray = color.adjust_channel(ColorKind.HSL, "saturation", 0)
>>> gray.hsl.hue  # hue survives
260.0
>>> color.converted(ColorKind.OKLCH).describe()  # doctest: +SKIP
'oklch(49.9, 16.8, 294.2)'
"""
from ..types.color_types import ColorKind, ChannelType, ChannelInfo
from .colorspace_base import ColorspaceValue, build_registry
from .rgb import RGB
from .hsl import HSL
from .hsv import HSV
from .lab import Lab, LCh
from .oklab import OkLab, OkLCh
from .okhsl import Okhsl, Okhsv
from .colorspaces import COLORSPACE_CLASSES, colorspace_class, convert
from .color import Color, color_steps

__all__ = [
    "ColorKind",
    "ChannelType",
    "ChannelInfo",
    "ColorspaceValue",
    "build_registry",
    "RGB",
    "HSL",
    "HSV",
    "Lab",
    "LCh",
    "OkLab",
    "OkLCh",
    "Okhsl",
    "Okhsv",
    "COLORSPACE_CLASSES",
    "colorspace_class",
    "convert",
    "Color",
    "color_steps",
]
