"""
Palettejuicer Conversions
=========================

Numeric colorspace math. Every kind converts through linear sRGB, the
connection space, except for pairs that share a model (HSL/HSV, Lab/LCh,
OkLab/OkLCh), which convert directly so their hue survives.

>>> from palettejuicer.conversions import convert_values, ColorKind
>>> convert_values((1.0, 0.0, 0.0), ColorKind.RGB, ColorKind.HSL)
(0.0, 100.0, 50.0)
"""
from ..types.color_types import ColorKind
from .wrapper import np_convert, convert_values, TO_LINEAR, FROM_LINEAR
from .hex import parse_hex, format_hex, rgb_to_int
from .gamut import (
    GamutMapAlgorithm,
    GAMUT_MAP_NAMES,
    in_gamut,
    np_in_gamut,
    out_of_gamut_distance,
    to_gamut,
    np_to_gamut,
)
from .interpolate import HueMode, adjust_hues, progression, interpolate_values, value_steps
from .oklab import delta_e_ok

__all__ = [
    "ColorKind",
    "np_convert",
    "convert_values",
    "TO_LINEAR",
    "FROM_LINEAR",
    "parse_hex",
    "format_hex",
    "rgb_to_int",
    "GamutMapAlgorithm",
    "GAMUT_MAP_NAMES",
    "in_gamut",
    "np_in_gamut",
    "out_of_gamut_distance",
    "to_gamut",
    "np_to_gamut",
    "HueMode",
    "adjust_hues",
    "progression",
    "interpolate_values",
    "value_steps",
    "delta_e_ok",
]
