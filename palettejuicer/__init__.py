"""
Palettejuicer
=============

Palette-building core: a grid of hand-picked base colors plus an ordered
list of declarative calculations that derive the rest.

Modules
-------
- ``palettejuicer.colors``: colorspace values and the Color aggregate
- ``palettejuicer.conversions``: colorspace math, hex codec, gamut mapping
- ``palettejuicer.calculations``: Copy Colors, Interpolate Strip,
  Extrapolate Strip, Gamut Map
- ``palettejuicer.palette``: the Palette grid and its computation pipeline

>>> from palettejuicer import Palette, Color, CopyColors, CelIndex
>>> red = Color.from_hex("#ff0000")
>>> palette = Palette(8, 8).with_base_color((0, 0), red)
>>> palette = palette.with_calculation_appended(
...     CopyColors(start_cel=CelIndex(0, 0), end_cel=CelIndex(0, 0), offset=CelIndex(1, 0), copies=3))
>>> [palette.color((x, 0)).hex for x in range(4)]
['#ff0000', '#ff0000', '#ff0000', '#ff0000']
"""
from .types import ColorKind, ChannelType, ChannelInfo, CelIndex
from .colors import (
    ColorspaceValue,
    RGB,
    HSL,
    HSV,
    Lab,
    LCh,
    OkLab,
    OkLCh,
    Okhsl,
    Okhsv,
    Color,
    color_steps,
    convert,
)
from .conversions import GamutMapAlgorithm, HueMode, parse_hex, format_hex
from .calculations import (
    Calculation,
    CalculationCel,
    CopyColors,
    InterpolateStrip,
    ExtrapolateStrip,
    ExtrapolateColorspace,
    StripAdjustment,
    GamutMap,
    CALCULATION_REGISTRY,
    EDITOR_REGISTRY,
    create_calculation,
)
from .palette import Palette, DEFAULT_COLOR
from .errors import (
    PaletteJuicerError,
    PaletteDimensionError,
    PaletteImportError,
    CalculationInputError,
)

__version__ = "0.1.0"

__all__ = [
    "ColorKind",
    "ChannelType",
    "ChannelInfo",
    "CelIndex",
    "ColorspaceValue",
    "RGB",
    "HSL",
    "HSV",
    "Lab",
    "LCh",
    "OkLab",
    "OkLCh",
    "Okhsl",
    "Okhsv",
    "Color",
    "color_steps",
    "convert",
    "GamutMapAlgorithm",
    "HueMode",
    "parse_hex",
    "format_hex",
    "Calculation",
    "CalculationCel",
    "CopyColors",
    "InterpolateStrip",
    "ExtrapolateStrip",
    "ExtrapolateColorspace",
    "StripAdjustment",
    "GamutMap",
    "CALCULATION_REGISTRY",
    "EDITOR_REGISTRY",
    "create_calculation",
    "Palette",
    "DEFAULT_COLOR",
    "PaletteJuicerError",
    "PaletteDimensionError",
    "PaletteImportError",
    "CalculationInputError",
]
