import math
import numpy as np
from typing import Callable, Optional

from ..types.color_types import ColorKind, ColorTriple, HUE_CHANNEL_INDEX
from .srgb import srgb_to_linear, linear_to_srgb
from .hsl_hsv import (
    np_rgb_to_hsl,
    np_hsl_to_rgb,
    np_rgb_to_hsv,
    np_hsv_to_rgb,
    np_hsl_to_hsv,
    np_hsv_to_hsl,
)
from .lab import linear_srgb_to_lab, lab_to_linear_srgb, lab_to_lch, lch_to_lab
from .oklab import linear_srgb_to_oklab, oklab_to_linear_srgb, oklab_to_oklch, oklch_to_oklab
from .okhsl import (
    linear_srgb_to_okhsl,
    okhsl_to_linear_srgb,
    linear_srgb_to_okhsv,
    okhsv_to_linear_srgb,
)

Converter = Callable[[np.ndarray], np.ndarray]

# Every kind -> linear sRGB (the connection space)
TO_LINEAR: dict[ColorKind, Converter] = {
    ColorKind.RGB: srgb_to_linear,
    ColorKind.HSL: lambda v: srgb_to_linear(np_hsl_to_rgb(v)),
    ColorKind.HSV: lambda v: srgb_to_linear(np_hsv_to_rgb(v)),
    ColorKind.LAB: lab_to_linear_srgb,
    ColorKind.LCH: lambda v: lab_to_linear_srgb(lch_to_lab(v)),
    ColorKind.OKLAB: oklab_to_linear_srgb,
    ColorKind.OKLCH: lambda v: oklab_to_linear_srgb(oklch_to_oklab(v)),
    ColorKind.OKHSL: okhsl_to_linear_srgb,
    ColorKind.OKHSV: okhsv_to_linear_srgb,
}

# Linear sRGB -> every kind
FROM_LINEAR: dict[ColorKind, Converter] = {
    ColorKind.RGB: linear_to_srgb,
    ColorKind.HSL: lambda v: np_rgb_to_hsl(linear_to_srgb(v)),
    ColorKind.HSV: lambda v: np_rgb_to_hsv(linear_to_srgb(v)),
    ColorKind.LAB: linear_srgb_to_lab,
    ColorKind.LCH: lambda v: lab_to_lch(linear_srgb_to_lab(v)),
    ColorKind.OKLAB: linear_srgb_to_oklab,
    ColorKind.OKLCH: lambda v: oklab_to_oklch(linear_srgb_to_oklab(v)),
    ColorKind.OKHSL: linear_srgb_to_okhsl,
    ColorKind.OKHSV: linear_srgb_to_okhsv,
}

# Pairs converted without leaving their model. These keep the hue exactly,
# where a detour through RGB would lose it for achromatic colors.
CONVERT_DIRECT: dict[tuple[ColorKind, ColorKind], Converter] = {
    (ColorKind.RGB, ColorKind.HSL): np_rgb_to_hsl,
    (ColorKind.HSL, ColorKind.RGB): np_hsl_to_rgb,
    (ColorKind.RGB, ColorKind.HSV): np_rgb_to_hsv,
    (ColorKind.HSV, ColorKind.RGB): np_hsv_to_rgb,
    (ColorKind.HSL, ColorKind.HSV): np_hsl_to_hsv,
    (ColorKind.HSV, ColorKind.HSL): np_hsv_to_hsl,
    (ColorKind.LAB, ColorKind.LCH): lab_to_lch,
    (ColorKind.LCH, ColorKind.LAB): lch_to_lab,
    (ColorKind.OKLAB, ColorKind.OKLCH): oklab_to_oklch,
    (ColorKind.OKLCH, ColorKind.OKLAB): oklch_to_oklab,
}


def np_convert(values: np.ndarray, from_kind: ColorKind, to_kind: ColorKind) -> np.ndarray:
    """
    Convert raw channel values between two colorspace kinds.

    Routes through linear sRGB unless a direct formula exists for the pair.
    An undefined (NaN) input hue counts as 0; an achromatic result carries a
    NaN hue.

    Args:
        values: array of shape (..., 3) in ``from_kind``'s raw ranges
        from_kind: source kind
        to_kind: destination kind

    Returns:
        array of shape (..., 3) in ``to_kind``'s raw ranges
    """
    values = np.array(values, dtype=np.float64)
    if from_kind == to_kind:
        return values

    direct = CONVERT_DIRECT.get((from_kind, to_kind))
    if direct is not None:
        return direct(values)

    hue_index = HUE_CHANNEL_INDEX.get(from_kind)
    if hue_index is not None:
        values[..., hue_index] = np.nan_to_num(values[..., hue_index])

    return FROM_LINEAR[to_kind](TO_LINEAR[from_kind](values))


def convert_values(
    values: ColorTriple,
    from_kind: ColorKind,
    to_kind: ColorKind,
    previous_hue: Optional[float] = None,
) -> ColorTriple:
    """
    Convert a single color and return plain floats.

    When the result's hue is undefined and ``previous_hue`` is given, that hue
    is kept instead, so a color can pass through gray without forgetting it.
    """
    result = np_convert(values, from_kind, to_kind)
    hue_index = HUE_CHANNEL_INDEX.get(to_kind)
    if hue_index is not None and previous_hue is not None and math.isnan(result[hue_index]):
        result[hue_index] = previous_hue
    return (float(result[0]), float(result[1]), float(result[2]))
