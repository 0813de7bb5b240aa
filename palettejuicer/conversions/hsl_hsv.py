"""
HSL and HSV conversions (CSS Color 4 formulas).

Hue is in degrees, saturation/lightness/value are percentages [0, 100] and
RGB is gamma-encoded sRGB in [0, 1]. Achromatic inputs produce a NaN hue.
"""
import numpy as np
from numpy import ndarray as NDArray

from ..defaults import ACHROMATIC_EPSILON


def np_rgb_to_hsl(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert gamma-encoded sRGB to HSL.

    Out-of-gamut input can produce a negative saturation; that is folded back
    into range by rotating the hue half a turn.

    Args:
        rgb: array of shape (..., 3)

    Returns:
        array of shape (..., 3) holding (h, s, l)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    max_c = np.max(rgb, axis=-1)
    min_c = np.min(rgb, axis=-1)
    d = max_c - min_c
    l = (max_c + min_c) / 2
    chromatic = np.abs(d) > ACHROMATIC_EPSILON

    with np.errstate(divide="ignore", invalid="ignore"):
        denom = np.minimum(l, 1 - l)
        s = np.where(chromatic & (denom != 0), (max_c - l) / denom, 0.0)

        h_r = (g - b) / d + np.where(g < b, 6.0, 0.0)
        h_g = (b - r) / d + 2
        h_b = (r - g) / d + 4
        h = np.select([max_c == r, max_c == g], [h_r, h_g], h_b) * 60
        h = np.where(chromatic, h, np.nan)

        h = np.where(s < 0, h + 180, h)
        s = np.abs(s)
        h = np.where(h >= 360, h - 360, h)

    return np.stack([h, s * 100, l * 100], axis=-1)


def np_hsl_to_rgb(hsl: NDArray) -> NDArray:
    """Vectorized: Convert HSL to gamma-encoded sRGB. A NaN hue counts as 0."""
    hsl = np.asarray(hsl, dtype=np.float64)
    h = np.nan_to_num(hsl[..., 0]) % 360
    s = hsl[..., 1] / 100
    l = hsl[..., 2] / 100

    a = s * np.minimum(l, 1 - l)

    def channel(n: int) -> NDArray:
        k = (n + h / 30) % 12
        return l - a * np.maximum(-1, np.minimum(np.minimum(k - 3, 9 - k), 1))

    return np.stack([channel(0), channel(8), channel(4)], axis=-1)


def np_hsl_to_hsv(hsl: NDArray) -> NDArray:
    """Vectorized: Convert HSL to HSV. The hue passes through untouched."""
    hsl = np.asarray(hsl, dtype=np.float64)
    h = hsl[..., 0]
    s = hsl[..., 1] / 100
    l = hsl[..., 2] / 100

    v = l + s * np.minimum(l, 1 - l)
    with np.errstate(divide="ignore", invalid="ignore"):
        sv = np.where(v == 0, 0.0, 200 * (1 - l / v))

    return np.stack([h, sv, v * 100], axis=-1)


def np_hsv_to_hsl(hsv: NDArray) -> NDArray:
    """Vectorized: Convert HSV to HSL. The hue passes through untouched."""
    hsv = np.asarray(hsv, dtype=np.float64)
    h = hsv[..., 0]
    s = hsv[..., 1] / 100
    v = hsv[..., 2] / 100

    l = v * (1 - s / 2)
    with np.errstate(divide="ignore", invalid="ignore"):
        denom = np.minimum(l, 1 - l)
        sl = np.where((l == 0) | (l == 1) | (denom == 0), 0.0, (v - l) / denom * 100)

    return np.stack([h, sl, l * 100], axis=-1)


def np_rgb_to_hsv(rgb: NDArray) -> NDArray:
    return np_hsl_to_hsv(np_rgb_to_hsl(rgb))


def np_hsv_to_rgb(hsv: NDArray) -> NDArray:
    return np_hsl_to_rgb(np_hsv_to_hsl(hsv))
