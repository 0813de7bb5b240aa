"""
OkLab / OkLCh conversions.

Reference: https://bottosson.github.io/posts/oklab/
"""
import numpy as np
from numpy import ndarray as NDArray

from ..defaults import OKLCH_ACHROMATIC_CHROMA
from .lab import rectangular_to_polar, polar_to_rectangular

# === OkLab <-> Linear RGB matrices ===
# From Björn Ottosson's reference implementation

# Linear RGB -> LMS
RGB_TO_LMS = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

# LMS cube root -> OkLab
LMS_TO_OKLAB = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

# OkLab -> LMS cube root
OKLAB_TO_LMS = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
])

# LMS -> Linear RGB
LMS_TO_RGB = np.array([
    [+4.0767416621, -3.3077115913, +0.2309699292],
    [-1.2684380046, +2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, +1.7076147010],
])


def linear_srgb_to_oklab(rgb: NDArray) -> NDArray:
    """Linear RGB -> OkLab via LMS intermediate."""
    rgb = np.asarray(rgb, dtype=np.float64)
    lms = rgb @ RGB_TO_LMS.T
    # Sign-preserving cube root for out-of-gamut input
    return np.cbrt(lms) @ LMS_TO_OKLAB.T


def oklab_to_linear_srgb(lab: NDArray) -> NDArray:
    """OkLab -> Linear RGB via LMS intermediate."""
    lab = np.asarray(lab, dtype=np.float64)
    lms = (lab @ OKLAB_TO_LMS.T) ** 3
    return lms @ LMS_TO_RGB.T


def oklab_to_oklch(lab: NDArray) -> NDArray:
    return rectangular_to_polar(lab, OKLCH_ACHROMATIC_CHROMA)


def oklch_to_oklab(lch: NDArray) -> NDArray:
    return polar_to_rectangular(lch)


def delta_e_ok(lab1: NDArray, lab2: NDArray) -> float:
    """Euclidean distance between two OkLab colors."""
    diff = np.asarray(lab1, dtype=np.float64) - np.asarray(lab2, dtype=np.float64)
    return float(np.sqrt(np.sum(diff ** 2, axis=-1)))
