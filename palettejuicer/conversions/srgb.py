"""sRGB transfer functions (gamma encode/decode)."""
import numpy as np
from numpy import ndarray as NDArray


def srgb_to_linear(rgb: NDArray) -> NDArray:
    """
    Decode gamma-encoded sRGB to linear light.

    Sign-preserving, so out-of-gamut components round-trip instead of
    collapsing to NaN.

    Args:
        rgb: array-like of gamma-encoded sRGB components, nominally [0, 1]

    Returns:
        Linear-light components with the same shape
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    magnitude = np.abs(rgb)
    low = rgb / 12.92
    high = np.sign(rgb) * ((magnitude + 0.055) / 1.055) ** 2.4
    return np.where(magnitude <= 0.04045, low, high)


def linear_to_srgb(rgb: NDArray) -> NDArray:
    """Encode linear-light RGB with the sRGB gamma curve (sign-preserving)."""
    rgb = np.asarray(rgb, dtype=np.float64)
    magnitude = np.abs(rgb)
    low = rgb * 12.92
    high = np.sign(rgb) * (1.055 * magnitude ** (1 / 2.4) - 0.055)
    return np.where(magnitude <= 0.0031308, low, high)
