"""
CIE Lab / LCh conversions.

Lab uses the D50 reference white; linear sRGB is D65, so XYZ goes through a
Bradford chromatic adaptation. Matrices are the CSS Color 4 ones.
"""
import numpy as np
from numpy import ndarray as NDArray

from ..defaults import LCH_ACHROMATIC_CHROMA

_LINEAR_SRGB_TO_XYZ_D65 = np.array([
    [0.41239079926595934, 0.357584339383878, 0.1804807884018343],
    [0.21263900587151027, 0.715168678767756, 0.07219231536073371],
    [0.01933081871559182, 0.11919477979462598, 0.9505321522496607],
])

_XYZ_D65_TO_LINEAR_SRGB = np.array([
    [3.2409699419045226, -1.537383177570094, -0.4986107602930034],
    [-0.9692436362808796, 1.8759675015077202, 0.04155505740717559],
    [0.05563007969699366, -0.20397695888897652, 1.0569715142428786],
])

_D65_TO_D50 = np.array([
    [1.0479297925449969, 0.022946870601609652, -0.05019226628920524],
    [0.02962780877005599, 0.9904344267538799, -0.017073799063418826],
    [-0.009243040646204504, 0.015055191490298152, 0.7518742814281371],
])

_D50_TO_D65 = np.array([
    [0.955473421488075, -0.02309845494876471, 0.06325924320057072],
    [-0.0283697093338637, 1.0099953980813041, 0.021041441191917323],
    [0.012314014864481998, -0.020507649298898964, 1.330365926242124],
])

D50_WHITE = np.array([0.3457 / 0.3585, 1.0, (1.0 - 0.3457 - 0.3585) / 0.3585])

_EPSILON = 216 / 24389
_KAPPA = 24389 / 27


def linear_srgb_to_xyz_d50(rgb: NDArray) -> NDArray:
    rgb = np.asarray(rgb, dtype=np.float64)
    return rgb @ _LINEAR_SRGB_TO_XYZ_D65.T @ _D65_TO_D50.T


def xyz_d50_to_linear_srgb(xyz: NDArray) -> NDArray:
    xyz = np.asarray(xyz, dtype=np.float64)
    return xyz @ _D50_TO_D65.T @ _XYZ_D65_TO_LINEAR_SRGB.T


def xyz_d50_to_lab(xyz: NDArray) -> NDArray:
    """Convert D50 XYZ to CIE Lab (L in [0, 100])."""
    scaled = np.asarray(xyz, dtype=np.float64) / D50_WHITE
    f = np.where(scaled > _EPSILON, np.cbrt(scaled), (_KAPPA * scaled + 16) / 116)
    L = 116 * f[..., 1] - 16
    a = 500 * (f[..., 0] - f[..., 1])
    b = 200 * (f[..., 1] - f[..., 2])
    return np.stack([L, a, b], axis=-1)


def lab_to_xyz_d50(lab: NDArray) -> NDArray:
    """Convert CIE Lab to D50 XYZ."""
    lab = np.asarray(lab, dtype=np.float64)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]
    f1 = (L + 16) / 116
    f0 = a / 500 + f1
    f2 = f1 - b / 200

    x = np.where(f0 ** 3 > _EPSILON, f0 ** 3, (116 * f0 - 16) / _KAPPA)
    y = np.where(L > _KAPPA * _EPSILON, f1 ** 3, L / _KAPPA)
    z = np.where(f2 ** 3 > _EPSILON, f2 ** 3, (116 * f2 - 16) / _KAPPA)
    return np.stack([x, y, z], axis=-1) * D50_WHITE


def linear_srgb_to_lab(rgb: NDArray) -> NDArray:
    return xyz_d50_to_lab(linear_srgb_to_xyz_d50(rgb))


def lab_to_linear_srgb(lab: NDArray) -> NDArray:
    return xyz_d50_to_linear_srgb(lab_to_xyz_d50(lab))


def rectangular_to_polar(lab: NDArray, achromatic_chroma: float) -> NDArray:
    """
    Convert (L, a, b) to (L, C, h) with h in degrees [0, 360).

    The hue is NaN when chroma is below ``achromatic_chroma``.
    Shared by Lab -> LCh and OkLab -> OkLCh.
    """
    lab = np.asarray(lab, dtype=np.float64)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]
    C = np.hypot(a, b)
    h = np.degrees(np.arctan2(b, a)) % 360
    h = np.where(C < achromatic_chroma, np.nan, h)
    return np.stack([L, C, h], axis=-1)


def polar_to_rectangular(lch: NDArray) -> NDArray:
    """Convert (L, C, h) to (L, a, b). A NaN hue counts as 0."""
    lch = np.asarray(lch, dtype=np.float64)
    L, C = lch[..., 0], lch[..., 1]
    h = np.radians(np.nan_to_num(lch[..., 2]))
    return np.stack([L, C * np.cos(h), C * np.sin(h)], axis=-1)


def lab_to_lch(lab: NDArray) -> NDArray:
    return rectangular_to_polar(lab, LCH_ACHROMATIC_CHROMA)


def lch_to_lab(lch: NDArray) -> NDArray:
    return polar_to_rectangular(lch)
