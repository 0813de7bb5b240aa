"""
Okhsl / Okhsv conversions.

Reference: https://bottosson.github.io/posts/colorpicker/

Hue is in degrees [0, 360); saturation, lightness and value are in [0, 1].
The functions here take and return linear sRGB, matching the connection
space used by the rest of the conversion engine.
"""
import math
import numpy as np
from numpy import ndarray as NDArray

from ..defaults import OKHSX_ACHROMATIC_CHROMA
from .oklab import linear_srgb_to_oklab, oklab_to_linear_srgb

_FLT_MAX = 3.4028234663852886e38

# Toe constants
_K1 = 0.206
_K2 = 0.03
_K3 = (1 + _K1) / (1 + _K2)


def toe(x: float) -> float:
    """Map OkLab lightness to a lightness estimate closer to CIE Lab L."""
    return 0.5 * (_K3 * x - _K1 + math.sqrt((_K3 * x - _K1) ** 2 + 4 * _K2 * _K3 * x))


def toe_inv(x: float) -> float:
    return (x * x + _K1 * x) / (_K3 * (x + _K2))


def _oklab_to_linear(L: float, a: float, b: float) -> NDArray:
    return oklab_to_linear_srgb(np.array([L, a, b]))


def compute_max_saturation(a: float, b: float) -> float:
    """
    Find the maximum saturation S = C / L possible for a given hue that fits
    in sRGB. ``a`` and ``b`` must be normalized so a**2 + b**2 == 1.
    """
    # Select the RGB component that clips first and its polynomial fit.
    if -1.88170328 * a - 0.80936493 * b > 1:
        k0, k1, k2, k3, k4 = 1.19086277, 1.76576728, 0.59662641, 0.75515197, 0.56771245
        wl, wm, ws = 4.0767416621, -3.3077115913, 0.2309699292
    elif 1.81444104 * a - 1.19445276 * b > 1:
        k0, k1, k2, k3, k4 = 0.73956515, -0.45954404, 0.08285427, 0.12541070, 0.14503204
        wl, wm, ws = -1.2684380046, 2.6097574011, -0.3413193965
    else:
        k0, k1, k2, k3, k4 = 1.35733652, -0.00915799, -1.15130210, -0.50559606, 0.00692167
        wl, wm, ws = -0.0041960863, -0.7034186147, 1.7076147010

    S = k0 + k1 * a + k2 * b + k3 * a * a + k4 * a * b

    k_l = 0.3963377774 * a + 0.2158037573 * b
    k_m = -0.1055613458 * a - 0.0638541728 * b
    k_s = -0.0894841775 * a - 1.2914855480 * b

    # One step of Halley's method
    l_ = 1 + S * k_l
    m_ = 1 + S * k_m
    s_ = 1 + S * k_s

    l = l_ ** 3
    m = m_ ** 3
    s = s_ ** 3

    l_dS = 3 * k_l * l_ * l_
    m_dS = 3 * k_m * m_ * m_
    s_dS = 3 * k_s * s_ * s_

    l_dS2 = 6 * k_l * k_l * l_
    m_dS2 = 6 * k_m * k_m * m_
    s_dS2 = 6 * k_s * k_s * s_

    f = wl * l + wm * m + ws * s
    f1 = wl * l_dS + wm * m_dS + ws * s_dS
    f2 = wl * l_dS2 + wm * m_dS2 + ws * s_dS2

    return S - f * f1 / (f1 * f1 - 0.5 * f * f2)


def find_cusp(a: float, b: float) -> tuple[float, float]:
    """Return (L, C) of the most saturated in-gamut color for a hue."""
    S_cusp = compute_max_saturation(a, b)
    rgb_at_max = _oklab_to_linear(1, S_cusp * a, S_cusp * b)
    L_cusp = float(np.cbrt(1 / np.max(rgb_at_max)))
    return L_cusp, L_cusp * S_cusp


def find_gamut_intersection(
    a: float,
    b: float,
    L1: float,
    C1: float,
    L0: float,
    cusp: tuple[float, float] | None = None,
) -> float:
    """
    Find t such that (L0 * (1 - t) + t * L1, t * C1) lies on the sRGB gamut
    boundary, for the hue given by the normalized (a, b).
    """
    if cusp is None:
        cusp = find_cusp(a, b)
    L_cusp, C_cusp = cusp

    if ((L1 - L0) * C_cusp - (L_cusp - L0) * C1) <= 0:
        # Lower half
        return C_cusp * L0 / (C1 * L_cusp + C_cusp * (L0 - L1))

    # Upper half: first intersect with the triangle, then refine with Halley
    t = C_cusp * (L0 - 1) / (C1 * (L_cusp - 1) + C_cusp * (L0 - L1))

    dL = L1 - L0
    dC = C1

    k_l = 0.3963377774 * a + 0.2158037573 * b
    k_m = -0.1055613458 * a - 0.0638541728 * b
    k_s = -0.0894841775 * a - 1.2914855480 * b

    l_dt = dL + dC * k_l
    m_dt = dL + dC * k_m
    s_dt = dL + dC * k_s

    L = L0 * (1 - t) + t * L1
    C = t * C1

    l_ = L + C * k_l
    m_ = L + C * k_m
    s_ = L + C * k_s

    l = l_ ** 3
    m = m_ ** 3
    s = s_ ** 3

    ldt = 3 * l_dt * l_ * l_
    mdt = 3 * m_dt * m_ * m_
    sdt = 3 * s_dt * s_ * s_

    ldt2 = 6 * l_dt * l_dt * l_
    mdt2 = 6 * m_dt * m_dt * m_
    sdt2 = 6 * s_dt * s_dt * s_

    def step(wl: float, wm: float, ws: float) -> float:
        x = wl * l + wm * m + ws * s - 1
        x1 = wl * ldt + wm * mdt + ws * sdt
        x2 = wl * ldt2 + wm * mdt2 + ws * sdt2
        u = x1 / (x1 * x1 - 0.5 * x * x2)
        return -x * u if u >= 0 else _FLT_MAX

    t_r = step(4.0767416621, -3.3077115913, 0.2309699292)
    t_g = step(-1.2684380046, 2.6097574011, -0.3413193965)
    t_b = step(-0.0041960863, -0.7034186147, 1.7076147010)

    return t + min(t_r, t_g, t_b)


def to_st(cusp: tuple[float, float]) -> tuple[float, float]:
    L, C = cusp
    return C / L, C / (1 - L)


def get_st_mid(a: float, b: float) -> tuple[float, float]:
    """Smooth approximation of the cusp's (S, T), used for the mid saturation."""
    S = 0.11516993 + 1 / (
        7.44778970 + 4.15901240 * b
        + a * (-2.19557347 + 1.75198401 * b
               + a * (-2.13704948 - 10.02301043 * b
                      + a * (-4.24894561 + 5.38770819 * b + 4.69891013 * a)))
    )
    T = 0.11239642 + 1 / (
        1.61320320 - 0.68124379 * b
        + a * (0.40370612 + 0.90148123 * b
               + a * (-0.27087943 + 0.61223990 * b
                      + a * (0.00299215 - 0.45399568 * b - 0.14661872 * a)))
    )
    return S, T


def get_cs(L: float, a: float, b: float) -> tuple[float, float, float]:
    """Return (C_0, C_mid, C_max), the chroma anchors Okhsl saturation maps onto."""
    cusp = find_cusp(a, b)

    C_max = find_gamut_intersection(a, b, L, 1, L, cusp)
    S_max, T_max = to_st(cusp)

    # Scale factor compensating for the curved part of the gamut shape
    k = C_max / min(L * S_max, (1 - L) * T_max)

    S_mid, T_mid = get_st_mid(a, b)
    C_a = L * S_mid
    C_b = (1 - L) * T_mid
    C_mid = 0.9 * k * math.sqrt(math.sqrt(1 / (1 / C_a ** 4 + 1 / C_b ** 4)))

    # Chroma at saturation 0.8 for a hue-independent shape
    C_a = L * 0.4
    C_b = (1 - L) * 0.8
    C_0 = math.sqrt(1 / (1 / C_a ** 2 + 1 / C_b ** 2))

    return C_0, C_mid, C_max


def _hue_components(hue: float) -> tuple[float, float]:
    radians = math.radians(0.0 if math.isnan(hue) else hue)
    return math.cos(radians), math.sin(radians)


def _polar(lab: NDArray) -> tuple[float, float, float, float]:
    """Return (L, C, normalized a, normalized b) of an OkLab color."""
    L, a, b = (float(x) for x in lab)
    C = math.hypot(a, b)
    if C == 0:
        return L, C, 1.0, 0.0
    return L, C, a / C, b / C


def _hue_degrees(lab: NDArray, C: float) -> float:
    if C < OKHSX_ACHROMATIC_CHROMA:
        return math.nan
    return math.degrees(math.atan2(float(lab[2]), float(lab[1]))) % 360


# === Okhsl ===

def okhsl_to_linear_srgb(hsl: NDArray) -> NDArray:
    h, s, l = (float(x) for x in hsl)

    if l >= 1:
        return np.array([1.0, 1.0, 1.0])
    if l <= 0:
        return np.array([0.0, 0.0, 0.0])

    a_, b_ = _hue_components(h)
    L = toe_inv(l)

    if s <= 0:
        return _oklab_to_linear(L, 0.0, 0.0)

    C_0, C_mid, C_max = get_cs(L, a_, b_)

    mid = 0.8
    mid_inv = 1.25

    if s < mid:
        t = mid_inv * s
        k_1 = mid * C_0
        k_2 = 1 - k_1 / C_mid
        C = t * k_1 / (1 - k_2 * t)
    else:
        t = (s - mid) / (1 - mid)
        k_0 = C_mid
        k_1 = (1 - mid) * C_mid * C_mid * mid_inv * mid_inv / C_0
        k_2 = 1 - k_1 / (C_max - C_mid)
        C = k_0 + t * k_1 / (1 - k_2 * t)

    return _oklab_to_linear(L, C * a_, C * b_)


def linear_srgb_to_okhsl(rgb: NDArray) -> NDArray:
    lab = linear_srgb_to_oklab(rgb)
    L, C, a_, b_ = _polar(lab)
    h = _hue_degrees(lab, C)
    l = toe(L) if L > 0 else 0.0

    if C < OKHSX_ACHROMATIC_CHROMA or L <= 0 or L >= 1:
        return np.array([h, 0.0, l])

    C_0, C_mid, C_max = get_cs(L, a_, b_)

    mid = 0.8
    mid_inv = 1.25

    if C < C_mid:
        k_1 = mid * C_0
        k_2 = 1 - k_1 / C_mid
        t = C / (k_1 + k_2 * C)
        s = t * mid
    else:
        k_0 = C_mid
        k_1 = (1 - mid) * C_mid * C_mid * mid_inv * mid_inv / C_0
        k_2 = 1 - k_1 / (C_max - C_mid)
        t = (C - k_0) / (k_1 + k_2 * (C - k_0))
        s = mid + (1 - mid) * t

    return np.array([h, s, l])


# === Okhsv ===

def okhsv_to_linear_srgb(hsv: NDArray) -> NDArray:
    h, s, v = (float(x) for x in hsv)

    if v <= 0:
        return np.array([0.0, 0.0, 0.0])

    a_, b_ = _hue_components(h)

    cusp = find_cusp(a_, b_)
    S_max, T_max = to_st(cusp)
    S_0 = 0.5
    k = 1 - S_0 / S_max

    # Lightness and chroma along the triangle edge
    L_v = 1 - s * S_0 / (S_0 + T_max - T_max * k * s)
    C_v = s * T_max * S_0 / (S_0 + T_max - T_max * k * s)

    L = v * L_v
    C = v * C_v

    # Compensate for the toe and the curved top of the gamut
    L_vt = toe_inv(L_v)
    C_vt = C_v * L_vt / L_v

    L_new = toe_inv(L)
    C = C * L_new / L
    L = L_new

    rgb_scale = _oklab_to_linear(L_vt, a_ * C_vt, b_ * C_vt)
    scale_L = float(np.cbrt(1 / max(float(np.max(rgb_scale)), 1e-12)))

    L = L * scale_L
    C = C * scale_L

    return _oklab_to_linear(L, C * a_, C * b_)


def linear_srgb_to_okhsv(rgb: NDArray) -> NDArray:
    lab = linear_srgb_to_oklab(rgb)
    L, C, a_, b_ = _polar(lab)
    h = _hue_degrees(lab, C)

    if L <= 0:
        return np.array([h, 0.0, 0.0])
    if C < OKHSX_ACHROMATIC_CHROMA:
        return np.array([h, 0.0, toe(L)])

    cusp = find_cusp(a_, b_)
    S_max, T_max = to_st(cusp)
    S_0 = 0.5
    k = 1 - S_0 / S_max

    # Find the triangle edge point the color is scaled from
    t = T_max / (C + L * T_max)
    L_v = t * L
    C_v = t * C

    L_vt = toe_inv(L_v)
    C_vt = C_v * L_vt / L_v

    rgb_scale = _oklab_to_linear(L_vt, a_ * C_vt, b_ * C_vt)
    scale_L = float(np.cbrt(1 / max(float(np.max(rgb_scale)), 1e-12)))

    L = L / scale_L
    C = C / scale_L

    C = C * toe(L) / L
    L = toe(L)

    v = L / L_v
    s = (S_0 + T_max) * C_v / ((T_max * S_0) + T_max * k * C_v)

    return np.array([h, s, v])
