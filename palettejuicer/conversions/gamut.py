"""Gamut queries and gamut mapping into sRGB.

Strategies:
- clip: Hard-clip RGB to [0, 1]. Fast but can shift hue and lightness
- lch.c / oklch.c: Reduce chroma until in gamut, keeping lightness and hue
- css: CSS Color 4 gamut mapping (OkLCh chroma reduction bounded by deltaEOK)

Every strategy works on arrays of shape (N, 3) so a whole region is searched
in one pass; the scalar helpers wrap a single row.
"""
from enum import Enum

import numpy as np
from numpy import ndarray as NDArray

from ..defaults import CSS_GAMUT_JND, GAMUT_ROUNDING_ERROR, GAMUT_SEARCH_EPSILON
from ..types.color_types import ColorKind, ColorTriple, HUE_CHANNEL_INDEX
from ..utils.num_utils import out_of_range
from .wrapper import np_convert


class GamutMapAlgorithm(str, Enum):
    CSS = "css"
    LCH_CHROMA = "lch.c"
    OKLCH_CHROMA = "oklch.c"
    CLIP = "clip"


GAMUT_MAP_NAMES: dict[GamutMapAlgorithm, str] = {
    GamutMapAlgorithm.CSS: "CSS 4",
    GamutMapAlgorithm.LCH_CHROMA: "LCH Chroma",
    GamutMapAlgorithm.OKLCH_CHROMA: "OkLCH Chroma",
    GamutMapAlgorithm.CLIP: "Clipping",
}

_CHROMA_SEARCH_STEPS = 24


def out_of_gamut_distance(rgb: ColorTriple) -> float:
    """Largest distance by which any sRGB component lies outside [0, 1]."""
    return max(out_of_range(float(c), 0.0, 1.0) for c in rgb)


def np_out_of_gamut_distance(rgb: NDArray) -> NDArray:
    """Vectorized: ``out_of_gamut_distance`` over the last axis."""
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.max(np.maximum(0.0, np.maximum(-rgb, rgb - 1.0)), axis=-1)


def np_in_gamut(values: NDArray, kind: ColorKind, tolerance: float = GAMUT_ROUNDING_ERROR) -> NDArray:
    """Vectorized: boolean mask of the rows of ``values`` that land inside sRGB."""
    return np_out_of_gamut_distance(np_convert(values, kind, ColorKind.RGB)) <= tolerance


def in_gamut(values: ColorTriple, kind: ColorKind, tolerance: float = GAMUT_ROUNDING_ERROR) -> bool:
    """Check whether a color of ``kind`` lands inside sRGB."""
    rgb = np_convert(values, kind, ColorKind.RGB)
    return out_of_gamut_distance(rgb) <= tolerance


def _clip_oklch(oklch: NDArray) -> NDArray:
    rgb = np.clip(np_convert(oklch, ColorKind.OKLCH, ColorKind.RGB), 0.0, 1.0)
    return np_convert(rgb, ColorKind.RGB, ColorKind.OKLCH)


def _delta_e_oklch(a: NDArray, b: NDArray) -> NDArray:
    diff = np_convert(a, ColorKind.OKLCH, ColorKind.OKLAB) - np_convert(b, ColorKind.OKLCH, ColorKind.OKLAB)
    return np.sqrt(np.sum(diff ** 2, axis=-1))


def _css_map(oklch: NDArray) -> NDArray:
    """CSS Color 4 gamut mapping. Input and output are OkLCh rows."""
    origin = np.array(oklch, dtype=np.float64)
    current = origin.copy()
    clipped = _clip_oklch(current)

    too_light = origin[:, 0] >= 1
    too_dark = origin[:, 0] <= 0
    done = too_light | too_dark | (_delta_e_oklch(clipped, current) < CSS_GAMUT_JND)

    low = np.zeros(len(origin))
    high = origin[:, 1].copy()
    low_in_gamut = np.ones(len(origin), dtype=bool)

    while True:
        active = ~done & (high - low > GAMUT_SEARCH_EPSILON)
        if not active.any():
            break

        chroma = (low + high) / 2
        current[active, 1] = chroma[active]

        inside = active & low_in_gamut & np_in_gamut(current, ColorKind.OKLCH)
        low = np.where(inside, chroma, low)

        searching = active & ~inside
        step_clipped = _clip_oklch(current)
        clipped[searching] = step_clipped[searching]
        error = _delta_e_oklch(step_clipped, current)

        close = searching & (error < CSS_GAMUT_JND)
        done |= close & (CSS_GAMUT_JND - error < GAMUT_SEARCH_EPSILON)
        moving = close & ~done
        low_in_gamut &= ~moving
        low = np.where(moving, chroma, low)
        high = np.where(searching & ~close, chroma, high)

    clipped[too_light] = np.stack(
        [np.ones(too_light.sum()), np.zeros(too_light.sum()), origin[too_light, 2]], axis=-1)
    clipped[too_dark] = np.stack(
        [np.zeros(too_dark.sum()), np.zeros(too_dark.sum()), origin[too_dark, 2]], axis=-1)
    return clipped


def _reduce_chroma(lch: NDArray, kind: ColorKind, max_lightness: float) -> NDArray:
    """Binary search for the largest in-gamut chroma of each row at fixed lightness and hue."""
    lch = np.array(lch, dtype=np.float64)
    low = np.zeros(len(lch))
    high = lch[:, 1].copy()
    candidate = lch.copy()

    for _ in range(_CHROMA_SEARCH_STEPS):
        candidate[:, 1] = (low + high) / 2
        inside = np_in_gamut(candidate, kind)
        low = np.where(inside, candidate[:, 1], low)
        high = np.where(inside, high, candidate[:, 1])
    candidate[:, 1] = low

    too_light = lch[:, 0] >= max_lightness
    too_dark = lch[:, 0] <= 0
    candidate[too_light, 0] = max_lightness
    candidate[too_dark, 0] = 0.0
    candidate[too_light | too_dark, 1] = 0.0
    return candidate


def _map_lch_chroma(values: NDArray, kind: ColorKind) -> NDArray:
    lch = np_convert(values, kind, ColorKind.LCH)
    return np_convert(_reduce_chroma(lch, ColorKind.LCH, 100.0), ColorKind.LCH, ColorKind.RGB)


def _map_oklch_chroma(values: NDArray, kind: ColorKind) -> NDArray:
    oklch = np_convert(values, kind, ColorKind.OKLCH)
    return np_convert(_reduce_chroma(oklch, ColorKind.OKLCH, 1.0), ColorKind.OKLCH, ColorKind.RGB)


def _map_css(values: NDArray, kind: ColorKind) -> NDArray:
    oklch = np_convert(values, kind, ColorKind.OKLCH)
    oklch[:, 2] = np.nan_to_num(oklch[:, 2])
    return np_convert(_css_map(oklch), ColorKind.OKLCH, ColorKind.RGB)


def _map_clip(values: NDArray, kind: ColorKind) -> NDArray:
    return np_convert(values, kind, ColorKind.RGB)


GAMUT_MAPPERS = {
    GamutMapAlgorithm.CSS: _map_css,
    GamutMapAlgorithm.LCH_CHROMA: _map_lch_chroma,
    GamutMapAlgorithm.OKLCH_CHROMA: _map_oklch_chroma,
    GamutMapAlgorithm.CLIP: _map_clip,
}


def np_to_gamut(
    values: NDArray,
    kind: ColorKind,
    algorithm: GamutMapAlgorithm = GamutMapAlgorithm.CSS,
) -> NDArray:
    """
    Vectorized: map rows of ``kind`` into sRGB and return them in the same kind.

    Rows already in gamut come back unchanged. Mapped rows finish with a hard
    clip, which only removes the residue left by the search tolerance. An
    undefined hue in a mapped result keeps the row's original hue.

    Args:
        values: array of shape (N, 3) in ``kind``'s raw ranges
        kind: colorspace kind of ``values``
        algorithm: mapping strategy

    Returns:
        array of shape (N, 3), every row in gamut
    """
    values = np.array(values, dtype=np.float64).reshape(-1, 3)
    result = values.copy()
    outside = ~np_in_gamut(values, kind)
    if not outside.any():
        return result

    algorithm = GamutMapAlgorithm(algorithm)
    rgb = np.clip(GAMUT_MAPPERS[algorithm](values[outside], kind), 0.0, 1.0)
    mapped = np_convert(rgb, ColorKind.RGB, kind)

    hue_index = HUE_CHANNEL_INDEX.get(kind)
    if hue_index is not None:
        undefined = np.isnan(mapped[:, hue_index])
        mapped[undefined, hue_index] = values[outside][undefined, hue_index]

    result[outside] = mapped
    return result


def to_gamut(
    values: ColorTriple,
    kind: ColorKind,
    algorithm: GamutMapAlgorithm = GamutMapAlgorithm.CSS,
) -> ColorTriple:
    """
    Map a color of ``kind`` into sRGB and return it in the same kind.

    In-gamut input is returned unchanged, so mapping twice equals mapping once.
    """
    if in_gamut(values, kind):
        return tuple(values)  # type: ignore[return-value]
    row = np_to_gamut(np.array([values]), kind, algorithm)[0]
    return (float(row[0]), float(row[1]), float(row[2]))
