"""Channel interpolation with hue path control."""
from __future__ import annotations

import math
from enum import IntEnum
from typing import Optional

from ..types.color_types import ColorKind, ColorTriple, HUE_CHANNEL_INDEX


class HueMode(IntEnum):
    """Which way around the hue circle an interpolation travels."""
    CW = 0          # always increasing
    CCW = 1         # always decreasing
    SHORTEST = 2
    LONGEST = 3
    RAW = 4         # unwrapped, straight numeric blend


def adjust_hues(h0: float, h1: float, mode: HueMode) -> tuple[float, float]:
    """
    Rewrite two hue angles so that a plain linear blend follows ``mode``.

    Args:
        h0: Start hue in degrees
        h1: End hue in degrees
        mode: Hue path

    Returns:
        (h0, h1), possibly offset by 360
    """
    if mode == HueMode.RAW:
        return h0, h1

    h0 %= 360
    h1 %= 360
    delta = h1 - h0

    if mode == HueMode.CW:
        if h1 < h0:
            h1 += 360
    elif mode == HueMode.CCW:
        if h0 < h1:
            h0 += 360
    elif mode == HueMode.SHORTEST:
        if delta > 180:
            h0 += 360
        elif delta < -180:
            h1 += 360
    elif mode == HueMode.LONGEST:
        if 0 < delta < 180:
            h0 += 360
        elif -180 < delta <= 0:
            h1 += 360

    return h0, h1


def progression(num_steps: int, power_curve: float = 1.0) -> list[float]:
    """
    Return ``num_steps`` eased parameters from 0 to 1 inclusive.

    Each evenly spaced ``p`` becomes ``p ** power_curve``.
    """
    if num_steps <= 0:
        return []
    if num_steps == 1:
        return [0.0]
    return [(i / (num_steps - 1)) ** power_curve for i in range(num_steps)]


def interpolate_values(
    start: ColorTriple,
    end: ColorTriple,
    t: float,
    hue_index: Optional[int] = None,
    hue_mode: HueMode = HueMode.SHORTEST,
) -> ColorTriple:
    """
    Blend two colors of the same kind channel by channel.

    An undefined hue on one side borrows the other side's hue; when both are
    undefined the result hue is 0.
    """
    result = []
    for i, (a, b) in enumerate(zip(start, end)):
        if i == hue_index:
            if math.isnan(a) and math.isnan(b):
                a = b = 0.0
            elif math.isnan(a):
                a = b
            elif math.isnan(b):
                b = a
            a, b = adjust_hues(a, b, hue_mode)
            value = (a + (b - a) * t) % 360
        else:
            value = a + (b - a) * t
        result.append(value)
    return (result[0], result[1], result[2])


def value_steps(
    start: ColorTriple,
    end: ColorTriple,
    kind: ColorKind,
    num_steps: int,
    hue_mode: HueMode = HueMode.SHORTEST,
    power_curve: float = 1.0,
) -> list[ColorTriple]:
    """Interpolate ``num_steps`` colors of ``kind`` from ``start`` to ``end`` inclusive."""
    hue_index = HUE_CHANNEL_INDEX.get(kind)
    return [
        interpolate_values(start, end, t, hue_index, hue_mode)
        for t in progression(num_steps, power_curve)
    ]
