from __future__ import annotations
import dataclasses
from dataclasses import dataclass
from typing import ClassVar, Optional, Sequence

import numpy as np

from ..colors.color import Color
from ..conversions.gamut import GamutMapAlgorithm, GAMUT_MAP_NAMES, np_to_gamut
from ..types.cel_types import CelIndex
from ..types.color_types import ColorKind
from ..utils.cel_utils import cel_rect
from .base import Calculation, CalculationCel


@dataclass(frozen=True)
class GamutMap(Calculation):
    """
    Pulls out-of-gamut colors of a region, or of the whole palette, into sRGB.

    Cels already in gamut are reported with a None color and left untouched.
    """
    start_cel: CelIndex = CelIndex(0, 0)
    end_cel: CelIndex = CelIndex(0, 0)
    algorithm: GamutMapAlgorithm = GamutMapAlgorithm.CSS
    entire_palette: bool = False

    kind: ClassVar[str] = "gamut_map"
    calc_name: ClassVar[str] = "Gamut Map to sRGB"
    description: ClassVar[str] = "Maps out-of-gamut colors to be within sRGB range."
    editor: ClassVar[str] = "GamutMapEditor"

    def list_description(self) -> str:
        method = GAMUT_MAP_NAMES[self.algorithm]
        if self.entire_palette:
            return f"Gamut Map to sRGB - entire palette ({method})"
        return f"Gamut Map to sRGB - {self.start_cel} to {self.end_cel} ({method})"

    def input_cels(self, width: int, height: int) -> list[CelIndex]:
        if self.entire_palette:
            return cel_rect(CelIndex(0, 0), CelIndex(width - 1, height - 1))
        return cel_rect(self.start_cel, self.end_cel)

    def output_cels(self, width: int, height: int) -> list[CelIndex]:
        return self.input_cels(width, height)

    def _compute(self, colors: Sequence[Color], width: int, height: int) -> list[CalculationCel]:
        mapped: list[Optional[Color]] = [None] * len(colors)
        by_kind: dict[ColorKind, list[int]] = {}
        for position, color in enumerate(colors):
            if not color.in_gamut():
                by_kind.setdefault(color.kind, []).append(position)

        # One vectorized search per colorspace kind
        for kind, positions in by_kind.items():
            rows = np_to_gamut(np.array([colors[p].data.values for p in positions]), kind, self.algorithm)
            for position, row in zip(positions, rows):
                color = colors[position]
                values = (float(row[0]), float(row[1]), float(row[2]))
                mapped[position] = color.with_value(color.data.with_values(values))

        return [CalculationCel(index, color) for index, color in zip(self.output_cels(width, height), mapped)]

    def nudge_cel_indexes(self, dx: int, dy: int) -> GamutMap:
        return dataclasses.replace(
            self,
            start_cel=self.start_cel.shifted(dx, dy),
            end_cel=self.end_cel.shifted(dx, dy),
        )
