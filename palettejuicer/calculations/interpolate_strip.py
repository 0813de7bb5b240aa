from __future__ import annotations
import dataclasses
from dataclasses import dataclass
from typing import ClassVar, Sequence

from ..colors.color import Color, color_steps
from ..conversions.interpolate import HueMode
from ..types.cel_types import CelIndex
from ..types.color_types import ColorKind
from ..utils.cel_utils import cel_strip
from .base import Calculation, CalculationCel


@dataclass(frozen=True)
class InterpolateStrip(Calculation):
    """
    Fills the row or column between two cels with a blend of their colors.

    The endpoints are inputs and are rewritten with their own colors as the
    first and last steps. Diagonal or zero-length strips produce nothing.
    """
    start_cel: CelIndex = CelIndex(0, 0)
    end_cel: CelIndex = CelIndex(0, 0)
    colorspace: ColorKind = ColorKind.OKLCH
    hue_mode: HueMode = HueMode.SHORTEST
    power_curve: float = 1.0

    kind: ClassVar[str] = "interpolate_strip"
    calc_name: ClassVar[str] = "Interpolate Strip"
    description: ClassVar[str] = "Creates a gradient strip between two selected color cels."
    editor: ClassVar[str] = "InterpolateStripEditor"

    def list_description(self) -> str:
        return (
            f"Interpolate Strip - {self.start_cel} to {self.end_cel} "
            f"in {self.colorspace.value}"
        )

    def input_cels(self, width: int, height: int) -> list[CelIndex]:
        return [self.start_cel, self.end_cel]

    def output_cels(self, width: int, height: int) -> list[CelIndex]:
        return cel_strip(self.start_cel, self.end_cel)

    def _compute(self, colors: Sequence[Color], width: int, height: int) -> list[CalculationCel]:
        outputs = self.output_cels(width, height)
        if not outputs:
            return []
        start, end = colors
        blended = color_steps(start, end, self.colorspace, len(outputs), self.hue_mode, self.power_curve)
        return [CalculationCel(index, color) for index, color in zip(outputs, blended)]

    def nudge_cel_indexes(self, dx: int, dy: int) -> InterpolateStrip:
        return dataclasses.replace(
            self,
            start_cel=self.start_cel.shifted(dx, dy),
            end_cel=self.end_cel.shifted(dx, dy),
        )
