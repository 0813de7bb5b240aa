from __future__ import annotations
import dataclasses
from dataclasses import dataclass
from typing import ClassVar, Sequence

from ..colors.color import Color
from ..defaults import MAX_COPIES
from ..types.cel_types import CelIndex
from ..utils.cel_utils import cel_rect
from .base import Calculation, CalculationCel


@dataclass(frozen=True)
class CopyColors(Calculation):
    """
    Copies the rectangle ``start_cel``..``end_cel`` ``copies`` times.

    Copy ``k`` (1-based) lands ``k * offset`` away from the source. The source
    is read once and reused for every copy.
    """
    start_cel: CelIndex = CelIndex(0, 0)
    end_cel: CelIndex = CelIndex(0, 0)
    offset: CelIndex = CelIndex(0, 0)
    copies: int = 1

    kind: ClassVar[str] = "copy_colors"
    calc_name: ClassVar[str] = "Copy Colors"
    description: ClassVar[str] = "Duplicates a range of colors at a given offset."
    editor: ClassVar[str] = "CopyColorsEditor"

    @property
    def effective_copies(self) -> int:
        return max(0, min(self.copies, MAX_COPIES))

    def list_description(self) -> str:
        return (
            f"Copy Colors - {self.start_cel} {self.end_cel} "
            f"offset {self.offset} x{self.copies}"
        )

    def input_cels(self, width: int, height: int) -> list[CelIndex]:
        return cel_rect(self.start_cel, self.end_cel)

    def output_cels(self, width: int, height: int) -> list[CelIndex]:
        source = cel_rect(self.start_cel, self.end_cel)
        return [
            cel.shifted(self.offset.x * copy, self.offset.y * copy)
            for copy in range(1, self.effective_copies + 1)
            for cel in source
        ]

    def _compute(self, colors: Sequence[Color], width: int, height: int) -> list[CalculationCel]:
        outputs = self.output_cels(width, height)
        per_copy = len(colors)
        return [CalculationCel(index, colors[i % per_copy]) for i, index in enumerate(outputs)]

    def nudge_cel_indexes(self, dx: int, dy: int) -> CopyColors:
        return dataclasses.replace(
            self,
            start_cel=self.start_cel.shifted(dx, dy),
            end_cel=self.end_cel.shifted(dx, dy),
        )
