from __future__ import annotations
import dataclasses
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Sequence

from ..colors.color import Color
from ..types.cel_types import CelIndex
from ..types.color_types import ColorKind
from ..utils.cel_utils import cel_strip
from ..utils.num_utils import positive_mod, steps
from .base import Calculation, CalculationCel


class ExtrapolateColorspace(str, Enum):
    OKLCH = "oklch"
    LCH = "lch"

    @property
    def kind(self) -> ColorKind:
        return ColorKind(self.value)


@dataclass(frozen=True)
class StripAdjustment:
    """
    Per-step offset for one channel along an extrapolated strip.

    At step ``t`` in [-1, 1] the offset is
    ``delta * |t| ** curve * sign(t) + mid_boost * (1 - |t| ** mid_curve)``.
    The boost term peaks in the middle of the strip and vanishes at its ends.
    Values are in display units.
    """
    delta: float = 0.0
    curve: float = 1.0
    mid_boost: float = 0.0
    mid_curve: float = 1.0

    def value_at_step(self, step: float) -> float:
        power = abs(step) ** self.curve * math.copysign(1.0, step) if step != 0 else 0.0
        mid_power = 1 - abs(step) ** self.mid_curve
        return self.delta * power + self.mid_boost * mid_power


@dataclass(frozen=True)
class ExtrapolateStrip(Calculation):
    """Builds a strip from one source color by offsetting lightness, chroma and hue."""
    input_cel: CelIndex = CelIndex(0, 0)
    start_cel: CelIndex = CelIndex(0, 0)
    end_cel: CelIndex = CelIndex(0, 0)
    colorspace: ExtrapolateColorspace = ExtrapolateColorspace.OKLCH
    adjust_lightness: StripAdjustment = field(default_factory=StripAdjustment)
    adjust_chroma: StripAdjustment = field(default_factory=StripAdjustment)
    adjust_hue: StripAdjustment = field(default_factory=StripAdjustment)

    kind: ClassVar[str] = "extrapolate_strip"
    calc_name: ClassVar[str] = "Extrapolate Strip"
    description: ClassVar[str] = "Creates a gradient strip by varying a single source color."
    editor: ClassVar[str] = "ExtrapolateStripEditor"

    def list_description(self) -> str:
        return f"Extrapolate Strip - {self.input_cel} over {self.start_cel} to {self.end_cel}"

    def input_cels(self, width: int, height: int) -> list[CelIndex]:
        return [self.input_cel]

    def output_cels(self, width: int, height: int) -> list[CelIndex]:
        return cel_strip(self.start_cel, self.end_cel)

    def _compute(self, colors: Sequence[Color], width: int, height: int) -> list[CalculationCel]:
        outputs = self.output_cels(width, height)
        if not outputs:
            return []

        source = colors[0].converted(self.colorspace.kind)
        space = source.data.__class__
        lightness, chroma, hue = source.data.values

        cels = []
        for index, step in zip(outputs, steps(-1, 1, len(outputs))):
            deltas = space.transformed_to_raw((
                self.adjust_lightness.value_at_step(step),
                self.adjust_chroma.value_at_step(step),
                self.adjust_hue.value_at_step(step),
            ))
            value = source.data.with_values((
                lightness + deltas[0],
                max(0.0, chroma + deltas[1]),
                positive_mod(hue + deltas[2], 360),
            ))
            cels.append(CalculationCel(index, source.with_value(value)))
        return cels

    def nudge_cel_indexes(self, dx: int, dy: int) -> ExtrapolateStrip:
        return dataclasses.replace(
            self,
            input_cel=self.input_cel.shifted(dx, dy),
            start_cel=self.start_cel.shifted(dx, dy),
            end_cel=self.end_cel.shifted(dx, dy),
        )
