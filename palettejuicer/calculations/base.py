from __future__ import annotations
import dataclasses
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, NamedTuple, Optional, Sequence

from ..colors.color import Color
from ..errors import CalculationInputError
from ..types.cel_types import CelIndex


def new_uid() -> str:
    """Random 128-bit identifier, as 32 hex digits."""
    return uuid.uuid4().hex


class CalculationCel(NamedTuple):
    """One computed cel. A None color means the cel is left as it was."""
    index: CelIndex
    color: Optional[Color]


@dataclass(frozen=True)
class Calculation(ABC):
    """
    A declarative transform over palette cels.

    A calculation names the cels it reads (``input_cels``) and writes
    (``output_cels``) from its own parameters and the grid size alone, and
    computes the written colors from the current colors of the read cels.
    Instances are frozen; edits go through ``dataclasses.replace`` or the
    ``with_*`` helpers. ``uid`` identifies a calculation independently of its
    position and only changes through ``with_new_uid``.
    """
    uid: str = field(default_factory=new_uid)
    enabled: bool = True
    custom_name: str = ""

    kind: ClassVar[str] = "calculation"
    calc_name: ClassVar[str] = "Calculation"
    description: ClassVar[str] = ""
    editor: ClassVar[str] = ""

    @abstractmethod
    def input_cels(self, width: int, height: int) -> list[CelIndex]:
        """Cels whose current colors ``compute_colors`` needs, in order."""

    @abstractmethod
    def output_cels(self, width: int, height: int) -> list[CelIndex]:
        """Cels this calculation may write. Geometry only."""

    @abstractmethod
    def _compute(self, colors: Sequence[Color], width: int, height: int) -> list[CalculationCel]:
        ...

    @abstractmethod
    def nudge_cel_indexes(self, dx: int, dy: int) -> Calculation:
        """Copy with every stored cel shifted by (dx, dy)."""

    @abstractmethod
    def list_description(self) -> str:
        """One-line summary for calculation lists."""

    def compute_colors(self, colors: Sequence[Color], width: int, height: int) -> list[CalculationCel]:
        """
        Compute output colors from the current colors of ``input_cels``.

        Args:
            colors: One color per input cel, in ``input_cels`` order
            width: Palette width
            height: Palette height

        Returns:
            (cel, color) pairs; every cel is one of ``output_cels``

        Raises:
            CalculationInputError: if ``colors`` does not match ``input_cels``
        """
        expected = len(self.input_cels(width, height))
        if len(colors) != expected:
            raise CalculationInputError(
                f"{self.calc_name} expects {expected} input colors, got {len(colors)}"
            )
        return self._compute(colors, width, height)

    def display_name(self) -> str:
        return self.custom_name or self.list_description()

    def with_new_uid(self) -> Calculation:
        return dataclasses.replace(self, uid=new_uid())

    def with_custom_name(self, name: str) -> Calculation:
        return dataclasses.replace(self, custom_name=name)

    def with_enabled(self, enabled: bool) -> Calculation:
        return dataclasses.replace(self, enabled=enabled)
