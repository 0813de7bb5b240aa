from __future__ import annotations
from typing import NamedTuple


class CelIndex(NamedTuple):
    """A palette cel addressed by column ``x`` and row ``y``."""
    x: int
    y: int

    def shifted(self, dx: int, dy: int) -> CelIndex:
        return CelIndex(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"[{self.x}, {self.y}]"
