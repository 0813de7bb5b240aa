from __future__ import annotations
from typing import Any

from .base import Calculation
from .copy_colors import CopyColors
from .extrapolate_strip import ExtrapolateStrip
from .gamut_map import GamutMap
from .interpolate_strip import InterpolateStrip


def build_registry(*classes: type[Calculation]) -> dict[str, type[Calculation]]:
    return {cls.kind: cls for cls in classes}


CALCULATION_REGISTRY: dict[str, type[Calculation]] = build_registry(
    CopyColors,
    InterpolateStrip,
    ExtrapolateStrip,
    GamutMap,
)

# Kind tag -> identifier of the property editor a UI shows for it
EDITOR_REGISTRY: dict[str, str] = {kind: cls.editor for kind, cls in CALCULATION_REGISTRY.items()}


def calculation_class(kind: str) -> type[Calculation]:
    """Look up a calculation class by kind tag. Unknown tags raise KeyError."""
    return CALCULATION_REGISTRY[kind]


def editor_for(kind: str) -> str:
    return EDITOR_REGISTRY[kind]


def create_calculation(kind: str, **params: Any) -> Calculation:
    """Instantiate the calculation registered under ``kind`` with ``params``."""
    return calculation_class(kind)(**params)
