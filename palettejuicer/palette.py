from __future__ import annotations
import logging
import math
from typing import Iterable, Optional, Sequence, Tuple

from .calculations.base import Calculation
from .colors.color import Color
from .colors.rgb import RGB
from .defaults import (
    DEFAULT_COLOR_RGB_INT,
    DEFAULT_IMPORT_SCALE,
    DEFAULT_IMPORT_WIDTH,
    DEFAULT_PALETTE_HEIGHT,
    DEFAULT_PALETTE_NAME,
    DEFAULT_PALETTE_WIDTH,
    MAX_PALETTE_HEIGHT,
    MAX_PALETTE_WIDTH,
    MIN_PALETTE_HEIGHT,
    MIN_PALETTE_WIDTH,
)
from .errors import PaletteDimensionError, PaletteImportError
from .types.cel_types import CelIndex
from .utils.num_utils import clamp, is_int

logger = logging.getLogger(__name__)

DEFAULT_COLOR = Color(RGB.from_int(*DEFAULT_COLOR_RGB_INT))

IndexLike = Tuple[int, int]


def _validate_dimension(name: str, value: object, low: int, high: int) -> int:
    if not is_int(value):
        raise PaletteDimensionError(f"Palette {name} must be an integer, got {value!r}")
    value = int(value)  # type: ignore[call-overload]
    if not low <= value <= high:
        raise PaletteDimensionError(f"Palette {name} must be between {low} and {high}, got {value}")
    return value


class Palette:
    """
    A grid of base colors plus the calculations that derive more colors from it.

    ``base_colors`` holds the user's colors in row-major order.
    ``computed_colors`` is the overlay produced by running the enabled
    calculations in order; a cel with a computed color shows it instead of its
    base color while ``use_calculations`` is on. Palettes are immutable: every
    ``with_*`` method and ``resize`` return a new palette with the overlay
    already recomputed.

    >>> palette = Palette(4, 4)
    >>> palette.color((0, 0)).hex
    '#404040'
    >>> palette.index_to_offset((4, 0)) is None
    True
    """
    __slots__ = (
        '_palette_name',
        '_width',
        '_height',
        '_base_colors',
        '_computed_colors',
        '_calculations',
        '_use_calculations',
        '_export_start',
        '_export_end',
        '_is_frozen',
    )

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        width: int = DEFAULT_PALETTE_WIDTH,
        height: int = DEFAULT_PALETTE_HEIGHT,
        base_colors: Optional[Sequence[Color]] = None,
        calculations: Sequence[Calculation] = (),
        use_calculations: bool = True,
        palette_name: str = DEFAULT_PALETTE_NAME,
        export_start: Optional[IndexLike] = None,
        export_end: Optional[IndexLike] = None,
        *,
        _computed_colors: Optional[Tuple[Optional[Color], ...]] = None,
    ) -> None:
        width = _validate_dimension("width", width, MIN_PALETTE_WIDTH, MAX_PALETTE_WIDTH)
        height = _validate_dimension("height", height, MIN_PALETTE_HEIGHT, MAX_PALETTE_HEIGHT)
        size = width * height

        if base_colors is None:
            base_colors = (DEFAULT_COLOR,) * size
        if len(base_colors) != size:
            raise ValueError(f"A {width}x{height} palette needs {size} base colors, got {len(base_colors)}")

        self._palette_name = palette_name
        self._width = width
        self._height = height
        self._base_colors = tuple(base_colors)
        self._calculations = tuple(calculations)
        self._use_calculations = bool(use_calculations)
        self._export_start = self.clamp_index(export_start if export_start is not None else (0, 0))
        self._export_end = self.clamp_index(export_end if export_end is not None else (width - 1, height - 1))

        if _computed_colors is None:
            _computed_colors = self.compute_colors()
        self._computed_colors = tuple(_computed_colors)
        super().__setattr__('_is_frozen', True)

    def _replace(self, recompute: bool = True, **changes) -> Palette:
        fields = {
            "width": self._width,
            "height": self._height,
            "base_colors": self._base_colors,
            "calculations": self._calculations,
            "use_calculations": self._use_calculations,
            "palette_name": self._palette_name,
            "export_start": self._export_start,
            "export_end": self._export_end,
        }
        fields.update(changes)
        if not recompute:
            fields["_computed_colors"] = self._computed_colors
        return Palette(**fields)

    # ---- Properties ----

    @property
    def palette_name(self) -> str:
        return self._palette_name

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def base_colors(self) -> Tuple[Color, ...]:
        """Base colors in row-major order; the import/export boundary."""
        return self._base_colors

    @property
    def computed_colors(self) -> Tuple[Optional[Color], ...]:
        return self._computed_colors

    @property
    def calculations(self) -> Tuple[Calculation, ...]:
        return self._calculations

    @property
    def use_calculations(self) -> bool:
        return self._use_calculations

    @property
    def export_start(self) -> CelIndex:
        return self._export_start

    @property
    def export_end(self) -> CelIndex:
        return self._export_end

    def __repr__(self) -> str:
        return (
            f"Palette({self._palette_name!r}, {self._width}x{self._height}, "
            f"{len(self._calculations)} calculations)"
        )

    # ---- Bounds ----

    def index_in_bounds(self, index: IndexLike) -> bool:
        x, y = index
        return 0 <= x < self._width and 0 <= y < self._height

    def index_to_offset(self, index: IndexLike) -> Optional[int]:
        """Row-major offset of a cel, or None when it lies outside the grid."""
        if not self.index_in_bounds(index):
            return None
        x, y = index
        return y * self._width + x

    def offset_to_index(self, offset: int) -> Optional[CelIndex]:
        if not 0 <= offset < self._width * self._height:
            return None
        return CelIndex(offset % self._width, offset // self._width)

    def clamp_index(self, index: IndexLike) -> CelIndex:
        """Nearest in-bounds cel."""
        x, y = index
        return CelIndex(int(clamp(x, 0, self._width - 1)), int(clamp(y, 0, self._height - 1)))

    # ---- Reading ----

    def is_offset_computed(self, offset: int) -> bool:
        return self._use_calculations and self._computed_colors[offset] is not None

    def is_computed(self, index: IndexLike) -> bool:
        offset = self.index_to_offset(index)
        return offset is not None and self.is_offset_computed(offset)

    def base_color(self, index: IndexLike) -> Optional[Color]:
        offset = self.index_to_offset(index)
        return None if offset is None else self._base_colors[offset]

    def _offset_color(self, offset: int) -> Color:
        if self.is_offset_computed(offset):
            return self._computed_colors[offset]  # type: ignore[return-value]
        return self._base_colors[offset]

    def color(self, index: IndexLike) -> Optional[Color]:
        """The computed color of a cel if there is one, else its base color. None when out of bounds."""
        offset = self.index_to_offset(index)
        return None if offset is None else self._offset_color(offset)

    def colors(self) -> list[Color]:
        """Effective colors of every cel in row-major order."""
        return [self._offset_color(offset) for offset in range(self._width * self._height)]

    def export_colors(self) -> list[Color]:
        """Effective colors inside the export range, row-major."""
        start, end = self._export_start, self._export_end
        return [
            self._offset_color(y * self._width + x)
            for y in range(min(start.y, end.y), max(start.y, end.y) + 1)
            for x in range(min(start.x, end.x), max(start.x, end.x) + 1)
        ]

    # ---- Pipeline ----

    def compute_colors(self) -> list[Optional[Color]]:
        """
        Run the enabled calculations in order and return the overlay.

        Each calculation reads the current color of its input cels: the value
        an earlier calculation wrote in this run, else the base color. Later
        writes to a cel replace earlier ones. Output cels outside the grid are
        dropped, and a calculation with an input cel outside the grid is
        skipped.

        Returns:
            One entry per cel in row-major order; None where nothing was written
        """
        width, height = self._width, self._height
        overlay: list[Optional[Color]] = [None] * (width * height)

        for calc in self._calculations:
            if not calc.enabled:
                continue

            offsets = [self.index_to_offset(cel) for cel in calc.input_cels(width, height)]
            if any(offset is None for offset in offsets):
                logger.debug("Skipping %s: an input cel is outside the %dx%d grid",
                             calc.display_name(), width, height)
                continue

            inputs = [
                overlay[offset] if overlay[offset] is not None else self._base_colors[offset]
                for offset in offsets  # type: ignore[index]
            ]

            for index, color in calc.compute_colors(inputs, width, height):
                if color is None:
                    continue
                offset = self.index_to_offset(index)
                if offset is not None:
                    overlay[offset] = color

        logger.debug("Computed %d of %d cels from %d calculations",
                     sum(c is not None for c in overlay), len(overlay), len(self._calculations))
        return overlay

    # ---- Updates ----

    def with_name(self, name: str) -> Palette:
        return self._replace(recompute=False, palette_name=name)

    def with_base_color(self, index: IndexLike, color: Color) -> Palette:
        offset = self.index_to_offset(index)
        if offset is None:
            logger.warning("Ignoring base color for out-of-bounds cel %s", tuple(index))
            return self
        base_colors = list(self._base_colors)
        base_colors[offset] = color
        return self._replace(base_colors=base_colors)

    def with_use_calculations(self, enabled: bool) -> Palette:
        return self._replace(use_calculations=enabled)

    def with_export_range(self, start: IndexLike, end: IndexLike) -> Palette:
        return self._replace(recompute=False, export_start=start, export_end=end)

    def _calculation_index_valid(self, index: int, allow_end: bool = False) -> bool:
        limit = len(self._calculations) + (1 if allow_end else 0)
        if is_int(index) and 0 <= index < limit:
            return True
        logger.warning("Ignoring invalid calculation index %r", index)
        return False

    def with_calculation_added(self, index: int, calc: Calculation) -> Palette:
        """Insert ``calc`` at ``index``; ``index == len(calculations)`` appends."""
        if not self._calculation_index_valid(index, allow_end=True):
            return self
        calculations = list(self._calculations)
        calculations.insert(index, calc)
        return self._replace(calculations=calculations)

    def with_calculation_appended(self, calc: Calculation) -> Palette:
        return self.with_calculation_added(len(self._calculations), calc)

    def with_calculation_cloned(self, index: int) -> Palette:
        """Insert a copy with a fresh uid right after the calculation at ``index``."""
        if not self._calculation_index_valid(index):
            return self
        calculations = list(self._calculations)
        calculations.insert(index + 1, calculations[index].with_new_uid())
        return self._replace(calculations=calculations)

    def with_calculation_removed(self, index: int) -> Palette:
        if not self._calculation_index_valid(index):
            return self
        calculations = list(self._calculations)
        del calculations[index]
        return self._replace(calculations=calculations)

    def with_calculation_moved(self, index: int, new_index: int) -> Palette:
        if not (self._calculation_index_valid(index) and self._calculation_index_valid(new_index)):
            return self
        calculations = list(self._calculations)
        calculations.insert(new_index, calculations.pop(index))
        return self._replace(calculations=calculations)

    def with_calculation_set(self, index: int, calc: Calculation) -> Palette:
        if not self._calculation_index_valid(index):
            return self
        calculations = list(self._calculations)
        calculations[index] = calc
        return self._replace(calculations=calculations)

    def with_calculation_renamed(self, index: int, name: str) -> Palette:
        if not self._calculation_index_valid(index):
            return self
        calculations = list(self._calculations)
        calculations[index] = calculations[index].with_custom_name(name)
        return self._replace(recompute=False, calculations=calculations)

    def resize(self, new_width: int, new_height: int, offset_x: int = 0, offset_y: int = 0) -> Palette:
        """
        Change the grid size, shifting content by (offset_x, offset_y).

        Base colors whose shifted cel falls outside the new grid are dropped.
        Calculations and the export range are nudged by the same offset so
        they keep pointing at the same colors.

        Raises:
            PaletteDimensionError: if the new size is not allowed
        """
        new_width = _validate_dimension("width", new_width, MIN_PALETTE_WIDTH, MAX_PALETTE_WIDTH)
        new_height = _validate_dimension("height", new_height, MIN_PALETTE_HEIGHT, MAX_PALETTE_HEIGHT)

        base_colors = [DEFAULT_COLOR] * (new_width * new_height)
        for offset, color in enumerate(self._base_colors):
            x = offset % self._width + offset_x
            y = offset // self._width + offset_y
            if 0 <= x < new_width and 0 <= y < new_height:
                base_colors[y * new_width + x] = color

        calculations = [calc.nudge_cel_indexes(offset_x, offset_y) for calc in self._calculations]

        logger.debug("Resized palette %r from %dx%d to %dx%d (offset %d, %d)",
                     self._palette_name, self._width, self._height,
                     new_width, new_height, offset_x, offset_y)

        return self._replace(
            width=new_width,
            height=new_height,
            base_colors=base_colors,
            calculations=calculations,
            export_start=self._export_start.shifted(offset_x, offset_y),
            export_end=self._export_end.shifted(offset_x, offset_y),
        )

    # ---- Import ----

    @classmethod
    def from_rgb_triples(
        cls,
        triples: Iterable[Sequence[float]],
        width: int = DEFAULT_IMPORT_WIDTH,
        scale: float = DEFAULT_IMPORT_SCALE,
        palette_name: str = DEFAULT_PALETTE_NAME,
    ) -> Palette:
        """
        Build a palette from parsed ``(r, g, b)`` triples, row-major.

        Nothing is built unless every triple is valid, so a bad entry cannot
        leave a half-imported palette behind.

        Args:
            triples: Channel values in [0, scale]
            width: Palette width; fewer colors shrink it to fit
            scale: Channel maximum (255 for 8-bit files)
            palette_name: Name of the new palette

        Raises:
            PaletteImportError: naming the first bad entry (1-based)
            PaletteDimensionError: if ``width`` is not allowed
        """
        width = _validate_dimension("width", width, MIN_PALETTE_WIDTH, MAX_PALETTE_WIDTH)

        colors = []
        for number, triple in enumerate(triples, start=1):
            try:
                red, green, blue = (float(c) for c in triple)
            except (TypeError, ValueError) as exc:
                raise PaletteImportError(f"Entry {number}: expected three numbers, got {triple!r}") from exc
            for channel in (red, green, blue):
                if not math.isfinite(channel) or not 0 <= channel <= scale:
                    raise PaletteImportError(
                        f"Entry {number}: channel value {channel!r} is outside 0-{scale}"
                    )
            colors.append(Color(RGB((red / scale, green / scale, blue / scale))))

        if not colors:
            raise PaletteImportError("No colors to import")

        width = min(width, len(colors))
        height = math.ceil(len(colors) / width)
        if height > MAX_PALETTE_HEIGHT:
            raise PaletteImportError(
                f"{len(colors)} colors do not fit a palette {width} wide "
                f"(at most {width * MAX_PALETTE_HEIGHT})"
            )

        logger.debug("Imported %d colors into a %dx%d palette", len(colors), width, height)
        colors.extend([DEFAULT_COLOR] * (width * height - len(colors)))
        return cls(width, height, base_colors=colors, palette_name=palette_name)
