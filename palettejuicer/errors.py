"""Palette and calculation errors."""


class PaletteJuicerError(Exception):
    """Base class for palettejuicer errors."""
    pass


class PaletteDimensionError(PaletteJuicerError, ValueError):
    """Palette width or height is not an integer within the allowed bounds."""
    pass


class PaletteImportError(PaletteJuicerError, ValueError):
    """Imported color data is malformed. The message names the failing entry."""
    pass


class CalculationInputError(PaletteJuicerError, ValueError):
    """A calculation received a different number of colors than it declared."""
    pass
