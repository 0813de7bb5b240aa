"""Central place for palettejuicer default settings."""

# Palette grid
MIN_PALETTE_WIDTH: int = 1
MAX_PALETTE_WIDTH: int = 32
MIN_PALETTE_HEIGHT: int = 1
MAX_PALETTE_HEIGHT: int = 32
DEFAULT_PALETTE_WIDTH: int = 16
DEFAULT_PALETTE_HEIGHT: int = 16
DEFAULT_PALETTE_NAME: str = "Untitled"
DEFAULT_COLOR_RGB_INT: tuple[int, int, int] = (64, 64, 64)

# Import boundary
DEFAULT_IMPORT_WIDTH: int = 16
DEFAULT_IMPORT_SCALE: int = 255

# Gamut
GAMUT_ROUNDING_ERROR: float = 0.0001
GAMUT_SEARCH_EPSILON: float = 0.0001
CSS_GAMUT_JND: float = 0.02  # deltaEOK just-noticeable difference

# Achromatic thresholds, below which a hue is reported as undefined (NaN)
ACHROMATIC_EPSILON: float = 1e-9  # HSL/HSV channel spread
LCH_ACHROMATIC_CHROMA: float = 0.02
OKLCH_ACHROMATIC_CHROMA: float = 2e-4
OKHSX_ACHROMATIC_CHROMA: float = 1e-6

# Hex codec
MAX_HEX_LENGTH: int = 16

# Calculations
MAX_COPIES: int = 1024

# Color.describe()
DESCRIBE_DECIMALS: int = 1
