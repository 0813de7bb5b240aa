"""Hex string codec for sRGB colors."""
import math
import string
from typing import Optional

from ..defaults import MAX_HEX_LENGTH
from ..types.color_types import ColorTriple

_VALID_LENGTHS = (3, 4, 6, 8)


def parse_hex(text: str) -> Optional[ColorTriple]:
    """
    Parse a hex color string into gamma-encoded sRGB in [0, 1].

    Accepts 3, 4, 6 or 8 hex digits with or without a leading ``#``, in any
    case. A trailing alpha digit or pair is ignored.

    Returns:
        (r, g, b), or None when the string is not a hex color
    """
    if not isinstance(text, str) or len(text) > MAX_HEX_LENGTH:
        return None

    digits = text.strip()
    if digits.startswith("#"):
        digits = digits[1:]

    if len(digits) not in _VALID_LENGTHS:
        return None
    if any(c not in string.hexdigits for c in digits):
        return None

    if len(digits) <= 4:
        digits = "".join(c * 2 for c in digits[:3])
    else:
        digits = digits[:6]

    return tuple(int(digits[i:i + 2], 16) / 255 for i in (0, 2, 4))  # type: ignore[return-value]


def rgb_to_int(rgb: ColorTriple) -> tuple[int, int, int]:
    """Scale [0, 1] sRGB to clamped 0-255 integers."""
    def to_byte(c: float) -> int:
        if math.isnan(c):
            return 0
        return max(0, min(255, int(round(c * 255))))

    r, g, b = rgb
    return to_byte(r), to_byte(g), to_byte(b)


def format_hex(rgb: ColorTriple) -> str:
    """Format [0, 1] sRGB as lowercase ``#rrggbb``, clamping out-of-gamut channels."""
    r, g, b = rgb_to_int(rgb)
    return f"#{r:02x}{g:02x}{b:02x}"
