from .num_utils import clamp, out_of_range, positive_mod, steps, is_int
from .cel_utils import cel_strip, cel_rect

__all__ = [
    "clamp",
    "out_of_range",
    "positive_mod",
    "steps",
    "is_int",
    "cel_strip",
    "cel_rect",
]
