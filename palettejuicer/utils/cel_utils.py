from ..types.cel_types import CelIndex


def cel_strip(start: CelIndex, end: CelIndex) -> list[CelIndex]:
    """
    Cels on the row or column from ``start`` to ``end``, both included.

    Diagonal or zero-length strips are empty.
    """
    x, y = round(start.x), round(start.y)
    diff_x = round(end.x) - x
    diff_y = round(end.y) - y
    length = abs(diff_x) + abs(diff_y)

    if length == 0 or (diff_x != 0 and diff_y != 0):
        return []

    step_x = (diff_x > 0) - (diff_x < 0)
    step_y = (diff_y > 0) - (diff_y < 0)
    return [CelIndex(x + i * step_x, y + i * step_y) for i in range(length + 1)]


def cel_rect(start: CelIndex, end: CelIndex) -> list[CelIndex]:
    """Cels of the rectangle spanned by ``start`` and ``end`` in row-major order. Empty if inverted."""
    return [
        CelIndex(x, y)
        for y in range(start.y, end.y + 1)
        for x in range(start.x, end.x + 1)
    ]
