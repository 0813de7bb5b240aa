import numpy as np


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def out_of_range(value: float, low: float, high: float) -> float:
    """Distance by which ``value`` lies outside [low, high]; 0 when inside."""
    return max(0.0, low - value, value - high)


def positive_mod(value: float, modulus: float) -> float:
    """Modulo with a result in [0, modulus), also for negative input."""
    return ((value % modulus) + modulus) % modulus


def steps(start: float, end: float, num_steps: int) -> list[float]:
    """``num_steps`` evenly spaced values from ``start`` to ``end`` inclusive."""
    if num_steps <= 0:
        return []
    if num_steps == 1:
        return [float(start)]
    return [float(v) for v in np.linspace(start, end, num_steps)]


def is_int(value: object) -> bool:
    """True for real integers; bools do not count."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))
