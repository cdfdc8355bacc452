"""
Ouidah Flow Map — Visual Scales
Map captive counts to circle radii (square root) and flow line widths (log10).
"""
import math
from dataclasses import dataclass
from typing import Callable, Iterable


def _is_missing_or_nonpositive(value) -> bool:
    if value is None:
        return True
    try:
        num = float(value)
    except (TypeError, ValueError):
        return True
    return math.isnan(num) or num <= 0


@dataclass(frozen=True)
class ScaleState:
    """Value range shared by every symbol and line on the map."""

    min_positive: float
    max_value: float

    @classmethod
    def from_values(cls, values: Iterable[float]) -> "ScaleState":
        """Build the range from all volumes; non-positive and missing values are ignored."""
        positives = [float(v) for v in values if not _is_missing_or_nonpositive(v)]
        if not positives:
            return cls(min_positive=0.0, max_value=0.0)
        return cls(min_positive=min(positives), max_value=max(positives))

    @property
    def is_degenerate(self) -> bool:
        return self.min_positive <= 0


def create_size_scale(
    max_value: float,
    min_radius: float = 4,
    max_radius: float = 25,
) -> Callable[[float], float]:
    """
    Circle radius proportional to the square root of the value, so that the
    circle *area* encodes the count.
    """
    max_root = math.sqrt(max_value or 1)

    def size_scale(value) -> float:
        if _is_missing_or_nonpositive(value):
            return min_radius
        ratio = math.sqrt(float(value)) / max_root
        return min_radius + (max_radius - min_radius) * ratio

    return size_scale


def create_line_width_fn(
    min_positive: float,
    max_value: float,
    min_width: float = 1,
    max_width: float = 10,
) -> Callable[[float], float]:
    """
    Line width on a log10 scale between min_positive and max_value, clamped
    to [min_width, max_width].

    All-equal volumes give a zero log span; those lines get max_width.
    Without any positive volume every line is min_width.
    """
    if min_positive is None or min_positive <= 0 or not max_value or max_value <= 0:
        return lambda total: min_width

    min_log = math.log10(min_positive)
    max_log = math.log10(max_value)
    span = max_log - min_log

    def line_width(total) -> float:
        if _is_missing_or_nonpositive(total):
            return min_width
        if span == 0:
            ratio = 1.0
        else:
            ratio = (math.log10(float(total)) - min_log) / span
        ratio = max(0.0, min(1.0, ratio))
        return min_width + ratio * (max_width - min_width)

    return line_width
