"""
Shared outline helpers for box drawing.

Point normalization (surface pixels -> rotation-aware normalized space),
the rescale primitives used at serialization time and the numeric
formatting used for every value placed into a render descriptor.
"""
from __future__ import annotations

import math
from logging import getLogger
from typing import List, Optional, Sequence, Tuple

logger = getLogger(__name__)

# Unit square drawn inside the box viewBox. Never recomputed: placement and
# size travel through the viewBox / transform only.
UNIT_SQUARE_PATH = "M0 0 H1 V1 H0 Z"

CARDINAL_ROTATIONS = (0, 90, 180, 270)

SVG_PRECISION = 4
_SVG_FACTOR = 10 ** SVG_PRECISION


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def normalize_point(
    x: float,
    y: float,
    parent_width: float,
    parent_height: float,
    rotation: int,
) -> Tuple[float, float]:
    """
    Map a pointer position (pixels, relative to the displayed surface) into
    the surface's local normalized frame.

    The mapping is the inverse of the per-rotation table used by
    `Shape.serialize`. Unknown rotations are treated like 0.
    """
    if rotation == 90:
        return (1 - y / parent_width, x / parent_height)
    if rotation == 180:
        return (1 - x / parent_width, 1 - y / parent_height)
    if rotation == 270:
        return (y / parent_width, 1 - x / parent_height)
    if rotation != 0:
        logger.debug(f"Unknown rotation {rotation}, normalizing as 0")
    return (x / parent_width, y / parent_height)


def rescale(
    points: Sequence[float],
    tx: float,
    ty: float,
    sx: float,
    sy: float,
    out: Optional[List[float]] = None,
) -> List[float]:
    """
    Apply (tx + u*sx, ty + v*sy) to a flat [u0, v0, u1, v1, ...] sequence.

    When `out` is given the result is written there (copy mode); otherwise a
    new list is returned.
    """
    if out is None:
        out = [0.0] * len(points)
    for i in range(0, len(points), 2):
        out[i] = tx + points[i] * sx
        out[i + 1] = ty + points[i + 1] * sy
    return out


def rescale_and_swap(
    points: Sequence[float],
    tx: float,
    ty: float,
    sx: float,
    sy: float,
    out: Optional[List[float]] = None,
) -> List[float]:
    """Same as `rescale`, but each point's axes are swapped first (90/270)."""
    if out is None:
        out = [0.0] * len(points)
    for i in range(0, len(points), 2):
        out[i] = tx + points[i + 1] * sx
        out[i + 1] = ty + points[i] * sy
    return out


def svg_round(value: float) -> str:
    """
    Round to 4 decimals (half up) and format without trailing zeros.

    0.2 -> "0.2", 150.0 -> "150", -0.00001 -> "0".
    """
    if math.isnan(value) or math.isinf(value):
        return format_number(value)
    rounded = math.floor(value * _SVG_FACTOR + 0.5) / _SVG_FACTOR
    text = f"{rounded:.{SVG_PRECISION}f}".rstrip("0").rstrip(".")
    if text in ("", "-0"):
        return "0"
    return text


def format_number(value: float) -> str:
    """
    Compact rendering of an unrounded scalar (matrix ratios, scale factors).

    Integral values print without a fractional part; division by a zero
    extent yields "Infinity"/"NaN" instead of raising.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def safe_ratio(numerator: float, denominator: float) -> float:
    """numerator / denominator with IEEE semantics for a zero denominator."""
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def format_view_box(values: Sequence[float]) -> str:
    return " ".join(svg_round(v) for v in values)
