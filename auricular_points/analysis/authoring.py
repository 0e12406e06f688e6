"""Author-mode helpers.

While authoring, every tap on the diagram is turned into a CSV-ready row so
coordinates can be pasted into the catalog file. Taps are quantized to a fixed
number of decimals to keep authored values stable.
"""

from __future__ import annotations

import math
from typing import Sequence

from auricular_points.analysis.matching import clamp_normalized


def quantize_coordinate(value: float, decimals: int = 3) -> float:
    """Round half away from zero to ``decimals`` places."""
    if decimals < 0:
        raise ValueError(f"decimals must be >= 0, got {decimals}")
    scale = 10 ** decimals
    scaled = abs(float(value)) * scale
    return math.copysign(math.floor(scaled + 0.5), value) / scale


def author_row(name: str, tap: Sequence[float], decimals: int = 3) -> str:
    """``name,x,y`` line for a tap, clamped to the unit square and quantized.

    The row is in the format read by ``parse_points_csv`` and belongs below the
    file's header line: on its own, a row whose name is a header label (e.g.
    ``Label``) is taken for the header and dropped.
    """
    label = name.strip()
    if not label:
        raise ValueError("Point name must be non-empty")
    if "," in label:
        raise ValueError(f"Point name must not contain a comma: {label!r}")
    x, y = clamp_normalized(tap[0], tap[1])
    qx = quantize_coordinate(x, decimals)
    qy = quantize_coordinate(y, decimals)
    return f"{label},{qx:.{decimals}f},{qy:.{decimals}f}"
