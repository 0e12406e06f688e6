from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from auricular_points.models.points import EarPoint, PointCatalog
from auricular_points.models.results import GradeOutcome, GradeSignal, MatchResult


DEFAULT_TOLERANCE = 0.04

Query = Tuple[float, float]


def _as_query(query: Sequence[float]) -> Query:
    if len(query) != 2:
        raise ValueError(f"Query must be an (x, y) pair, got {query!r}")
    qx, qy = float(query[0]), float(query[1])
    if not (math.isfinite(qx) and math.isfinite(qy)):
        raise ValueError(f"Query coordinates must be finite, got ({qx}, {qy})")
    return qx, qy


def clamp_normalized(x: float, y: float) -> Query:
    """Clamp a tap into the unit square."""
    return min(max(float(x), 0.0), 1.0), min(max(float(y), 0.0), 1.0)


def nearest_point(catalog: PointCatalog, query: Sequence[float]) -> Optional[MatchResult]:
    """Nearest point with both coordinates to a normalized query.

    Parameters
    ----------
    catalog:
        Points to search. Points without coordinates are never candidates.
    query:
        ``(x, y)`` in normalized units.

    Returns
    -------
    MatchResult or None
        None when no point has coordinates. On exact distance ties the point
        that comes first in catalog order wins.
    """
    qx, qy = _as_query(query)
    candidates = catalog.located()
    if not candidates:
        return None

    xs = np.fromiter((p.x for p in candidates), dtype=np.float64, count=len(candidates))
    ys = np.fromiter((p.y for p in candidates), dtype=np.float64, count=len(candidates))
    d = np.hypot(qx - xs, qy - ys)

    # argmin returns the first index among equal minima
    i = int(np.argmin(d))
    return MatchResult(point=candidates[i], distance=float(d[i]))


def grade_guess(
    catalog: PointCatalog,
    query: Optional[Sequence[float]],
    guess: Union[str, EarPoint],
    tolerance: float = DEFAULT_TOLERANCE,
) -> Union[GradeOutcome, GradeSignal]:
    """Grade a guessed point name against the point nearest to the query.

    The guess is correct only if its name equals the nearest point's name
    (case-sensitive) and that point lies within ``tolerance`` (inclusive).

    Returns
    -------
    GradeOutcome, or
    GradeSignal.NO_QUERY when no query has been made yet,
    GradeSignal.NO_REFERENCE_DATA when no point has coordinates.
    """
    tol = float(tolerance)
    if not (0.0 < tol <= 1.0):
        raise ValueError(f"tolerance must be in (0, 1], got {tolerance}")

    if query is None:
        return GradeSignal.NO_QUERY

    match = nearest_point(catalog, query)
    if match is None:
        return GradeSignal.NO_REFERENCE_DATA

    guess_name = guess.name if isinstance(guess, EarPoint) else str(guess)
    correct = guess_name == match.point.name and match.distance <= tol
    return GradeOutcome(
        correct=correct,
        nearest=match.point,
        distance=match.distance,
        guess_name=guess_name,
        tolerance=tol,
    )
