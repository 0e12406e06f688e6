"""Matching and grading package.

Design principle:
  - Ingest produces immutable :class:`~auricular_points.models.points.PointCatalog` objects.
  - Analysis consumes a catalog plus a normalized query and returns plain result values.

Everything here is pure: no I/O, no state beyond the arguments.
"""

from .authoring import author_row, quantize_coordinate
from .matching import DEFAULT_TOLERANCE, clamp_normalized, grade_guess, nearest_point

__all__ = [
    "DEFAULT_TOLERANCE",
    "clamp_normalized",
    "grade_guess",
    "nearest_point",
    "author_row",
    "quantize_coordinate",
]
