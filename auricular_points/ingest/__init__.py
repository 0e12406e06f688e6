"""Ingest package - point catalog parsing and loading.

This package handles:
- Parsing free-form CSV text (``label,x,y``) into a PointCatalog
- Writing catalogs back to CSV for authoring
- Reading CSV files and the bundled default catalog
- Holding the active catalog with atomic replacement

Design principle:
- The parser is pure; all file access lives in ``loader``
- Malformed rows are skipped, only undecodable text is an error
- An empty catalog is reported separately from a read failure
"""

from .loader import (
    LoadResult,
    PointCatalogStore,
    load_bundled_points,
    load_points_file,
)
from .points_csv import PointsParseError, parse_points_csv, write_points_csv

__all__ = [
    "LoadResult",
    "PointCatalogStore",
    "load_bundled_points",
    "load_points_file",
    "PointsParseError",
    "parse_points_csv",
    "write_points_csv",
]
