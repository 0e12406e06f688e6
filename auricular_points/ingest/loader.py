"""File and bundled-resource loading for point catalogs.

The parser itself does no I/O. This module is the collaborator that reads raw
text, hands it to :func:`~auricular_points.ingest.points_csv.parse_points_csv`
and turns the outcome into a :class:`LoadResult`:

- read/decoding failure -> no catalog, "Failed reading CSV: ..."
- parsed but empty      -> empty catalog, "check header names and delimiter"
- otherwise             -> catalog, no error

:class:`PointCatalogStore` holds the active catalog and swaps it atomically.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Optional, Union

from auricular_points.ingest.points_csv import PointsParseError, parse_points_csv
from auricular_points.models.points import PointCatalog


logger = logging.getLogger(__name__)

DEFAULT_RESOURCE = "Auricular_Points"

EMPTY_CATALOG_MESSAGE = (
    "CSV parsed but contained no rows.\n"
    "Check header names and delimiter (comma/semicolon/tab)."
)


@dataclass(frozen=True)
class LoadResult:
    """Outcome of one load attempt.

    catalog is None only when the source could not be read or decoded.
    error is a user-facing message, None on a clean load.
    """
    source: str
    catalog: Optional[PointCatalog]
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.catalog is not None and self.error is None


def read_source_text(path: Union[str, Path]) -> str:
    """Read a CSV file as UTF-8. OSError / UnicodeDecodeError propagate."""
    p = Path(path).expanduser()
    return p.read_text(encoding="utf-8")


def bundled_resource_text(name: str = DEFAULT_RESOURCE) -> str:
    """Text of ``data/<name>.csv`` shipped with the package."""
    res = resources.files("auricular_points.ingest").joinpath("data").joinpath(f"{name}.csv")
    if not res.is_file():
        raise FileNotFoundError(f"No bundled resource {name}.csv")
    return res.read_text(encoding="utf-8")


def _parse_result(source: str, text: str) -> LoadResult:
    try:
        catalog = parse_points_csv(text, source=source)
    except PointsParseError as exc:
        logger.warning("Failed parsing %s: %s", source, exc)
        return LoadResult(source=source, catalog=None, error=f"Failed reading CSV: {exc}")

    for w in catalog.warnings:
        logger.debug("%s: %s", source, w)

    if catalog.is_empty:
        logger.warning("%s parsed but produced no points", source)
        return LoadResult(source=source, catalog=catalog, error=EMPTY_CATALOG_MESSAGE)

    logger.info("Loaded %d points from %s", len(catalog), source)
    return LoadResult(source=source, catalog=catalog)


def load_points_file(path: Union[str, Path]) -> LoadResult:
    """Read and parse an arbitrary CSV file. Never raises for I/O failures."""
    source = str(Path(path).expanduser())
    try:
        text = read_source_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Failed reading %s: %s", source, exc)
        return LoadResult(source=source, catalog=None, error=f"Failed reading CSV: {exc}")
    return _parse_result(source, text)


def load_bundled_points(name: str = DEFAULT_RESOURCE) -> LoadResult:
    """Read and parse ``<name>.csv`` from the package data."""
    source = f"{name}.csv"
    try:
        text = bundled_resource_text(name)
    except FileNotFoundError:
        logger.warning("Bundled resource %s not found", source)
        return LoadResult(source=source, catalog=None, error=f"Couldn't find {name}.csv in the package data.")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Failed reading bundled %s: %s", source, exc)
        return LoadResult(source=source, catalog=None, error=f"Failed reading CSV: {exc}")
    return _parse_result(source, text)


class PointCatalogStore:
    """
    Holder for the active catalog.

    Starts empty; nothing is loaded on construction. Replacement is atomic:
    readers get either the whole previous catalog or the whole new one.
    A failed read leaves the previous catalog in place and only sets load_error.
    """

    def __init__(self, catalog: Optional[PointCatalog] = None) -> None:
        self._lock = threading.Lock()
        self._catalog = catalog if catalog is not None else PointCatalog()
        self._load_error: Optional[str] = None

    @property
    def catalog(self) -> PointCatalog:
        with self._lock:
            return self._catalog

    @property
    def load_error(self) -> Optional[str]:
        with self._lock:
            return self._load_error

    def replace(self, catalog: PointCatalog) -> None:
        with self._lock:
            self._catalog = catalog
            self._load_error = None

    def apply(self, result: LoadResult) -> LoadResult:
        with self._lock:
            if result.catalog is not None:
                self._catalog = result.catalog
            self._load_error = result.error
        return result

    def load_file(self, path: Union[str, Path]) -> LoadResult:
        return self.apply(load_points_file(path))

    def load_bundled(self, name: str = DEFAULT_RESOURCE) -> LoadResult:
        return self.apply(load_bundled_points(name))
