from __future__ import annotations

import logging
import math
import re
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from auricular_points.models.points import EarPoint, PointCatalog


logger = logging.getLogger(__name__)

HEADER_LABELS = frozenset({"body part", "bodypart", "body_part", "structure", "name", "label"})

N_FIELDS = 3  # label, x, y

_LINE_SPLIT = re.compile(r"[\n\x0b\x0c\x85\u2028\u2029]+")
_DECIMAL = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)

_MAX_ROW_WARNINGS = 20


class PointsParseError(ValueError):
    """Source text cannot be decoded, or holds no usable rows when points are required."""


def _normalize_text(text: str) -> str:
    """Unify line endings, then drop a leading byte-order mark."""
    t = text.replace("\r\n", "\n").replace("\r", "\n")
    if t.startswith("\ufeff"):
        t = t[1:]
    return t


def _split_lines(text: str) -> List[str]:
    # Runs of newline characters collapse: blank lines never reach row parsing.
    return [ln for ln in _LINE_SPLIT.split(text) if ln]


def _unquote(field: str) -> str:
    s = field.strip()
    if len(s) >= 2 and s.startswith('"') and s.endswith('"'):
        s = s[1:-1]
    return s


def split_fields(line: str) -> List[str]:
    """
    Plain comma split keeping empty fields.

    No quoted-comma support: a comma inside quotes still splits.
    """
    return [_unquote(f) for f in line.split(",")]


def parse_coordinate(value: str) -> Optional[float]:
    """Decimal number or None. Non-finite spellings (nan, inf) are None."""
    s = value.strip()
    if not _DECIMAL.match(s):
        return None
    v = float(s)
    if not math.isfinite(v):
        return None
    return v


def _is_header(line: str) -> bool:
    cols = [c.lower() for c in split_fields(line)]
    return len(cols) >= 2 and cols[0] in HEADER_LABELS


def _decode(text: Union[str, bytes]) -> str:
    if isinstance(text, (bytes, bytearray)):
        try:
            return bytes(text).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise PointsParseError(f"Source is not valid UTF-8: {exc}") from exc
    return text


def parse_points_csv(
    text: Union[str, bytes],
    *,
    source: Optional[str] = None,
    require_points: bool = False,
) -> PointCatalog:
    """Parse ``label,x,y`` text into a sorted :class:`PointCatalog`.

    Parameters
    ----------
    text:
        Raw source text. Bytes are decoded as UTF-8.
    source:
        Identifier of where the text came from, kept on the catalog.
    require_points:
        If True, an empty result raises :class:`PointsParseError` instead of
        returning an empty catalog.

    Notes
    -----
    - An optional header row is recognised by its first column (see ``HEADER_LABELS``).
    - Blank lines and ``#`` comment lines are ignored.
    - Rows without a label are skipped; unparseable coordinates become None.
    - Points are sorted by case-insensitive name; equal names keep file order.
    """
    t = _normalize_text(_decode(text))
    lines = _split_lines(t)
    if not lines:
        if require_points:
            raise PointsParseError("Source is empty.")
        return PointCatalog(points=(), source=source)

    start = 1 if _is_header(lines[0]) else 0

    points: List[EarPoint] = []
    warnings: List[str] = []
    skipped = 0
    out_of_range = 0

    for rowno, raw in enumerate(lines[start:], start=start + 1):
        trimmed = raw.strip()
        if not trimmed or trimmed.startswith("#"):
            continue

        cols = split_fields(trimmed)
        # Pad/trim to exactly label, x, y
        if len(cols) < N_FIELDS:
            cols.extend([""] * (N_FIELDS - len(cols)))
        cols = cols[:N_FIELDS]

        label = cols[0]
        if not label:
            skipped += 1
            if skipped <= _MAX_ROW_WARNINGS:
                warnings.append(f"row {rowno}: empty name, row skipped")
            continue

        x = parse_coordinate(cols[1])
        y = parse_coordinate(cols[2])
        for axis, v in (("x", x), ("y", y)):
            if v is not None and not (0.0 <= v <= 1.0):
                out_of_range += 1
                if out_of_range <= _MAX_ROW_WARNINGS:
                    warnings.append(f"row {rowno}: {label!r} {axis}={v} outside [0, 1]")

        points.append(EarPoint(name=label, body_part=label, x=x, y=y))

    points.sort(key=lambda p: p.name.casefold())

    seen = set()
    dupes: List[str] = []
    for p in points:
        if p.name in seen and p.name not in dupes:
            dupes.append(p.name)
        seen.add(p.name)
    if dupes:
        warnings.append(f"duplicate point names (first in catalog order wins ties): {dupes}")
        logger.warning("Duplicate point names in %s: %s", source or "<text>", dupes)

    if skipped > _MAX_ROW_WARNINGS:
        warnings.append(f"... {skipped - _MAX_ROW_WARNINGS} more rows with empty names skipped")
    if out_of_range > _MAX_ROW_WARNINGS:
        warnings.append(f"... {out_of_range - _MAX_ROW_WARNINGS} more coordinates outside [0, 1]")

    logger.debug(
        "Parsed %d points from %s (header=%s, skipped=%d)",
        len(points), source or "<text>", bool(start), skipped,
    )

    if require_points and not points:
        raise PointsParseError("CSV parsed but contained no usable rows.")

    return PointCatalog(points=tuple(points), source=source, warnings=tuple(warnings))


def _format_coordinate(v: float) -> str:
    return "" if pd.isna(v) else repr(float(v))


def write_points_csv(catalog: PointCatalog, path: Union[str, Path]) -> Path:
    """
    Write the catalog as ``name,x,y`` with empty cells for absent coordinates.

    Every name is wrapped in one pair of double quotes and written verbatim,
    the only quoting the parser undoes, so inner quotes, surrounding spaces and
    a leading ``#`` survive. The output parses back to the same points.

    Raises
    ------
    ValueError
        If a name contains a comma or a line break (not representable).
    """
    p = Path(path).expanduser()
    df = catalog.to_dataframe()[["name", "x", "y"]]

    bad = [n for n in df["name"] if "," in n or "\r" in n or _LINE_SPLIT.search(n)]
    if bad:
        raise ValueError(f"Point names with commas or line breaks cannot be written: {bad[:5]}")

    rows = ["name,x,y"]
    for name, x, y in df.itertuples(index=False, name=None):
        rows.append(f'"{name}",{_format_coordinate(x)},{_format_coordinate(y)}')
    p.write_text("\n".join(rows) + "\n", encoding="utf-8")
    logger.info("Wrote %d points to %s", len(df), p)
    return p
