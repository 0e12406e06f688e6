from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class EarPoint:
    """
    One authored reference point on the ear diagram.

    name: display label and matching key.
    body_part: same value as name for every catalog parsed from CSV (no richer
               authoring data exists yet).
    x, y: normalized image coordinates in [0, 1]; None if not yet authored.
    """
    name: str
    body_part: str
    x: Optional[float] = None
    y: Optional[float] = None

    @property
    def has_coordinates(self) -> bool:
        return self.x is not None and self.y is not None

    @property
    def display_label(self) -> str:
        """Body part if present, else name."""
        return self.body_part if self.body_part else self.name


@dataclass(frozen=True)
class PointCatalog:
    """
    Ordered, immutable set of points for one loaded source.

    Notes
    - points are sorted by case-insensitive name at parse time; the catalog never re-sorts.
    - warnings collects non-fatal findings from parsing (skipped rows, duplicate names, ...).
    - A reload builds a new catalog; nothing here mutates.
    """
    points: Tuple[EarPoint, ...] = ()
    source: Optional[str] = None
    warnings: Tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[EarPoint]:
        return iter(self.points)

    def __getitem__(self, index: int) -> EarPoint:
        return self.points[index]

    @property
    def is_empty(self) -> bool:
        return not self.points

    @property
    def names(self) -> List[str]:
        return [p.name for p in self.points]

    def located(self) -> List[EarPoint]:
        """Points with both coordinates, in catalog order."""
        return [p for p in self.points if p.has_coordinates]

    def get(self, name: str) -> Optional[EarPoint]:
        """First point with exactly this name (case-sensitive)."""
        for p in self.points:
            if p.name == name:
                return p
        return None

    def search(self, text: str) -> List[EarPoint]:
        """
        Case-insensitive substring filter on name or body part.

        An empty query returns every point.
        """
        if not text:
            return list(self.points)
        needle = text.casefold()
        return [p for p in self.points if needle in p.name.casefold() or needle in p.body_part.casefold()]

    def to_dataframe(self) -> pd.DataFrame:
        """Tabular view with NaN for absent coordinates."""
        return pd.DataFrame(
            {
                "name": [p.name for p in self.points],
                "body_part": [p.body_part for p in self.points],
                "x": np.array([np.nan if p.x is None else p.x for p in self.points], dtype=np.float64),
                "y": np.array([np.nan if p.y is None else p.y for p in self.points], dtype=np.float64),
            }
        )
