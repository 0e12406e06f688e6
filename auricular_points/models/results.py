from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from auricular_points.models.points import EarPoint


@dataclass(frozen=True)
class MatchResult:
    """Nearest located point to a query and its Euclidean distance (normalized units)."""

    point: EarPoint
    distance: float


@dataclass(frozen=True)
class GradeOutcome:
    """Verdict for one guess.

    Attributes
    ----------
    correct:
        True iff the guessed name equals the nearest point's name and the
        distance is within tolerance.
    nearest:
        Nearest located point to the query.
    distance:
        Distance from the query to ``nearest``.
    guess_name:
        Name the user picked.
    tolerance:
        Tolerance used for this grading call.
    """

    correct: bool
    nearest: EarPoint
    distance: float
    guess_name: str
    tolerance: float

    @property
    def message(self) -> str:
        answer = f"{self.nearest.name} ({self.nearest.body_part})"
        if self.correct:
            return f"Correct: {answer}"
        return f"Incorrect. You chose {self.guess_name}.\nCorrect: {answer}"


class GradeSignal(str, Enum):
    """Expected conditions under which no grade can be produced."""

    NO_QUERY = "no-query"
    NO_REFERENCE_DATA = "no-reference-data"

    @property
    def message(self) -> str:
        if self is GradeSignal.NO_QUERY:
            return "Tap a location on the ear first."
        return "No reference coordinates stored yet."
