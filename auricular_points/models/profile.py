"""Quiz profile -- bundles the user-adjustable quiz configuration.

A QuizProfile groups the parameters that change how a session behaves into
one frozen dataclass. It can be:

- Overridden field-by-field via ``dataclasses.replace()``
- Serialized to/from a dict for persisting user preferences
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class QuizProfile:
    """Frozen configuration for grading and authoring.

    Fields
    ------
    tolerance_percent : float
        Grading tolerance as a percentage of the normalized coordinate span.
        The interactive layer offers 1..10 in 0.5 steps; 4.0 is the reference.
    resource_name : str
        Bundled catalog loaded when no file is chosen (without ``.csv``).
    author_decimals : int
        Decimals kept when quantizing author-mode taps.
    """

    tolerance_percent: float = 4.0
    resource_name: str = "Auricular_Points"
    author_decimals: int = 3

    def __post_init__(self) -> None:
        if not (0.0 < float(self.tolerance_percent) <= 100.0):
            raise ValueError(f"tolerance_percent must be in (0, 100], got {self.tolerance_percent}")
        if not self.resource_name:
            raise ValueError("resource_name must be non-empty")
        if int(self.author_decimals) < 0:
            raise ValueError(f"author_decimals must be >= 0, got {self.author_decimals}")

    @property
    def tolerance(self) -> float:
        """Tolerance in normalized units (e.g. 0.04 for 4 %)."""
        return float(self.tolerance_percent) / 100.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> QuizProfile:
        """Reconstruct from a dict; unknown keys are ignored."""
        known = {k: v for k, v in d.items() if k in cls.__dataclass_fields__}
        return cls(**known)
