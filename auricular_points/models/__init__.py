from .points import EarPoint, PointCatalog
from .profile import QuizProfile
from .results import GradeOutcome, GradeSignal, MatchResult

__all__ = [
    "EarPoint",
    "PointCatalog",
    "QuizProfile",
    "GradeOutcome",
    "GradeSignal",
    "MatchResult",
]
