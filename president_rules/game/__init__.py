"""Game logic."""

from .analyzer import Classification, ClassificationError, MoveClassifier, build_move
from .engine import PlayResult, RoundEngine, attempt_play
from .validator import PlayError, PlayValidator, ValidationResult

__all__ = [
    "Classification",
    "ClassificationError",
    "MoveClassifier",
    "build_move",
    "PlayResult",
    "RoundEngine",
    "attempt_play",
    "PlayError",
    "PlayValidator",
    "ValidationResult",
]
