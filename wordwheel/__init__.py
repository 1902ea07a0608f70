"""wordwheel: letter-wheel crossword level generation."""

from .engine import WordEngine, EngineConfig, LevelData, PlacedWord
from .verifiers import verify_level, ValidationResult

__all__ = [
    "WordEngine",
    "EngineConfig",
    "LevelData",
    "PlacedWord",
    "verify_level",
    "ValidationResult",
]
