"""Level generation engine for wordwheel."""

from .models import (
    Direction,
    Cell,
    GuessOutcome,
    EngineConfig,
    PlacedWord,
    LevelData,
    GuessResult,
)
from .lexicon import Lexicon, PRIORITY_WORDS, BLACKLIST, FALLBACK_WORDS
from .anagram import AnagramIndex, signature, is_subset_signature
from .roots import RootSelector, RootSelection, rank_pool
from .layout import Grid, LayoutEngine, Crossing, find_crossing
from .assembler import assemble_level, normalize
from .word_engine import WordEngine
from .play import check_guess, reveal_hint, visible_cells

__all__ = [
    "Direction",
    "Cell",
    "GuessOutcome",
    "EngineConfig",
    "PlacedWord",
    "LevelData",
    "GuessResult",
    "Lexicon",
    "PRIORITY_WORDS",
    "BLACKLIST",
    "FALLBACK_WORDS",
    "AnagramIndex",
    "signature",
    "is_subset_signature",
    "RootSelector",
    "RootSelection",
    "rank_pool",
    "Grid",
    "LayoutEngine",
    "Crossing",
    "find_crossing",
    "assemble_level",
    "normalize",
    "WordEngine",
    "check_guess",
    "reveal_hint",
    "visible_cells",
]
