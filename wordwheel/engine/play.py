"""
Helpers for the game layer: guess classification and hint reveals.

The found-word set and revealed-index map belong to the caller. These
functions read them and return new values; they never mutate their inputs.
"""

import random
from typing import Callable, Dict, List, Optional, Set

from .models import Cell, GuessResult, LevelData

RevealedIndices = Dict[str, List[int]]


def check_guess(
    level: LevelData,
    word: str,
    found_words: Set[str],
    is_valid_word: Callable[[str], bool],
    min_length: int = 4,
) -> GuessResult:
    """
    Classify a submitted word.

    Args:
        level: The level being played
        word: The player's input (any case)
        found_words: Words already found in this level
        is_valid_word: Dictionary lookup used to tell bonus words from junk
        min_length: Shorter inputs are rejected as too short; pass the lexicon's
            min_word_length (WordEngine.check_guess does this)

    Returns:
        GuessResult with the outcome and whether the level is now complete
    """
    word = word.strip().lower()

    if len(word) < min_length:
        return GuessResult(word=word, outcome="too_short")

    if word in found_words:
        return GuessResult(word=word, outcome="already_found")

    if word in level.valid_words:
        complete = set(level.valid_words) <= (found_words | {word})
        return GuessResult(word=word, outcome="found", level_complete=complete)

    outcome = "bonus" if is_valid_word(word) else "invalid"
    return GuessResult(word=word, outcome=outcome)


def visible_cells(level: LevelData, found_words: Set[str], revealed: RevealedIndices) -> Set[Cell]:
    """Cells showing a letter: every cell of a found word plus revealed indices."""
    visible: Set[Cell] = set()
    for pw in level.placed_words:
        hints = revealed.get(pw.word, [])
        for i, cell in enumerate(pw.cells()):
            if pw.word in found_words or i in hints:
                visible.add(cell)
    return visible


def reveal_hint(
    level: LevelData,
    found_words: Set[str],
    revealed: RevealedIndices,
    rng: random.Random,
) -> Optional[RevealedIndices]:
    """
    Reveal one random hidden cell.

    The chosen cell's index is recorded for every word that covers it, so a
    crossing letter shows up in both words.

    Returns:
        A new revealed-index map, or None if every cell is already visible
    """
    visible = visible_cells(level, found_words, revealed)

    hidden: List[Cell] = []
    for pw in level.placed_words:
        for cell in pw.cells():
            if cell not in visible and cell not in hidden:
                hidden.append(cell)

    if not hidden:
        return None

    target = rng.choice(hidden)
    updated = {word: list(indices) for word, indices in revealed.items()}
    for pw in level.placed_words:
        for i, cell in enumerate(pw.cells()):
            if cell == target:
                updated.setdefault(pw.word, []).append(i)
    return updated
