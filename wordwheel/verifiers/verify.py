"""
Level verification for generated puzzles.

Validates:
1. Vocabulary (every word fits the root letters, no duplicates, valid_words matches placement)
2. Grid conflicts (shared cells must hold one letter, claimed by at most two crossing words)
3. Geometry (normalized to the origin, tight bounds, all words connected)
4. No accidental words (every 2+ letter run on the grid is a placed word)
"""

from typing import Dict, List, Optional, Set

from ..engine.anagram import is_subset_signature, signature
from ..engine.lexicon import Lexicon
from ..engine.models import Cell, LevelData, PlacedWord
from .grid import Run, build_grid, render_grid, extract_runs
from .models import ValidationError, ValidationResult


def validate_vocabulary(level: LevelData) -> List[ValidationError]:
    """Check words against the root letters and the valid-word list."""
    errors: List[ValidationError] = []
    seen: Set[str] = set()

    for pw in level.placed_words:
        if pw.word in seen:
            errors.append(ValidationError(
                code="DUPLICATE_WORD",
                message=f"'{pw.word}' is placed more than once",
                word=pw.word
            ))
        seen.add(pw.word)

        if not is_subset_signature(signature(pw.word), level.root_letters):
            errors.append(ValidationError(
                code="NOT_SUBSET",
                message=f"'{pw.word}' uses letters outside the root letters '{level.root_letters}'",
                word=pw.word
            ))

    if len(level.valid_words) != len(set(level.valid_words)) or set(level.valid_words) != seen:
        errors.append(ValidationError(
            code="VALID_WORDS_MISMATCH",
            message=f"valid_words {sorted(level.valid_words)} differ from placed words {sorted(seen)}"
        ))

    return errors


def validate_crossings(claimants: Dict[Cell, List[PlacedWord]]) -> List[ValidationError]:
    """Shared cells must be claimed by exactly one horizontal and one vertical word."""
    errors: List[ValidationError] = []

    for cell, owners in claimants.items():
        if len(owners) > 2:
            errors.append(ValidationError(
                code="OVERCLAIMED_CELL",
                message=f"Cell {cell} is claimed by {len(owners)} words: {[o.word for o in owners]}",
                word=owners[-1].word
            ))
        elif len(owners) == 2 and owners[0].direction == owners[1].direction:
            errors.append(ValidationError(
                code="BAD_CROSSING",
                message=f"'{owners[0].word}' and '{owners[1].word}' share {cell} but are both {owners[0].direction}",
                word=owners[1].word
            ))

    return errors


def validate_geometry(level: LevelData) -> List[ValidationError]:
    """Check origin normalization and the reported grid size."""
    errors: List[ValidationError] = []
    placed = level.placed_words

    min_x = min(p.x for p in placed)
    min_y = min(p.y for p in placed)
    if min_x != 0 or min_y != 0:
        errors.append(ValidationError(
            code="NOT_NORMALIZED",
            message=f"Bounding box starts at ({min_x}, {min_y}) instead of (0, 0)"
        ))

    width = max(p.end_x for p in placed) - min_x + 1
    height = max(p.end_y for p in placed) - min_y + 1
    if (width, height) != (level.grid_width, level.grid_height):
        errors.append(ValidationError(
            code="BOUNDS_MISMATCH",
            message=f"Grid is {level.grid_width}x{level.grid_height} but words span {width}x{height}"
        ))

    return errors


def validate_connectivity(
    placed: List[PlacedWord],
    claimants: Dict[Cell, List[PlacedWord]],
) -> List[ValidationError]:
    """All placed words must be reachable from the first through shared cells."""
    neighbours: Dict[str, Set[str]] = {p.word: set() for p in placed}
    for owners in claimants.values():
        for a in owners:
            for b in owners:
                if a.word != b.word:
                    neighbours[a.word].add(b.word)

    reached = {placed[0].word}
    frontier = [placed[0].word]
    while frontier:
        for other in neighbours[frontier.pop()]:
            if other not in reached:
                reached.add(other)
                frontier.append(other)

    return [
        ValidationError(
            code="DISCONNECTED",
            message=f"'{p.word}' does not cross the rest of the puzzle",
            word=p.word
        )
        for p in placed if p.word not in reached
    ]


def validate_runs(placed: List[PlacedWord], grid: Dict[Cell, str]) -> List[ValidationError]:
    """Every run of letters on the grid must be exactly one placed word."""
    intended = {Run(p.word, p.x, p.y, p.direction) for p in placed}
    return [
        ValidationError(
            code="ACCIDENTAL_WORD",
            message=f"Accidental {run.direction} run '{run.word}' at ({run.x}, {run.y})",
            word=run.word
        )
        for run in extract_runs(grid)
        if run not in intended
    ]


def verify_level(level: LevelData, lexicon: Optional[Lexicon] = None) -> ValidationResult:
    """
    Main verification function: validates a generated level.

    Returns a ValidationResult with:
    - valid: True if the level passes all checks
    - errors: List of validation errors
    - warnings: Words missing from `lexicon`, when one is given
    - words: Placed words in placement order
    - grid: Rendered grid string
    """
    if not level.placed_words:
        return ValidationResult(
            valid=False,
            errors=[ValidationError(code="EMPTY_LEVEL", message="Level has no placed words")]
        )

    all_errors: List[ValidationError] = []
    all_warnings: List[ValidationError] = []
    placed = level.placed_words

    all_errors.extend(validate_vocabulary(level))

    grid, claimants, grid_errors = build_grid(placed)
    all_errors.extend(grid_errors)
    all_errors.extend(validate_crossings(claimants))
    all_errors.extend(validate_geometry(level))
    all_errors.extend(validate_connectivity(placed, claimants))
    all_errors.extend(validate_runs(placed, grid))

    if lexicon is not None:
        for pw in placed:
            if not lexicon.is_valid_word(pw.word):
                all_warnings.append(ValidationError(
                    code="INVALID_WORD",
                    message=f"'{pw.word}' is not in the dictionary",
                    word=pw.word
                ))

    return ValidationResult(
        valid=len(all_errors) == 0,
        errors=all_errors,
        warnings=all_warnings,
        words=[p.word for p in placed],
        grid=render_grid(grid),
        cells_used=len(grid),
    )
