"""Grid building and rendering utilities."""

from typing import Dict, List, NamedTuple, Tuple

from ..engine.models import Cell, Direction, PlacedWord
from .models import ValidationError

_STEPS: Dict[Direction, Cell] = {"horizontal": (1, 0), "vertical": (0, 1)}


class Run(NamedTuple):
    """A maximal line of letters on the grid."""
    word: str
    x: int
    y: int
    direction: Direction


def build_grid(
    placed: List[PlacedWord],
) -> Tuple[Dict[Cell, str], Dict[Cell, List[PlacedWord]], List[ValidationError]]:
    """Build the grid and per-cell claimants, reporting letter conflicts."""
    grid: Dict[Cell, str] = {}
    claimants: Dict[Cell, List[PlacedWord]] = {}
    errors: List[ValidationError] = []

    for pw in placed:
        for i, letter in enumerate(pw.word):
            cell = pw.cell(i)

            if cell in grid and grid[cell] != letter:
                errors.append(ValidationError(
                    code="GRID_CONFLICT",
                    message=f"Cell conflict at {cell}: existing '{grid[cell]}' vs new '{letter}' from '{pw.word}'",
                    word=pw.word
                ))
            grid.setdefault(cell, letter)
            claimants.setdefault(cell, []).append(pw)

    return grid, claimants, errors


def grid_bounds(grid: Dict[Cell, str]) -> Tuple[Cell, Cell]:
    """Return the top-left and bottom-right occupied corners."""
    xs = [x for x, _ in grid]
    ys = [y for _, y in grid]
    return (min(xs), min(ys)), (max(xs), max(ys))


def render_grid(grid: Dict[Cell, str], empty: str = '.') -> str:
    """Render the grid row by row, `empty` marking unused cells."""
    if not grid:
        return ""

    (left, top), (right, bottom) = grid_bounds(grid)
    rows = []
    for y in range(top, bottom + 1):
        rows.append(''.join(grid.get((x, y), empty) for x in range(left, right + 1)))
    return '\n'.join(rows)


def extract_runs(grid: Dict[Cell, str]) -> List[Run]:
    """
    Find every maximal run of 2+ letters along either axis.

    A run starts at an occupied cell whose predecessor on that axis is empty
    and is followed until the next empty cell.
    """
    runs: List[Run] = []
    for direction, (dx, dy) in _STEPS.items():
        for start in sorted(grid):
            if (start[0] - dx, start[1] - dy) in grid:
                continue
            letters = []
            cell = start
            while cell in grid:
                letters.append(grid[cell])
                cell = (cell[0] + dx, cell[1] + dy)
            if len(letters) >= 2:
                runs.append(Run(''.join(letters), start[0], start[1], direction))
    return runs


def render_level(placed: List[PlacedWord], empty: str = '.') -> str:
    """Quick visualization of a list of placed words."""
    grid, _, _ = build_grid(placed)
    return render_grid(grid, empty)
