"""
Greedy crossword layout.

Words are placed one at a time on a sparse grid. Each new word must cross an
already placed word at a shared letter, perpendicular to it, without touching
any other word along the way.
"""

import logging
from typing import Dict, List, NamedTuple, Optional, Tuple
from pydantic import BaseModel, Field

from .models import Cell, Direction, PlacedWord

logger = logging.getLogger(__name__)

# (dx, dy, axis the neighbour lies along, True if it sits before the cell)
_NEIGHBOURS: List[Tuple[int, int, Direction, bool]] = [
    (-1, 0, "horizontal", True),
    (1, 0, "horizontal", False),
    (0, -1, "vertical", True),
    (0, 1, "vertical", False),
]


class Crossing(NamedTuple):
    """Where a candidate would go to cross a placed word."""
    x: int
    y: int
    direction: Direction
    intersection: Cell


def perpendicular(direction: Direction) -> Direction:
    return "vertical" if direction == "horizontal" else "horizontal"


class Grid(BaseModel):
    """
    Sparse letter grid with per-cell claimants.

    A cell holds one letter and is claimed by at most two words, which then
    cross there.
    """

    cells: Dict[Cell, str] = Field(default_factory=dict)
    claimants: Dict[Cell, List[str]] = Field(default_factory=dict)

    def __contains__(self, cell: Cell) -> bool:
        return cell in self.cells

    def get(self, cell: Cell) -> Optional[str]:
        return self.cells.get(cell)

    def can_place(
        self,
        word: str,
        x: int,
        y: int,
        direction: Direction,
        intersection: Cell,
    ) -> bool:
        """Check that `word` anchored at (x, y) only meets the grid at `intersection`."""
        last = len(word) - 1

        for i, char in enumerate(word):
            cell = (x + i, y) if direction == "horizontal" else (x, y + i)
            is_intersection = cell == intersection

            existing = self.get(cell)
            if existing is not None:
                if existing != char:
                    return False
                if len(self.claimants.get(cell, [])) >= 2:
                    return False
                if not is_intersection:
                    return False

            for dx, dy, axis, before in _NEIGHBOURS:
                if (cell[0] + dx, cell[1] + dy) not in self:
                    continue
                if axis == direction:
                    # Letters just outside either end would extend the word
                    if before and i == 0:
                        return False
                    if not before and i == last:
                        return False
                elif not is_intersection:
                    return False

        return True

    def place(self, placed: PlacedWord) -> None:
        """Write a word's letters and register it as claimant of each cell."""
        for i, char in enumerate(placed.word):
            cell = placed.cell(i)
            existing = self.get(cell)
            assert existing is None or existing == char, (
                f"Cell {cell} holds '{existing}', cannot write '{char}' from '{placed.word}'"
            )
            owners = self.claimants.setdefault(cell, [])
            assert len(owners) < 2, f"Cell {cell} already claimed by {owners}"
            self.cells[cell] = char
            owners.append(placed.word)


def find_crossing(grid: Grid, placed: List[PlacedWord], candidate: str) -> Optional[Crossing]:
    """
    Return the first legal crossing for `candidate`, or None.

    Search order is placed-word order, then letter position in the placed
    word, then letter position in the candidate. The first legal geometry
    wins; alternatives are not compared.
    """
    for p in placed:
        direction = perpendicular(p.direction)
        for i, shared in enumerate(p.word):
            for j, char in enumerate(candidate):
                if char != shared:
                    continue
                if p.direction == "horizontal":
                    crossing = Crossing(p.x + i, p.y - j, direction, (p.x + i, p.y))
                else:
                    crossing = Crossing(p.x - j, p.y + i, direction, (p.x, p.y + i))
                if grid.can_place(candidate, *crossing):
                    return crossing
    return None


class LayoutEngine:
    """
    Places ranked candidate words onto a fresh grid.

    Attributes:
        max_words: Stop once this many words are placed
        attempts_per_candidate: Attempt budget is pool size times this
    """

    def __init__(self, max_words: int = 12, attempts_per_candidate: int = 10):
        self.max_words = max_words
        self.attempts_per_candidate = attempts_per_candidate

    def seed_word(self, ranked: List[str], root_length: int) -> str:
        """First ranked word as long as the root, else the top-ranked word."""
        return next((w for w in ranked if len(w) == root_length), ranked[0])

    def layout(self, ranked: List[str], root_length: int) -> List[PlacedWord]:
        """
        Lay out words from `ranked` and return them in placement order.

        Fewer than `max_words` placements is a normal outcome when the
        attempt budget runs out.
        """
        if not ranked:
            return []

        grid = Grid()
        placed: List[PlacedWord] = []
        placed_set = set()

        def commit(word: PlacedWord) -> None:
            grid.place(word)
            placed.append(word)
            placed_set.add(word.word)
            logger.debug(f"Placed '{word.word}' at ({word.x}, {word.y}) {word.direction}")

        commit(PlacedWord(word=self.seed_word(ranked, root_length), x=0, y=0, direction="horizontal"))

        max_attempts = len(ranked) * self.attempts_per_candidate
        attempts = 0
        while len(placed) < self.max_words and attempts < max_attempts:
            candidate = ranked[attempts % len(ranked)]
            attempts += 1
            if candidate in placed_set:
                continue

            crossing = find_crossing(grid, placed, candidate)
            if crossing is not None:
                commit(PlacedWord(
                    word=candidate,
                    x=crossing.x,
                    y=crossing.y,
                    direction=crossing.direction,
                ))

        logger.info(f"Crossword layout built with {len(placed)} words after {attempts} attempts.")
        return placed
