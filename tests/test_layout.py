"""Tests for grid legality checks and greedy layout."""

import pytest

from wordwheel.engine import Grid, LayoutEngine, Crossing, PlacedWord, find_crossing


def grid_with(*words: PlacedWord) -> Grid:
    grid = Grid()
    for word in words:
        grid.place(word)
    return grid


TRUST = PlacedWord(word="trust", x=0, y=0, direction="horizontal")
RUST_DOWN = PlacedWord(word="rust", x=0, y=-3, direction="vertical")


class TestGridPlace:
    """Test cases for committing words to the grid."""

    def test_place_records_letters_and_claimants(self):
        """Every cell gets its letter and the word as claimant."""
        grid = grid_with(TRUST)
        assert grid.get((0, 0)) == "t"
        assert grid.get((4, 0)) == "t"
        assert grid.claimants[(2, 0)] == ["trust"]
        assert (5, 0) not in grid

    def test_crossing_cell_has_two_claimants(self):
        """A crossing cell is claimed by both words."""
        grid = grid_with(TRUST, RUST_DOWN)
        assert grid.claimants[(0, 0)] == ["trust", "rust"]
        assert grid.get((0, -3)) == "r"

    def test_conflicting_letter_asserts(self):
        """Overwriting a cell with a different letter is an invariant breach."""
        grid = grid_with(TRUST)
        with pytest.raises(AssertionError):
            grid.place(PlacedWord(word="star", x=0, y=-3, direction="vertical"))

    def test_third_claimant_asserts(self):
        """A third claimant on one cell is an invariant breach."""
        grid = grid_with(TRUST, RUST_DOWN)
        with pytest.raises(AssertionError):
            grid.place(PlacedWord(word="tsar", x=0, y=0, direction="vertical"))


class TestCanPlace:
    """Test cases for placement legality."""

    def test_perpendicular_crossing_is_legal(self):
        """Crossing at a shared letter with clear surroundings is legal."""
        grid = grid_with(TRUST)
        assert grid.can_place("rust", 0, -3, "vertical", (0, 0)) is True

    def test_letter_mismatch(self):
        """A different letter on an occupied cell is illegal."""
        grid = grid_with(TRUST)
        assert grid.can_place("rusa", 0, -3, "vertical", (0, 0)) is False

    def test_overlap_away_from_intersection(self):
        """Occupied cells other than the intersection are illegal even if letters match."""
        grid = grid_with(TRUST)
        assert grid.can_place("trust", 0, 0, "horizontal", (0, 0)) is False

    def test_cell_already_crossed(self):
        """A cell already shared by two words cannot take a third."""
        grid = grid_with(TRUST, RUST_DOWN)
        assert grid.can_place("at", -1, 0, "horizontal", (0, 0)) is False

    def test_extension_before_start(self):
        """A letter just before the first cell would extend the word."""
        grid = grid_with(TRUST)
        assert grid.can_place("star", 5, 0, "horizontal", (9, 9)) is False

    def test_extension_after_end(self):
        """A letter just after the last cell would extend the word."""
        grid = grid_with(TRUST)
        assert grid.can_place("star", 0, -4, "vertical", (9, 9)) is False

    def test_grazing_parallel_word(self):
        """Running alongside an existing word is illegal."""
        grid = grid_with(TRUST)
        assert grid.can_place("rust", 0, 1, "horizontal", (0, 0)) is False

    def test_diagonal_contact(self):
        """Touching only diagonally is legal."""
        grid = grid_with(TRUST)
        assert grid.can_place("star", 5, -4, "vertical", (9, 9)) is True

    def test_touching_without_crossing(self):
        """A perpendicular neighbour away from the intersection is illegal."""
        grid = grid_with(TRUST)
        assert grid.can_place("star", 5, -3, "vertical", (9, 9)) is False

    def test_empty_area(self):
        """Placing far from everything is legal for the legality check alone."""
        grid = grid_with(TRUST)
        assert grid.can_place("star", 10, 10, "horizontal", (10, 10)) is True


class TestFindCrossing:
    """Test cases for the crossing search."""

    def test_first_found_crossing(self):
        """The first shared letter of the first placed word is used."""
        grid = grid_with(TRUST)
        crossing = find_crossing(grid, [TRUST], "rust")
        assert crossing == Crossing(0, -3, "vertical", (0, 0))

    def test_crossing_vertical_word(self):
        """A word crossing a vertical word is horizontal."""
        grid = grid_with(RUST_DOWN)
        crossing = find_crossing(grid, [RUST_DOWN], "star")
        assert crossing is not None
        assert crossing.direction == "horizontal"
        assert grid.can_place("star", *crossing)

    def test_no_shared_letter(self):
        """Without a shared letter there is no crossing."""
        grid = grid_with(TRUST)
        assert find_crossing(grid, [TRUST], "gleam") is None


class TestLayoutEngine:
    """Test cases for the greedy layout loop."""

    def test_seed_word_matches_root_length(self):
        """The seed is the first ranked word as long as the root."""
        engine = LayoutEngine()
        assert engine.seed_word(["rust", "stair", "trust"], 5) == "stair"

    def test_seed_word_fallback(self):
        """Without a root-length word the top-ranked word seeds."""
        assert LayoutEngine().seed_word(["rust", "star"], 6) == "rust"

    def test_single_word(self):
        """A one-word pool yields exactly that word at the origin."""
        placed = LayoutEngine().layout(["quoth"], 5)
        assert placed == [PlacedWord(word="quoth", x=0, y=0, direction="horizontal")]

    def test_empty_pool(self):
        """An empty pool yields an empty layout."""
        assert LayoutEngine().layout([], 5) == []

    def test_two_word_layout(self):
        """The second word crosses the seed perpendicularly."""
        placed = LayoutEngine().layout(["trust", "rust"], 5)
        assert placed == [TRUST, RUST_DOWN]

    def test_max_words(self):
        """Placement stops at max_words."""
        placed = LayoutEngine(max_words=1).layout(["trust", "rust"], 5)
        assert [p.word for p in placed] == ["trust"]

    def test_no_duplicates(self):
        """A word is never placed twice."""
        ranked = ["stair", "star", "rats", "tars", "arts", "sitar", "airs", "tsar"]
        placed = LayoutEngine().layout(ranked, 5)
        words = [p.word for p in placed]
        assert len(words) == len(set(words))
        assert words[0] == "stair"

    def test_unplaceable_words_skipped(self):
        """Words sharing no letters simply stay unplaced."""
        placed = LayoutEngine().layout(["trust", "gleam"], 5)
        assert [p.word for p in placed] == ["trust"]
