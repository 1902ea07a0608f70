"""
Pydantic models for the generation engine.

This module contains the data models (configuration, placed words, level records,
guess results) shared by the engine components. The logic classes (Lexicon,
AnagramIndex, RootSelector, LayoutEngine, WordEngine) live in their own files.
"""

from typing import List, Optional, Literal, Set, Tuple
from pydantic import BaseModel, Field, ConfigDict, model_validator


# Type aliases
Direction = Literal["horizontal", "vertical"]
Cell = Tuple[int, int]
GuessOutcome = Literal["too_short", "already_found", "found", "bonus", "invalid"]

DEFAULT_WORD_SOURCE = (
    "https://raw.githubusercontent.com/first20hours/google-10000-english/master/20k.txt"
)


class EngineConfig(BaseModel):
    """Configuration for lexicon construction and level generation."""
    min_word_length: int = Field(default=4, ge=1)
    max_word_length: int = Field(default=7, ge=1)
    max_words: int = Field(default=12, ge=1)
    attempts_per_candidate: int = Field(default=10, ge=1)
    target_length: int = Field(default=6, ge=1)
    fallback_root: str = Field(default="water", pattern=r'^[a-z]+$')
    word_source: Optional[str] = DEFAULT_WORD_SOURCE
    fetch_timeout: float = Field(default=10.0, gt=0)
    seed: Optional[int] = None

    @model_validator(mode="after")
    def _check_length_bounds(self) -> "EngineConfig":
        if self.min_word_length > self.max_word_length:
            raise ValueError(
                f"min_word_length ({self.min_word_length}) exceeds "
                f"max_word_length ({self.max_word_length})"
            )
        return self


class PlacedWord(BaseModel):
    """A word anchored on the grid at (x, y), running right or down."""
    model_config = ConfigDict(frozen=True)

    word: str = Field(..., min_length=1, pattern=r'^[a-z]+$')
    x: int
    y: int
    direction: Direction

    def cell(self, index: int) -> Cell:
        """Absolute cell of the letter at `index`."""
        if self.direction == "horizontal":
            return (self.x + index, self.y)
        return (self.x, self.y + index)

    def cells(self) -> List[Cell]:
        return [self.cell(i) for i in range(len(self.word))]

    @property
    def end_x(self) -> int:
        return self.x + len(self.word) - 1 if self.direction == "horizontal" else self.x

    @property
    def end_y(self) -> int:
        return self.y + len(self.word) - 1 if self.direction == "vertical" else self.y

    def translated(self, dx: int, dy: int) -> "PlacedWord":
        return self.model_copy(update={"x": self.x + dx, "y": self.y + dy})


class LevelData(BaseModel):
    """
    A generated puzzle level.

    Attributes:
        root_letters: Sorted letters of the root word
        display_letters: Shuffled uppercase root letters shown to the player
        valid_words: Words placed on the grid, in placement order
        placed_words: Placed words with coordinates normalized to (0, 0)
        grid_width: Width of the tight bounding box
        grid_height: Height of the tight bounding box
        found_words: Owned by the game layer; the engine only creates it empty
    """
    root_letters: str
    display_letters: List[str]
    valid_words: List[str] = Field(default_factory=list)
    placed_words: List[PlacedWord] = Field(default_factory=list)
    grid_width: int = Field(default=0, ge=0)
    grid_height: int = Field(default=0, ge=0)
    found_words: Set[str] = Field(default_factory=set)


class GuessResult(BaseModel):
    """Classification of a word submitted by the player."""
    word: str
    outcome: GuessOutcome
    level_complete: bool = False
