"""Packages a finished layout into the level record handed to the game layer."""

import random
from typing import List, Tuple

from .models import LevelData, PlacedWord


def bounding_box(placed: List[PlacedWord]) -> Tuple[int, int, int, int]:
    """Return (min_x, min_y, max_x, max_y) over every occupied cell."""
    min_x = min(p.x for p in placed)
    min_y = min(p.y for p in placed)
    max_x = max(p.end_x for p in placed)
    max_y = max(p.end_y for p in placed)
    return min_x, min_y, max_x, max_y


def normalize(placed: List[PlacedWord]) -> Tuple[List[PlacedWord], int, int]:
    """
    Shift words so the bounding box starts at (0, 0).

    Returns:
        Tuple of (translated words, grid width, grid height)
    """
    if not placed:
        return [], 0, 0

    min_x, min_y, max_x, max_y = bounding_box(placed)
    translated = [p.translated(-min_x, -min_y) for p in placed]
    return translated, max_x - min_x + 1, max_y - min_y + 1


def shuffle_letters(root_signature: str, rng: random.Random) -> List[str]:
    letters = list(root_signature.upper())
    rng.shuffle(letters)
    return letters


def assemble_level(
    root_signature: str,
    placed: List[PlacedWord],
    rng: random.Random,
) -> LevelData:
    """
    Build the LevelData for a layout.

    Only words that were actually placed become valid answers.
    """
    normalized, width, height = normalize(placed)
    return LevelData(
        root_letters=root_signature,
        display_letters=shuffle_letters(root_signature, rng),
        valid_words=[p.word for p in normalized],
        placed_words=normalized,
        grid_width=width,
        grid_height=height,
    )
