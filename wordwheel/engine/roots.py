"""Root word selection and candidate pool ranking."""

import logging
import random
from typing import List
from pydantic import BaseModel, Field

from .anagram import AnagramIndex, signature
from .lexicon import Lexicon

logger = logging.getLogger(__name__)


class RootSelection(BaseModel):
    """A chosen root with its signature and ranked candidate pool."""
    root: str
    signature: str
    pool: List[str] = Field(default_factory=list)
    ranked: List[str] = Field(default_factory=list)


def rank_pool(pool: List[str], rng: random.Random) -> List[str]:
    """
    Order words by a length-biased random score, highest first.

    Each word scores rng.random() ** (1 / len(word)), so longer words tend to
    rank earlier without being guaranteed to.
    """
    scored = [(rng.random() ** (1 / len(word)), word) for word in pool]
    scored.sort(key=lambda item: item[0], reverse=True)
    return [word for _, word in scored]


class RootSelector:
    """
    Picks a root word of a target length and derives its candidate pool.

    The lexicon and index are shared read-only; all randomness comes from
    the injected generator.
    """

    def __init__(
        self,
        lexicon: Lexicon,
        index: AnagramIndex,
        rng: random.Random,
        fallback_root: str = "water",
    ):
        self.lexicon = lexicon
        self.index = index
        self.rng = rng
        self.fallback_root = fallback_root

    def choose_root(self, target_length: int) -> str:
        """
        Pick a root uniformly among words of `target_length`.

        Falls back once to `target_length - 1`, then to the fixed fallback root.
        """
        candidates = self.lexicon.words_of_length(target_length)
        if not candidates:
            logger.warning(
                f"No words of length {target_length} found. "
                f"Falling back to {target_length - 1}."
            )
            candidates = self.lexicon.words_of_length(target_length - 1)

        if not candidates:
            logger.warning(f"No root candidates, using fallback root '{self.fallback_root}'")
            return self.fallback_root

        root = self.rng.choice(candidates)
        logger.info(f"Root word selected: '{root}'")
        return root

    def candidate_pool(self, root: str) -> List[str]:
        """All indexed words whose letters fit inside the root's letters."""
        pool = self.index.subset_words(signature(root))
        if not pool:
            # Only possible for a fallback root absent from the lexicon
            pool = [root]
        logger.info(f"Found {len(pool)} candidate words for this root.")
        return pool

    def select(self, target_length: int) -> RootSelection:
        root = self.choose_root(target_length)
        pool = self.candidate_pool(root)
        return RootSelection(
            root=root,
            signature=signature(root),
            pool=pool,
            ranked=rank_pool(pool, self.rng),
        )
