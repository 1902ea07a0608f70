"""Anagram clustering: words grouped by their sorted-letter signature."""

import logging
from typing import Dict, Iterable, List
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


def signature(word: str) -> str:
    """Return the letters of `word` in sorted order."""
    return ''.join(sorted(word))


def is_subset_signature(small: str, big: str) -> bool:
    """
    Check whether every letter of `small` appears in `big` at least as often.

    Both arguments are usually signatures, but letter order does not matter.
    """
    counts: Dict[str, int] = {}
    for char in big:
        counts[char] = counts.get(char, 0) + 1

    for char in small:
        if not counts.get(char):
            return False
        counts[char] -= 1

    return True


class AnagramIndex(BaseModel):
    """
    Mapping from signature to the words sharing it.

    Buckets and the words inside them keep dictionary order. The index is
    built once and treated as read-only afterwards.
    """

    buckets: Dict[str, List[str]] = Field(default_factory=dict)

    @classmethod
    def build(cls, words: Iterable[str]) -> "AnagramIndex":
        buckets: Dict[str, List[str]] = {}
        for word in words:
            buckets.setdefault(signature(word), []).append(word)

        index = cls(buckets=buckets)
        logger.info(f"Anagram index built: {len(buckets)} unique letter combinations")
        return index

    def __len__(self) -> int:
        return len(self.buckets)

    def subset_words(self, root_signature: str) -> List[str]:
        """
        Collect every word whose letters fit inside `root_signature`.

        Buckets are scanned in insertion order, so the result follows
        dictionary order bucket by bucket.
        """
        pool: List[str] = []
        for sig, words in self.buckets.items():
            if is_subset_signature(sig, root_signature):
                pool.extend(words)
        return pool
