"""Word list ownership: filtering, priority words, validity lookups and fallback."""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional, Set

import requests
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


# Literary/thematic words always accepted, whatever the source contains
PRIORITY_WORDS: List[str] = [
    "nigh", "fain", "yore", "lore", "bard", "sage", "vale", "moor", "vial",
    "helm", "rune", "mead", "thou", "thee", "quoth", "wrought", "blithe",
    "stark", "grim", "vane", "reed",
]

# Proper nouns, brand names, jargon and abbreviations common in frequency lists
BLACKLIST: Set[str] = {
    "fran", "brad", "greg", "ebay", "sony", "dell", "nike", "levi", "visa", "ford",
    "fiat", "asda", "audi", "hugo", "marc", "jean", "paul", "ivan", "karl", "erik",
    "http", "html", "www", "com", "org", "blog", "site", "user", "java", "linux",
    "unix", "xml", "json", "wifi", "apps", "tech", "data", "file", "link", "code",
    "ipad", "ipod", "xbox", "psn", "bios", "ping", "pong", "null", "void",
    "july", "june", "sept", "octo", "nov", "dec", "mon", "tue", "wed", "thu", "fri",
    "sat", "sun",
}

# Used as-is when the word source cannot be read
FALLBACK_WORDS: List[str] = [
    "rust", "trust", "star", "stair", "trail", "train", "react", "trace", "cater",
    "crate", "great", "gear", "read", "dear", "care", "race", "word", "flow", "wolf",
    "blue", "glow", "slow", "fast", "lake", "peak", "beam", "team", "nigh", "lore",
    "bard", "sage",
]

_ALPHA = re.compile(r'^[a-z]+$')
_VOWEL = re.compile(r'[aeiouy]')


def is_acceptable(word: str, min_length: int = 4, max_length: int = 7) -> bool:
    """Check a lowercase word against the length, alphabet, vowel and blacklist rules."""
    return (
        min_length <= len(word) <= max_length
        and bool(_ALPHA.match(word))
        and bool(_VOWEL.search(word))
        and word not in BLACKLIST
    )


def filter_words(raw: Iterable[str], min_length: int = 4, max_length: int = 7) -> List[str]:
    """Normalize raw lines and keep acceptable words, first occurrence wins."""
    seen: Set[str] = set()
    accepted: List[str] = []
    for line in raw:
        word = line.strip().lower()
        if word in seen or not is_acceptable(word, min_length, max_length):
            continue
        seen.add(word)
        accepted.append(word)
    return accepted


def read_word_source(source: str, timeout: float = 10.0) -> List[str]:
    """
    Read a newline-delimited word list from a URL or a local file.

    Raises:
        requests.RequestException: If the HTTP fetch fails
        OSError: If the local file cannot be read
    """
    if source.startswith(("http://", "https://")):
        logger.info(f"Fetching dictionary from {source}")
        response = requests.get(source, timeout=timeout)
        response.raise_for_status()
        text = response.text
    else:
        logger.info(f"Reading dictionary from {source}")
        text = Path(source).read_text(encoding="utf-8")

    logger.info(f"Received dictionary data ({round(len(text) / 1024)} KB)")
    return text.split('\n')


class Lexicon(BaseModel):
    """
    The accepted word list and its membership set.

    Attributes:
        words: Accepted words in dictionary order (priority words appended)
        is_fallback: Whether the built-in fallback list is in use
    """

    words: List[str] = Field(default_factory=list)
    is_fallback: bool = False
    _word_set: Set[str] = None

    @field_validator("words")
    @classmethod
    def _normalize_words(cls, words: List[str]) -> List[str]:
        """Lowercase and dedupe words, keeping the first occurrence."""
        cleaned = [w.strip().lower() for w in words]
        bad = [w for w in cleaned if not _ALPHA.match(w)]
        if bad:
            raise ValueError(f"Words must be alphabetic: {bad[:5]}")
        return list(dict.fromkeys(cleaned))

    def model_post_init(self, __context) -> None:
        """Build the lookup set after model creation."""
        self._word_set = set(self.words)

    @classmethod
    def from_words(
        cls,
        raw: Iterable[str],
        min_length: int = 4,
        max_length: int = 7,
    ) -> "Lexicon":
        """
        Build a lexicon from raw candidate strings.

        Raises:
            ValueError: If no candidate survives filtering
        """
        accepted = filter_words(raw, min_length, max_length)
        if not accepted:
            raise ValueError("Word source contained no usable words")

        seen = set(accepted)
        for word in PRIORITY_WORDS:
            if word not in seen:
                seen.add(word)
                accepted.append(word)

        logger.info(f"Dictionary processed. {len(accepted)} valid words found.")
        return cls(words=accepted)

    @classmethod
    def fallback(cls) -> "Lexicon":
        return cls(words=FALLBACK_WORDS, is_fallback=True)

    @classmethod
    def load(
        cls,
        source: Optional[str],
        min_length: int = 4,
        max_length: int = 7,
        timeout: float = 10.0,
    ) -> "Lexicon":
        """
        Load a lexicon from a URL or path, falling back to the built-in list.

        Fetch errors and unusable data never propagate: they are logged and
        the fallback lexicon is returned instead.
        """
        if not source:
            logger.warning("No word source configured, using fallback dictionary")
            return cls.fallback()

        try:
            lines = read_word_source(source, timeout=timeout)
            return cls.from_words(lines, min_length, max_length)
        except (requests.RequestException, OSError, ValueError) as e:
            logger.warning(f"Dictionary load failed, using fallback dictionary: {e}")
            return cls.fallback()

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word in self._word_set

    def __len__(self) -> int:
        return len(self.words)

    def is_valid_word(self, word: str) -> bool:
        """Case-insensitive membership test."""
        return word.lower() in self

    def words_of_length(self, length: int) -> List[str]:
        return [w for w in self.words if len(w) == length]
