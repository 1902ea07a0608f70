import logging
import random
from typing import Iterable, Optional, Set, Union

from .anagram import AnagramIndex
from .assembler import assemble_level
from .layout import LayoutEngine
from .lexicon import Lexicon
from .models import EngineConfig, GuessResult, LevelData
from .play import check_guess
from .roots import RootSelector

logger = logging.getLogger(__name__)

WordSource = Union[str, Iterable[str], Lexicon, None]


class WordEngine:
    """
    Top-level entry point for level generation.

    Owns one Lexicon and its AnagramIndex (built by `initialize`) and a
    seedable random generator shared by root selection, ranking and letter
    shuffling. Each `generate_level` call works on a fresh grid.

    Attributes:
        config: Engine configuration
        rng: Random generator used for every random decision
        lexicon: Accepted words, None until initialized
        index: Signature index over the lexicon, None until initialized
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or EngineConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.lexicon: Optional[Lexicon] = None
        self.index: Optional[AnagramIndex] = None
        self.layout_engine = LayoutEngine(
            max_words=self.config.max_words,
            attempts_per_candidate=self.config.attempts_per_candidate,
        )

    @classmethod
    def create(cls, word_source: WordSource = None, **config_kwargs) -> "WordEngine":
        """
        Factory method to build and initialize an engine in one step.

        Args:
            word_source: Passed to `initialize`
            **config_kwargs: EngineConfig fields
        """
        engine = cls(EngineConfig(**config_kwargs))
        engine.initialize(word_source)
        return engine

    @property
    def is_initialized(self) -> bool:
        return self.lexicon is not None

    def initialize(self, word_source: WordSource = None, force: bool = False) -> None:
        """
        Build the lexicon and anagram index.

        `word_source` may be a URL or file path, an iterable of raw words, a
        ready Lexicon, or None to use the configured source. Repeated calls
        are no-ops unless `force` is set.
        """
        if self.is_initialized and not force:
            return

        logger.info("Starting initialization...")
        self.lexicon = self._build_lexicon(word_source)
        self.index = AnagramIndex.build(self.lexicon.words)

    def _build_lexicon(self, word_source: WordSource) -> Lexicon:
        cfg = self.config
        if isinstance(word_source, Lexicon):
            return word_source
        if word_source is None or isinstance(word_source, str):
            return Lexicon.load(
                word_source or cfg.word_source,
                min_length=cfg.min_word_length,
                max_length=cfg.max_word_length,
                timeout=cfg.fetch_timeout,
            )
        try:
            return Lexicon.from_words(word_source, cfg.min_word_length, cfg.max_word_length)
        except ValueError as e:
            logger.warning(f"Word list unusable, using fallback dictionary: {e}")
            return Lexicon.fallback()

    def _require_initialized(self) -> None:
        if not self.is_initialized:
            raise RuntimeError("WordEngine.initialize() must be called first")

    def is_valid_word(self, word: str) -> bool:
        self._require_initialized()
        return self.lexicon.is_valid_word(word)

    def generate_level(self, target_length: Optional[int] = None) -> LevelData:
        """
        Generate a new level whose root word has `target_length` letters.

        Always returns a usable level; it may hold fewer words than
        `config.max_words` when the layout runs out of legal crossings.

        Raises:
            RuntimeError: If the engine has not been initialized
            ValueError: If target_length is not a positive integer
        """
        self._require_initialized()
        if target_length is None:
            target_length = self.config.target_length
        if not isinstance(target_length, int) or target_length < 1:
            raise ValueError(f"target_length must be a positive integer, got {target_length!r}")

        logger.info(f"Generating level for length {target_length}...")
        selector = RootSelector(self.lexicon, self.index, self.rng, self.config.fallback_root)
        selection = selector.select(target_length)

        placed = self.layout_engine.layout(selection.ranked, len(selection.root))
        level = assemble_level(selection.signature, placed, self.rng)

        logger.info(
            f"Level ready: root letters '{level.root_letters}', {len(level.valid_words)} words, "
            f"{level.grid_width}x{level.grid_height} grid"
        )
        return level

    def check_guess(self, level: LevelData, word: str, found_words: Set[str]) -> GuessResult:
        """Classify a guess using this engine's lexicon and minimum word length."""
        self._require_initialized()
        return check_guess(
            level,
            word,
            found_words,
            self.is_valid_word,
            min_length=self.config.min_word_length,
        )
