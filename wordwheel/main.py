"""
Main entry point for generating wordwheel levels.

Usage:
    python -m wordwheel.main
    python -m wordwheel.main config.yaml --levels 3 --output levels.json --verbose
    python -m wordwheel.main --words words.txt --length 5 --seed 42
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError as ConfigError

from .engine import EngineConfig, WordEngine
from .verifiers import render_level, verify_level


def load_config(config_path: Optional[str]) -> EngineConfig:
    """Load engine configuration from a YAML file (defaults when no path is given)."""
    if not config_path:
        return EngineConfig()

    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return EngineConfig(**data)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate letter-wheel crossword levels",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  min_word_length: 4
  max_word_length: 7
  max_words: 12
  target_length: 6
  word_source: words.txt
  seed: 42
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults are used when omitted)"
    )
    parser.add_argument(
        "--length", "-l",
        type=int,
        help="Root word length (overrides target_length)"
    )
    parser.add_argument(
        "--levels", "-n",
        type=int,
        default=1,
        help="Number of levels to generate (default: 1)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed (overrides config)"
    )
    parser.add_argument(
        "--words",
        help="Word list URL or file path (overrides word_source)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the generated levels as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log engine progress"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        overrides = {}
        if args.seed is not None:
            overrides["seed"] = args.seed
        if args.words:
            overrides["word_source"] = args.words
        if args.length is not None:
            overrides["target_length"] = args.length
        if overrides:
            config = EngineConfig(**{**config.model_dump(), **overrides})
    except (FileNotFoundError, yaml.YAMLError, ConfigError, TypeError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.levels < 1:
        print("Error: --levels must be at least 1", file=sys.stderr)
        return 1

    engine = WordEngine(config)
    engine.initialize()
    if engine.lexicon.is_fallback:
        print("Warning: using built-in fallback dictionary", file=sys.stderr)

    levels = []
    for n in range(1, args.levels + 1):
        level = engine.generate_level()
        result = verify_level(level, engine.lexicon)
        levels.append(level)

        print(f"=== Level {n} ===")
        print(f"Letters: {' '.join(level.display_letters)}")
        print(f"Words ({len(level.valid_words)}): {', '.join(level.valid_words)}")
        print(f"Grid: {level.grid_width}x{level.grid_height}")
        print(render_level(level.placed_words).upper())
        if not result.valid:
            for error in result.errors:
                print(f"  {error.code}: {error.message}", file=sys.stderr)
        print()

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            json.dump([level.model_dump(mode="json") for level in levels], f, indent=2)
        print(f"Levels saved to: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
