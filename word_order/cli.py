"""
Command-line entry point: print the order of a word among its anagrams.
"""

import argparse
import sys
from typing import Optional, Sequence

import yaml

from word_order.anagram import word_order, ArithmeticOverflowError, WordOrderError, DIRECTIONS
from word_order.config.logging_config import configure_logging, get_logger
from word_order.config.order_config import OrderConfig, LOG_FORMATS

logger = get_logger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="word-order",
        description="Find the position of a word in the sorted list of its anagrams",
    )
    parser.add_argument("word", nargs="?", default=None,
                        help="Word to rank (case-sensitive)")

    arith_group = parser.add_argument_group("Arithmetic")
    arith_group.add_argument("--dtype", type=str, default=None,
                             help="Integer width as a numpy dtype name (default: uint64)")
    arith_group.add_argument("--unbounded", action=argparse.BooleanOptionalAction, default=None,
                             help="Use arbitrary precision integers instead of a fixed width")
    arith_group.add_argument("--direction", choices=DIRECTIONS, default=None,
                             help="Build the multiset by insertion or consume it by removal")

    log_group = parser.add_argument_group("Logging")
    log_group.add_argument("--config", type=str, default=None,
                           help="YAML or JSON configuration file")
    log_group.add_argument("--log-level", type=str, default=None,
                           help="Logging level (default: WARNING)")
    log_group.add_argument("--log-format", choices=LOG_FORMATS, default=None,
                           help="Log output format")

    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> OrderConfig:
    """Merge the optional config file with command-line overrides."""
    config = OrderConfig.load(args.config) if args.config else OrderConfig()
    return config.override(
        dtype=args.dtype,
        unbounded=args.unbounded,
        direction=args.direction,
        log_level=args.log_level,
        log_format=args.log_format,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = load_config(args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: invalid configuration - {e}", file=sys.stderr)
        return 1

    configure_logging(level=config.log_level, format=config.log_format, log_file=config.log_file)
    logger.debug("Loaded configuration", config=str(config))

    # a missing word is reported but not treated as a failure
    if args.word is None:
        print("Oops! You forgot to supply a word.\n")
        return 0

    try:
        order = word_order(args.word, max_value=config.max_value, direction=config.direction)
    except ArithmeticOverflowError as e:
        logger.error("Rank computation overflowed", word=args.word, limit=e.limit)
        print(f"Error. Input too long. ({e})", file=sys.stderr)
        return 1
    except WordOrderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Order of word {args.word}: {order}.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
