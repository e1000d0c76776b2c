"""Count the words of a text file and print them grouped by hash bucket."""

import argparse
import logging
import sys

from hash_table import WordTable
from tokenizer import read_words

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="word-count",
        description="Count case-insensitive word occurrences and their casing variants",
    )
    parser.add_argument("filename", help="Text file to read")
    parser.add_argument("--seed", type=int, default=None,
                        help="32-bit hash seed (random if omitted)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log table growth to stderr")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        words = read_words(args.filename)
    except FileNotFoundError:
        print("Error: file not found", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: could not read {args.filename}: {e}", file=sys.stderr)
        return 1

    try:
        table = WordTable(seed=args.seed)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    table.insert_all(words)
    logger.info("Inserted %d words, %d distinct", len(words), len(table))
    sys.stdout.write(table.report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
