"""CLI entrypoint for the word-cross builder."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from wordcross.core.exceptions import CrosswordError
from wordcross.data.dictionary import DictionaryConfig, WordDictionary
from wordcross.data.normalization import split_words, validate_words
from wordcross.data.suggest import suggest_words
from wordcross.engine.generator import BuilderConfig, build_board
from wordcross.utils.logger import configure_logging, get_logger
from wordcross.utils.pretty import pretty_print_board


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Lay a word list out as a crossword-style grid",
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Words to place (separate arguments or one comma-separated string)",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--letters", type=str, help="Suggest dictionary words spelled from these letters")
    parser.add_argument(
        "--dictionary",
        type=Path,
        default=Path("dict.txt"),
        help="Word list used by --letters and --serve, one word per line",
    )
    parser.add_argument("--serve", action="store_true", help="Run the HTTP server")
    parser.add_argument("--host", type=str, default="localhost", help="Server bind address")
    parser.add_argument("--port", "-p", type=int, default=8080, help="Server listen port")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="Give up after this many attempts across all grid sizes",
    )
    parser.add_argument(
        "--time-budget",
        type=float,
        default=None,
        help="Give up after this many seconds",
    )
    parser.add_argument("--pretty", action="store_true", help="Print the board as a grid instead of JSON")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    modes = [bool(args.words or args.words_file), bool(args.letters), args.serve]
    if sum(modes) != 1:
        parser.error("choose exactly one of --words/--words-file, --letters or --serve")

    config = BuilderConfig(
        seed=args.seed,
        max_attempts=args.max_attempts,
        time_budget_seconds=args.time_budget,
    )

    if args.serve:
        from wordcross.io.server import create_app

        dictionary = WordDictionary.from_config(DictionaryConfig(path=args.dictionary))
        app = create_app(dictionary, builder_config=config)
        get_logger(__name__).info("words-cross server start, listen port: %s", args.port)
        app.run(host=args.host, port=args.port)
        return 0

    if args.letters:
        dictionary = WordDictionary.from_config(DictionaryConfig(path=args.dictionary))
        print(json.dumps(suggest_words(args.letters, dictionary)))
        return 0

    raw_words: List[str] = []
    for entry in args.words or []:
        raw_words.extend(split_words(entry))
    if args.words_file:
        raw_words.extend(parse_words_file(args.words_file))

    try:
        board = build_board(validate_words(raw_words), config=config)
    except CrosswordError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.pretty:
        pretty_print_board(board)
        return 0

    output_text = json.dumps(board.to_jsonable(), ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
