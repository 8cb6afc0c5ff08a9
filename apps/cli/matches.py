# apps/cli/matches.py
"""
Narrow the dictionary from feedback you already have.

Each positional argument is WORD:PATTERN, oldest first, where PATTERN uses
G (green), Y (yellow) and - (gray):

    python -m apps.cli.matches train:----- cough:----Y --show-rule

Prints the composed rule (optional), the number of surviving words and the
first --limit of them in dictionary order.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from regex_wordle.datasets import DEFAULT_DICTIONARY, load_dictionary
from regex_wordle.engine import Guess, WordleError, build_rule, filter_candidates


def parse_history(items: List[str]) -> List[Guess]:
    """["train:-----", "cough:----Y"] -> Guess records."""
    history = []
    for item in items:
        word, sep, pattern = item.partition(":")
        if not sep:
            raise argparse.ArgumentTypeError(f"expected WORD:PATTERN, got {item!r}")
        history.append(Guess.from_pattern(word, pattern))
    return history


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="regex-wordle - list words consistent with feedback")
    ap.add_argument("guesses", nargs="*", metavar="WORD:PATTERN",
                    help="guess and its feedback, e.g. crane:-Y--G (oldest first)")
    ap.add_argument("--dictionary", default=str(DEFAULT_DICTIONARY),
                    help="legal guesses, one word per line")
    ap.add_argument("--limit", type=int, default=20, help="max candidates to print (0 = all)")
    ap.add_argument("--show-rule", action="store_true", help="print the composed regex")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        history = parse_history(args.guesses)
        dictionary = load_dictionary(args.dictionary)
    except (WordleError, argparse.ArgumentTypeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.show_rule:
        print(f"Rule: {build_rule(history).pattern}")

    cand = filter_candidates(dictionary, history)
    print(f"Candidates left: {len(cand)}")
    shown = cand if args.limit <= 0 else cand[: args.limit]
    for w in shown:
        print(w)
    if len(shown) < len(cand):
        print(f"... and {len(cand) - len(shown)} more")
    return 0


if __name__ == "__main__":
    sys.exit(main())
