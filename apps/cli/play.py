# apps/cli/play.py
"""
Play Wordle in the terminal.

The secret is drawn from the past-answers CSV when it loads, otherwise from
the dictionary. After each guess the remaining candidates are listed so you
can watch the filter work.

    python -m apps.cli.play --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List

from regex_wordle.datasets import (DEFAULT_DICTIONARY, DEFAULT_HISTORY, load_dictionary,
                                   load_history_answers)
from regex_wordle.engine import DataUnavailable, WordleError
from regex_wordle.game import pick_secret, play

log = logging.getLogger("apps.cli.play")


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="regex-wordle - play in the terminal")
    ap.add_argument("--dictionary", default=str(DEFAULT_DICTIONARY),
                    help="legal guesses, one word per line")
    ap.add_argument("--history", default=str(DEFAULT_HISTORY),
                    help="past answers CSV (date,word) used as the secret pool")
    ap.add_argument("--secret", help="play against this word instead of a random one")
    ap.add_argument("--seed", type=int, help="RNG seed for the secret pick")
    ap.add_argument("--no-color", action="store_true", help="bracket notation instead of ANSI")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        dictionary = load_dictionary(args.dictionary)
        if args.secret:
            secret = args.secret
        else:
            try:
                pool = load_history_answers(args.history)
            except DataUnavailable as e:
                log.warning(f"{e}; picking the secret from the dictionary")
                pool = dictionary
            secret = pick_secret(pool, random.Random(args.seed))
        play(secret, dictionary, color=not args.no_color)
    except (WordleError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except (EOFError, KeyboardInterrupt):
        print()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
