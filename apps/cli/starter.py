# apps/cli/starter.py
"""
Starter-word checker: has this word already been a Wordle answer?

    python -m apps.cli.starter crane
    python -m apps.cli.starter            # keeps asking until an unused word

Exit status is 0 when the word is still unused, 1 when it was an answer.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Iterable, List

from regex_wordle.datasets import DEFAULT_HISTORY, load_history_answers
from regex_wordle.engine import WordleError, require_word
from regex_wordle.engine.validation import WORD_LENGTH, is_well_formed


def already_used(word: str, past: Iterable[str]) -> bool:
    return require_word(word) in {w.strip().lower() for w in past}


def ask_until_unused(past: Iterable[str], read: Callable[[str], str] = input,
                     write: Callable[[str], None] = print) -> str:
    used = {w.strip().lower() for w in past}
    word = read("What is your starter word? ").strip().lower()
    while not is_well_formed(word) or word in used:
        if not is_well_formed(word):
            write(f"Sorry, {word.upper()!r} is not a {WORD_LENGTH}-letter word")
        else:
            write(f"Sorry, {word.upper()} has already been used as a Wordle")
        word = read("Enter your new starter word: ").strip().lower()
    write(f"You're good to go, {word.upper()} has not yet been used as a Wordle")
    return word


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="regex-wordle - check a starter word")
    ap.add_argument("word", nargs="?", help="word to check (omit for interactive mode)")
    ap.add_argument("--history", default=str(DEFAULT_HISTORY),
                    help="past answers CSV (date,word)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    try:
        past = load_history_answers(args.history)
        if args.word is None:
            ask_until_unused(past)
            return 0
        if already_used(args.word, past):
            print(f"{args.word.upper()} has already been a Wordle answer")
            return 1
        print(f"{args.word.upper()} has not been a Wordle answer yet")
        return 0
    except WordleError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except (EOFError, KeyboardInterrupt):
        print()
        return 1


if __name__ == "__main__":
    sys.exit(main())
