"""
Normalize a raw word list into the dictionary format.

- Drops "#123" puzzle-number suffixes (pasted answer lists), unless --keep-suffix.
- Strips whitespace, drops blank lines, lowercases.
- Stable dedupe (first occurrence wins).
- Overwrites in place by default, or writes to --out.

Usage:
    python -m script.clean_wordlist --in PastWordles.txt --out regex_wordle/datasets/data/allowed_5.txt
"""

import argparse
import sys

from regex_wordle.datasets import clean_words, read_lines, write_lines
from regex_wordle.engine import WordleError


def main():
    ap = argparse.ArgumentParser(description="Clean and dedupe a word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--keep-suffix", action="store_true", help="do not strip ' #123' suffixes")
    args = ap.parse_args()

    try:
        lines = read_lines(args.inp)
    except WordleError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    out = clean_words(lines, strip_suffix=not args.keep_suffix)
    dest = write_lines(out, args.out or args.inp)
    print(f"Input: {args.inp} ({len(lines)} lines) -> Output: {dest} ({len(out)} words)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
