"""
Download past Wordle answers and write them as `date,word` CSV (and
optionally JSON) for the game's secret pool and the starter checker.

Usage:
    python -m script.fetch_history --out regex_wordle/datasets/data/wordle_history.csv
    # one request instead of one per day:
    python -m script.fetch_history --source wordlehints
    # a date window, with a JSON copy:
    python -m script.fetch_history --start 2024-01-01 --end 2024-01-31 --json hist.json
"""

import argparse
import datetime as dt
import logging
import sys

from regex_wordle.datasets import DEFAULT_HISTORY
from regex_wordle.engine import WordleError
from regex_wordle.history import (FIRST_PUZZLE, fetch_all, fetch_past_answers_page,
                                  write_history_csv, write_history_json)


def main():
    ap = argparse.ArgumentParser(description="Fetch past Wordle answers")
    ap.add_argument("--source", choices=["nyt", "wordlehints"], default="nyt")
    ap.add_argument("--start", type=dt.date.fromisoformat, default=FIRST_PUZZLE,
                    help="first day (YYYY-MM-DD), nyt source only")
    ap.add_argument("--end", type=dt.date.fromisoformat, help="last day (default: today)")
    ap.add_argument("--out", default=str(DEFAULT_HISTORY), help="CSV output path")
    ap.add_argument("--json", dest="json_path", help="also write a JSON copy here")
    ap.add_argument("--no-progress", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.source == "nyt":
            history = fetch_all(args.start, args.end, progress=not args.no_progress)
        else:
            history = fetch_past_answers_page()
    except (WordleError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    write_history_csv(history, args.out)
    print(f"Wrote {len(history)} answers -> {args.out}")
    if args.json_path:
        write_history_json(history, args.json_path)
        print(f"Wrote {len(history)} answers -> {args.json_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
