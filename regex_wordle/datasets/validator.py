"""
Word-list diagnostics for regex-wordle.

What this module does:
- Check the dictionary (one lowercase 5-letter word per line) and, optionally,
  the past-answers CSV written by the history fetcher.
- Count valid / invalid / duplicate entries and hash the raw files.
- Check that every past answer is a legal guess.
- Return a JSON-friendly dict and a one-line summary for the console.

Typical use:
    from regex_wordle.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("regex_wordle/datasets/data/allowed_5.txt",
                             "regex_wordle/datasets/data/wordle_history.csv")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from regex_wordle.engine.validation import is_well_formed


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class ListReport:
    """Per-file diagnostics."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # valid words
    unique_count: int    # valid words after dedupe
    invalid_lines: int   # blank / malformed lines
    sha256: str          # raw bytes; "" when missing
    readable: bool = True  # False when the bytes are not valid UTF-8


@dataclass
class ValidationReport:
    """Top-level result for the (dictionary, history) pair."""
    dictionary: ListReport
    history: Optional[ListReport]              # None when no history path given
    history_subset_dictionary: Optional[bool]  # None when it could not be checked
    passed: bool
    issues: List[str]    # human-friendly problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _scan(path: Path, csv: bool) -> Tuple[List[str], int]:
    """
    Return (valid_words, invalid_count). Blank lines count as invalid, and so
    does anything that is not already lowercase a-z of the right length.
    For the history CSV only the part after the first comma is checked.
    Raises UnicodeDecodeError on bytes that are not UTF-8.
    """
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8", errors="strict") as f:
        for raw in f:
            w = raw.strip()
            # history rows are "date,word"; only the word is checked
            if csv:
                w = w.split(",", 1)[-1].strip()
            # require already-lowercase & alphabetic & exact length
            if w and w == w.lower() and is_well_formed(w):
                valid.append(w)
            else:
                invalid += 1
    return valid, invalid


def _report(path: Path, csv: bool) -> Tuple[ListReport, List[str]]:
    if not path.exists():
        return ListReport(str(path), False, 0, 0, 0, ""), []
    sha = _sha256_file(path)
    try:
        words, invalid = _scan(path, csv)
    except UnicodeDecodeError:
        # present but undecodable: report it, never crash the summary
        return ListReport(str(path), True, 0, 0, 0, sha, readable=False), []
    rep = ListReport(
        path=str(path),
        exists=True,
        count=len(words),
        unique_count=len(set(words)),
        invalid_lines=invalid,
        sha256=sha,
    )
    return rep, words


def _list_issues(name: str, rep: ListReport) -> List[str]:
    if not rep.exists:
        return [f"{name} file not found: {rep.path}"]
    if not rep.readable:
        return [f"{name} file is unreadable (not UTF-8): {rep.path}"]
    issues = []
    if rep.count == 0:
        issues.append(f"{name} contains 0 valid words")
    if rep.invalid_lines:
        issues.append(f"{name} has {rep.invalid_lines} invalid line(s)")
    if rep.count != rep.unique_count:
        issues.append(f"{name} contains duplicate lines")
    return issues


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(dictionary_path: str, history_path: str | None = None) -> Dict:
    """
    Validate the dictionary and (optionally) the past-answers CSV.

    `passed` requires: files present, non-empty, no invalid lines, and every
    past answer in the dictionary. Duplicates are reported but do not fail
    the check since filtering tolerates them.
    """
    dict_rep, dict_words = _report(Path(dictionary_path), csv=False)
    issues = _list_issues("dictionary", dict_rep)

    hist_rep = None
    subset = None
    if history_path is not None:
        hist_rep, hist_words = _report(Path(history_path), csv=True)
        issues += _list_issues("history", hist_rep)
        if all(r.exists and r.readable for r in (dict_rep, hist_rep)):
            missing = sorted(set(hist_words) - set(dict_words))
            subset = not missing
            if missing:
                issues.append(f"history not subset of dictionary (e.g., {missing[:5]})")

    def _ok(rep: ListReport | None) -> bool:
        return rep is None or (rep.exists and rep.readable
                               and rep.count > 0 and rep.invalid_lines == 0)

    passed = _ok(dict_rep) and _ok(hist_rep) and subset is not False

    return asdict(ValidationReport(
        dictionary=dict_rep,
        history=hist_rep,
        history_subset_dictionary=subset,
        passed=passed,
        issues=issues,
    ))


def pretty_summary(report: Dict) -> str:
    """
    One-liner for the console, e.g.
        dictionary=14855 (uniq=14855, sha=abc123...) | history=1200 (...) | history⊆dictionary=True | OK
    """
    def _part(name: str, r: Dict) -> str:
        return f"{name}={r['count']} (uniq={r['unique_count']}, sha={(r.get('sha256') or '')[:12]})"

    parts = [_part("dictionary", report["dictionary"])]
    if report.get("history") is not None:
        parts.append(_part("history", report["history"]))
        parts.append(f"history⊆dictionary={report['history_subset_dictionary']}")
    parts.append("OK" if report["passed"] else "FAIL")
    return " | ".join(parts)
