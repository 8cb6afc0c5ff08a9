from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, List

from regex_wordle.engine.errors import DataUnavailable

log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_DICTIONARY = DATA_DIR / "allowed_5.txt"
DEFAULT_HISTORY = DATA_DIR / "wordle_history.csv"

# "CIGAR #0" style puzzle numbering found in pasted answer lists
_SUFFIX_RE = re.compile(r"\s+#\s*\d*\s*$")


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises DataUnavailable if the file is missing, unreadable or not UTF-8.
    """
    p = Path(p)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise DataUnavailable(f"cannot read {p}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise DataUnavailable(f"cannot decode {p} as UTF-8: {e.reason} at byte {e.start}") from e
    return [ln.rstrip("\r\n") for ln in text.splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_dictionary(p: Path | str = DEFAULT_DICTIONARY) -> List[str]:
    """
    Load the legal-guess list: one word per line, lowercased, blanks dropped,
    file order kept. A missing file is an error, an empty one is not.
    """
    words = [ln.strip().lower() for ln in read_lines(p) if ln.strip()]
    if not words:
        log.warning(f"dictionary {p} is empty")
    else:
        log.info(f"loaded {len(words)} words from {p}")
    return words


def load_history_answers(p: Path | str = DEFAULT_HISTORY) -> List[str]:
    """
    Load past answers from the fetcher's `date,word` CSV, in file order.
    Lines without a comma are taken as bare words.
    """
    words = []
    for ln in read_lines(p):
        ln = ln.strip()
        if not ln:
            continue
        words.append(ln.split(",", 1)[-1].strip().lower())
    log.info(f"loaded {len(words)} past answers from {p}")
    return words


def clean_words(lines: Iterable[str], *, strip_suffix: bool = True) -> List[str]:
    """
    Normalize a raw word list: drop "#123" numbering, whitespace and blank
    lines, lowercase, and dedupe keeping first occurrence.
    """
    seen, out = set(), []
    for ln in lines:
        w = _SUFFIX_RE.sub("", ln) if strip_suffix else ln
        w = w.strip().lower()
        if w and w not in seen:
            seen.add(w)
            out.append(w)
    return out
