"""
Download past Wordle answers.

Sources:
- NYT JSON endpoint, one request per day since the first puzzle
  (https://www.nytimes.com/svc/wordle/v2/YYYY-MM-DD.json -> {"solution": ...}).
- wordlehints.co.uk past-answers page as a single-request fallback; rows look
  like "YYYY-MM-DD (Day) <num> <ANSWER>".

Days the NYT does not serve (non-200) are skipped. Transport failures are not:
they surface as DataUnavailable so a partial download is never mistaken for
the full history.
"""

from __future__ import annotations

import datetime as dt
import json
import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import requests
from bs4 import BeautifulSoup
from tqdm import tqdm

from regex_wordle.engine.errors import DataUnavailable

log = logging.getLogger(__name__)

NYT_URL = "https://www.nytimes.com/svc/wordle/v2/{day}.json"
FIRST_PUZZLE = dt.date(2021, 6, 19)
HEADERS = {"User-Agent": "Mozilla/5.0"}

WORDLEHINTS_URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{5})\b")


def _days(start: dt.date, end: dt.date) -> List[dt.date]:
    return [start + dt.timedelta(days=i) for i in range((end - start).days + 1)]


def fetch_solution(day: dt.date, *, session=None, timeout: float = 30) -> Optional[str]:
    """
    Return the lowercased solution for `day`, or None if the NYT has none.
    """
    http = session or requests
    url = NYT_URL.format(day=day.isoformat())
    try:
        r = http.get(url, headers=HEADERS, timeout=timeout, allow_redirects=True)
    except requests.RequestException as e:
        raise DataUnavailable(f"fetching {url} failed: {e}") from e

    log.debug(f"{day} -> status {r.status_code}, {len(r.text)} bytes")
    if r.status_code != 200:
        return None
    try:
        return r.json()["solution"].strip().lower()
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        raise DataUnavailable(f"unexpected payload from {url}") from e


def fetch_all(
        start: dt.date = FIRST_PUZZLE,
        end: dt.date | None = None,
        *,
        session=None,
        progress: bool = False,
) -> Dict[dt.date, str]:
    """
    Fetch every available solution from `start` to `end` (inclusive, default
    today), keyed by date in calendar order.
    """
    end = end or dt.date.today()
    if end < start:
        raise ValueError(f"end {end} is before start {start}")

    days: Iterable[dt.date] = _days(start, end)
    if progress:
        days = tqdm(days, ncols=80, desc="Fetching", unit="day")

    out: Dict[dt.date, str] = {}
    http = session or requests.Session()
    try:
        for day in days:
            sol = fetch_solution(day, session=http)
            if sol is None:
                log.info(f"no solution served for {day}; skipped")
                continue
            out[day] = sol
    finally:
        if session is None:
            http.close()

    log.info(f"fetched {len(out)} solutions between {start} and {end}")
    return out


def fetch_past_answers_page(url: str = WORDLEHINTS_URL, *, session=None,
                            timeout: float = 30) -> Dict[dt.date, str]:
    """
    Scrape the wordlehints past-answers page. Returns {date: answer}, oldest
    first, first occurrence of each date wins.
    """
    http = session or requests
    try:
        r = http.get(url, headers=HEADERS, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        raise DataUnavailable(f"fetching {url} failed: {e}") from e

    text = BeautifulSoup(r.text, "html.parser").get_text("\n", strip=True)
    out: Dict[dt.date, str] = {}
    for m in ROW_RE.finditer(text):
        out.setdefault(dt.date.fromisoformat(m.group(1)), m.group(2).lower())
    if not out:
        raise DataUnavailable(f"no answers found on {url}")
    return dict(sorted(out.items()))


def write_history_csv(history: Dict[dt.date, str], path: Path | str) -> str:
    """`date,word` per line, the format load_history_answers() reads."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("".join(f"{d.isoformat()},{w}\n" for d, w in history.items()),
                 encoding="utf-8")
    return str(p)


def write_history_json(history: Dict[dt.date, str], path: Path | str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump({d.isoformat(): w for d, w in history.items()}, f, indent=2)
    return str(p)
