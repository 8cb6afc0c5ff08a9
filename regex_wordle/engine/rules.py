"""
Compose one regular expression out of a whole guess history.

Each kind of feedback contributes a lookahead fragment:
  - green  at P for L : (?=.{P}L)          L sits at index P
  - yellow at P for L : (?=.*L)(?!.*^.{P}L) L is somewhere, but not at P
  - gray              : nothing per position

Gray letters are collected into one set while the history is replayed and
emitted once, after all positional fragments, as a single character class
(?!.*[...]). The set lives only for the duration of one build_rule() call.

Final shape:
  (?i)^ <fragments in replay order> <absent class> .{5}$

Example (secret "shlep"; guesses "train", "cough"):
  (?i)^(?=.*h)(?!.*^.{4}h)(?!.*[traincoug]).{5}$
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Dict, Iterable, Sequence

from .feedback import Guess, LetterResponse
from .validation import WORD_LENGTH

log = logging.getLogger(__name__)

History = Sequence[Guess]


def _green(position: int, letter: str) -> str:
    return f"(?=.{{{position}}}{letter})"


def _yellow(position: int, letter: str) -> str:
    return f"(?=.*{letter})(?!.*^.{{{position}}}{letter})"


def _gray(position: int, letter: str) -> str:
    return ""


_SEGMENTS: Dict[LetterResponse, Callable[[int, str], str]] = {
    LetterResponse.CORRECT_LOCATION: _green,
    LetterResponse.WRONG_LOCATION: _yellow,
    LetterResponse.WRONG_LETTER: _gray,
}


def segment(response: LetterResponse, position: int, letter: str) -> str:
    """Regex fragment contributed by one letter's feedback."""
    return _SEGMENTS[response](position, letter.lower())


def absent_class(letters: Iterable[str]) -> str:
    """(?!.*[abc]) for the given letters, or "" when there are none."""
    body = "".join(letters)
    if not body:
        return ""
    return f"(?!.*[{body}])"


def build_rule(history: History) -> re.Pattern:
    """
    Replay `history` (turn order, then index order) into one compiled rule.

    The absent-letter set is rebuilt from scratch on every call:
      - a gray letter is inserted (dict keys keep insertion order),
      - a green or yellow letter is removed again.
    Letters confirmed green/yellow anywhere in the history are dropped
    before the class is emitted, so a gray duplicate never excludes a
    letter the word is known to contain. Letting the last event decide
    would reject the secret itself: against "shlep", "ships" is GG-Y- and
    the trailing gray 's' would exclude the 's' confirmed at index 0.
    """
    parts = ["(?i)^"]
    absent: Dict[str, None] = {}
    confirmed = set()

    for guess in history:
        for fb in guess.feedback:
            letter = fb.letter.lower()
            parts.append(segment(fb.response, fb.index, letter))
            if fb.response is LetterResponse.WRONG_LETTER:
                absent.setdefault(letter, None)
            else:
                absent.pop(letter, None)
                confirmed.add(letter)

    parts.append(absent_class(k for k in absent if k not in confirmed))
    parts.append(f".{{{WORD_LENGTH}}}$")

    rule = "".join(parts)
    log.debug(f"rule for {len(history)} guess(es): {rule}")
    return re.compile(rule)


def matches(rule: re.Pattern, word: str) -> bool:
    """Whole-string test; a trailing newline does not sneak past `$`."""
    return rule.fullmatch(word) is not None
