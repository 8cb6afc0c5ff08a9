"""
Per-letter feedback for a single (secret, guess) pair, and the records that
carry it through a game.

Conventions (the enum values double as pattern symbols):
  - 'G'  : CORRECT_LOCATION = correct letter in the correct position
  - 'Y'  : WRONG_LOCATION   = letter is in the word, somewhere else
  - '-'  : WRONG_LETTER     = letter not present (or present fewer times
                              than guessed)

Algorithm (two-pass, duplicate-safe):
  1) First pass marks all greens and collects the secret letters that were
     not matched in place.
  2) Second pass marks a yellow only while that letter still has an
     unmatched copy left; everything else is gray.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple

from .errors import InvalidCharacter, InvalidInputLength
from .validation import WORD_LENGTH, require_word


# -----------------------------
# Feedback types
# -----------------------------

class LetterResponse(Enum):
    CORRECT_LOCATION = "G"  # green
    WRONG_LOCATION = "Y"    # yellow
    WRONG_LETTER = "-"      # gray


# Symbols accepted when reading a pattern typed in from some other board.
_SYMBOLS = {
    "g": LetterResponse.CORRECT_LOCATION,
    "y": LetterResponse.WRONG_LOCATION,
    "-": LetterResponse.WRONG_LETTER,
    "b": LetterResponse.WRONG_LETTER,
    "x": LetterResponse.WRONG_LETTER,
    ".": LetterResponse.WRONG_LETTER,
    "_": LetterResponse.WRONG_LETTER,
}


@dataclass(frozen=True)
class WordleResponse:
    """Feedback for one letter of a guess."""
    letter: str                # lowercase a-z
    index: int                 # 0-based position in the guess
    response: LetterResponse   # G / Y / - for this position


@dataclass(frozen=True)
class Guess:
    """One turn: the word played and its five WordleResponses, in index order."""
    word: str                            # lowercased guess
    feedback: Tuple[WordleResponse, ...]  # exactly WORD_LENGTH entries

    @classmethod
    def against(cls, secret: str, word: str) -> "Guess":
        """Score `word` against `secret` and wrap the result."""
        w = require_word(word, "guess")
        return cls._build(w, classify(secret, w))

    @classmethod
    def from_pattern(cls, word: str, pattern: str) -> "Guess":
        """
        Build a Guess from a word and the feedback shown on a board.

        Example:
          Guess.from_pattern("cough", "----Y")
        """
        w = require_word(word, "guess")
        return cls._build(w, parse_pattern(pattern))

    @classmethod
    def _build(cls, word: str, responses: Iterable[LetterResponse]) -> "Guess":
        fb = tuple(WordleResponse(c, i, r) for i, (c, r) in enumerate(zip(word, responses)))
        return cls(word, fb)

    @property
    def pattern(self) -> str:
        return pattern_of(r.response for r in self.feedback)

    @property
    def solved(self) -> bool:
        return all(r.response is LetterResponse.CORRECT_LOCATION for r in self.feedback)


# -----------------------------
# Scoring
# -----------------------------

def classify(secret: str, guess: str) -> List[LetterResponse]:
    """
    Compute per-position feedback for `guess` against `secret`.

    Both words are validated (InvalidInputLength / InvalidCharacter) and
    compared case-insensitively.

    Examples:
      pattern_of(classify("apple", "paper")) -> "YYGY-"
      pattern_of(classify("allee", "eagle")) -> "YY-YG"
    """
    # Normalize + validate; the game is case-insensitive but canonicalizes to lowercase
    secret = require_word(secret, "secret")
    guess = require_word(guess, "guess")

    # Start all gray; passes below only ever upgrade a position
    out: List[LetterResponse] = [LetterResponse.WRONG_LETTER] * WORD_LENGTH

    # Pass 1: greens; every unmatched secret letter goes into the pool.
    remaining: Counter = Counter()
    for i, (g, s) in enumerate(zip(guess, secret)):
        if g == s:
            out[i] = LetterResponse.CORRECT_LOCATION
        else:
            remaining[s] += 1

    # Pass 2: yellows consume one pooled copy each; the rest stay gray.
    for i, g in enumerate(guess):
        if out[i] is LetterResponse.CORRECT_LOCATION:
            continue  # already green; skip
        if remaining[g] > 0:
            out[i] = LetterResponse.WRONG_LOCATION
            remaining[g] -= 1  # consume one copy
        # else: stays gray, no unmatched copies left

    return out


def pattern_of(responses: Iterable[LetterResponse]) -> str:
    return "".join(r.value for r in responses)


def parse_pattern(pattern: str) -> List[LetterResponse]:
    """
    Turn a symbol string like "GY-G-" into responses.

    Gray may also be written as B, X, '.' or '_'; case does not matter.
    """
    p = pattern.strip().lower()
    if len(p) != WORD_LENGTH:
        raise InvalidInputLength(
            f"pattern must be exactly {WORD_LENGTH} symbols; got {pattern!r}")
    try:
        return [_SYMBOLS[c] for c in p]
    except KeyError as e:
        raise InvalidCharacter(
            f"unknown feedback symbol {e.args[0]!r} in {pattern!r} (use G, Y or -)") from e
