"""
Guess/secret validation.

Two flavors:
  - require_word:   strict; raises InvalidInputLength / InvalidCharacter.
                    The engine calls this on every word it is handed.
  - validate_guess: lenient; returns a bool. The console game uses it to
                    decide whether to re-prompt.

A word is well-formed iff, after strip + lowercase, it is exactly WORD_LENGTH
characters of a-z.
"""

from typing import Iterable, Set

from .errors import InvalidCharacter, InvalidInputLength

# Fixed for this game; the rule builder bakes it into every pattern.
WORD_LENGTH = 5

_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyz")


def require_word(word: str, label: str = "word") -> str:
    """
    Return the canonical (stripped, lowercased) form of `word` or raise.

    `label` only shows up in the error message ("secret", "guess", ...).
    """
    if not isinstance(word, str):
        raise InvalidCharacter(f"{label} must be a string, got {type(word).__name__}")

    w = word.strip().lower()
    if len(w) != WORD_LENGTH:
        raise InvalidInputLength(
            f"{label} must be exactly {WORD_LENGTH} letters; got {word!r} ({len(w)})")
    bad = [c for c in w if c not in _LETTERS]
    if bad:
        raise InvalidCharacter(f"{label} {word!r} contains non-letter(s): {''.join(bad)!r}")
    return w


def is_well_formed(word: str) -> bool:
    try:
        require_word(word)
    except ValueError:
        return False
    return True


def validate_guess(word: str, allowed: Iterable[str]) -> bool:
    """
    Return True if `word` is well-formed and in `allowed` (case-normalized).

    Pass a set for `allowed` when calling in a loop; anything else is
    normalized into a local set on every call.
    """
    if not is_well_formed(word):
        return False

    if isinstance(allowed, (set, frozenset)):
        allowed_set: Set[str] = allowed
    else:
        allowed_set = {a.strip().lower() for a in allowed}
    return word.strip().lower() in allowed_set
