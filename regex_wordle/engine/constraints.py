"""
Candidate filtering given game history.

Given:
  - a dictionary of legal words (read-only, any order)
  - a history of Guess records (turn order)

Return:
  - the dictionary words that are still consistent with ALL feedback seen
    so far and have not been played already, in dictionary order.

This is the step that turns feedback into a shrinking candidate set; the
console game and the matches CLI both call it after every turn.
"""

from typing import Iterable, List, Set

from .rules import History, build_rule, matches


def tried_words(history: History) -> Set[str]:
    """Lowercased set of every word already played."""
    return {g.word.lower() for g in history}


def filter_candidates(dictionary: Iterable[str], history: History) -> List[str]:
    """
    Keep dictionary words that satisfy the composed rule for `history` and
    were not guessed before.

    Args:
      dictionary : iterable of words (not modified)
      history    : Guess records, oldest first

    Returns:
      List[str] of surviving words, order preserved as in `dictionary`.
    """
    tried = tried_words(history)
    rule = build_rule(history)

    out: List[str] = []
    for w in dictionary:
        # Never re-suggest a word that has been played
        if w.lower() in tried:
            continue
        if matches(rule, w):
            out.append(w)

    return out
