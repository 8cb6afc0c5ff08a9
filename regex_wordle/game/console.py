"""
Interactive console game.

- pick_secret: choose a hidden word from a pool (past answers or dictionary).
- play:        run one game against a human, narrating the shrinking
               candidate set after every turn.
- render:      ANSI-colored feedback line.

Input and output are injected (`read`, `write`) so the loop can be driven
from tests or another front end without a terminal.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, List, Sequence

from regex_wordle.engine import Guess, LetterResponse, filter_candidates
from regex_wordle.engine.validation import WORD_LENGTH, require_word, validate_guess

log = logging.getLogger(__name__)

# Single source of truth for the turn budget.
WORDLE_MAX_TURNS = 6

BG_GREEN = "\u001B[42m"
BG_YELLOW = "\u001B[43m"
BG_GRAY = "\u001B[100m"
RESET = "\u001B[0m"

_COLORS = {
    LetterResponse.CORRECT_LOCATION: BG_GREEN,
    LetterResponse.WRONG_LOCATION: BG_YELLOW,
    LetterResponse.WRONG_LETTER: BG_GRAY,
}

# Plain-text fallbacks: [A] green, (A) yellow, " A " gray
_PLAIN = {
    LetterResponse.CORRECT_LOCATION: "[{}]",
    LetterResponse.WRONG_LOCATION: "({})",
    LetterResponse.WRONG_LETTER: " {} ",
}


@dataclass
class GameResult:
    secret: str
    won: bool
    turns: int
    history: List[Guess] = field(default_factory=list)


def pick_secret(pool: Sequence[str], rng: random.Random | None = None) -> str:
    """Uniform pick from the well-formed words in `pool`."""
    words = [w for w in pool if len(w.strip()) == WORD_LENGTH]
    if not words:
        raise ValueError("no 5-letter words to pick a secret from")
    return (rng or random.Random()).choice(words).strip().lower()


def render(guess: Guess, color: bool = True) -> str:
    if color:
        return "".join(f"{_COLORS[r.response]}{r.letter.upper()}{RESET}" for r in guess.feedback)
    return "".join(_PLAIN[r.response].format(r.letter.upper()) for r in guess.feedback)


def _read_guess(turn: int, allowed: set, tried: set, read: Callable[[str], str],
                write: Callable[[str], None]) -> str:
    """Prompt until the player enters a legal, new word."""
    while True:
        guess = read(f"Turn {turn} - your guess: ").strip().lower()
        if len(guess) != WORD_LENGTH:
            write(f"   -> must be exactly {WORD_LENGTH} letters")
        elif not validate_guess(guess, allowed):
            write("   -> word not in dictionary")
        elif guess in tried:
            write("   -> already guessed")
        else:
            return guess


def play(
        secret: str,
        dictionary: Sequence[str],
        *,
        read: Callable[[str], str] | None = None,
        write: Callable[[str], None] | None = None,
        max_turns: int = WORDLE_MAX_TURNS,
        color: bool = True,
        examples: int = 8,
) -> GameResult:
    """
    Play one game until the player wins or the turn budget runs out.

    Args:
        secret:     hidden word (validated)
        dictionary: legal guesses; also the pool candidates are drawn from
        read/write: prompt + line output (default: stdin/stdout)
        max_turns:  must be 6
        color:      ANSI backgrounds vs bracket notation
        examples:   how many surviving candidates to show per turn

    Returns:
        GameResult with the full guess history.
    """
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS}; got {max_turns}")
    secret = require_word(secret, "secret")
    read = read or input
    write = write or print

    allowed = {w.strip().lower() for w in dictionary}
    history: List[Guess] = []

    write(f"Guess the {WORD_LENGTH}-letter word in {max_turns} tries.")
    for turn in range(1, max_turns + 1):
        word = _read_guess(turn, allowed, {g.word for g in history}, read, write)
        guess = Guess.against(secret, word)
        history.append(guess)
        write(f"   Feedback: {render(guess, color)}")

        if guess.solved:
            write(f"Solved in {turn} turn(s)!")
            return GameResult(secret, True, turn, history)

        cand = filter_candidates(dictionary, history)
        log.debug(f"turn {turn}: {guess.word} {guess.pattern} -> {len(cand)} candidates")
        write(f"   Candidates left: {len(cand)}")
        if cand and examples:
            write("   Examples: " + ", ".join(cand[:examples]))

    write(f"Secret was: {secret.upper()}")
    return GameResult(secret, False, max_turns, history)
