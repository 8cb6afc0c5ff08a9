"""
Exceptions raised by the engine and its data providers.

Every error the project raises on purpose derives from `WordleError`, so CLIs
can catch one type and report it. The concrete classes also derive from the
matching builtin (ValueError / OSError) so callers that only know the builtin
still catch them.
"""


class WordleError(Exception):
    """Base class for all regex-wordle errors."""


class InvalidInputLength(WordleError, ValueError):
    """A guess, secret or feedback pattern is not exactly WORD_LENGTH long."""


class InvalidCharacter(WordleError, ValueError):
    """A word contains something other than a-z, or a pattern an unknown symbol."""


class DataUnavailable(WordleError, OSError):
    """A dictionary or history source could not be loaded or fetched."""
