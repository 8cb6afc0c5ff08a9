from .errors import WordleError, InvalidInputLength, InvalidCharacter, DataUnavailable
from .validation import WORD_LENGTH, require_word, validate_guess
from .feedback import LetterResponse, WordleResponse, Guess, classify, pattern_of, parse_pattern
from .rules import build_rule, segment, absent_class, matches
from .constraints import filter_candidates, tried_words

__all__ = [
    "WordleError", "InvalidInputLength", "InvalidCharacter", "DataUnavailable",
    "WORD_LENGTH", "require_word", "validate_guess",
    "LetterResponse", "WordleResponse", "Guess", "classify", "pattern_of", "parse_pattern",
    "build_rule", "segment", "absent_class", "matches",
    "filter_candidates", "tried_words",
]
