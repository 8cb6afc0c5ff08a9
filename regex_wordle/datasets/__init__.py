from .validator import validate_wordlists, pretty_summary
from .io import (read_lines, write_lines, load_dictionary, load_history_answers, clean_words,
                 DEFAULT_DICTIONARY, DEFAULT_HISTORY)

__all__ = ["validate_wordlists", "pretty_summary", "read_lines", "write_lines",
           "load_dictionary", "load_history_answers", "clean_words",
           "DEFAULT_DICTIONARY", "DEFAULT_HISTORY"]
