import pytest
from regex_wordle.engine import (Guess, LetterResponse, absent_class, build_rule,
                                 filter_candidates, matches, segment)


def _history(secret, *guesses):
    return [Guess.against(secret, g) for g in guesses]


def test_segments():
    assert segment(LetterResponse.CORRECT_LOCATION, 2, "c") == "(?=.{2}c)"
    assert segment(LetterResponse.WRONG_LOCATION, 1, "x") == "(?=.*x)(?!.*^.{1}x)"
    assert segment(LetterResponse.WRONG_LETTER, 3, "q") == ""
    assert segment(LetterResponse.CORRECT_LOCATION, 0, "C") == "(?=.{0}c)"


def test_absent_class():
    assert absent_class([]) == ""
    assert absent_class("ab") == "(?!.*[ab])"


def test_empty_history():
    assert build_rule([]).pattern == "(?i)^.{5}$"


@pytest.mark.parametrize("guess,expected", [
    ("ababa", "(?i)^(?!.*[ab]).{5}$"),
    ("babba", "(?i)^(?!.*[ba]).{5}$"),
    ("cable", "(?i)^(?!.*[cable]).{5}$"),
])
def test_gray_letters_share_one_class(guess, expected):
    assert build_rule(_history("xxxxx", guess)).pattern == expected


def test_combined_rule_text():
    history = _history("shlep", "train", "cough")
    assert build_rule(history).pattern == "(?i)^(?=.*h)(?!.*^.{4}h)(?!.*[traincoug]).{5}$"

    history += _history("shlep", "ships")
    rule = build_rule(history)
    assert rule.pattern == (
        "(?i)^(?=.*h)(?!.*^.{4}h)(?=.{0}s)(?=.{1}h)(?=.*p)(?!.*^.{3}p)"
        "(?!.*[traincoug]).{5}$")
    # the gray second 's' must not exclude the secret itself
    assert matches(rule, "shlep")
    assert matches(rule, "SHLEP")


def test_all_green_is_five_positions_and_length():
    rule = build_rule(_history("apple", "apple"))
    assert rule.pattern == "(?i)^(?=.{0}a)(?=.{1}p)(?=.{2}p)(?=.{3}l)(?=.{4}e).{5}$"
    assert matches(rule, "apple")
    assert not matches(rule, "apples")


def test_duplicate_letters_in_one_guess():
    rule = build_rule(_history("allee", "eagle"))
    assert rule.pattern == (
        "(?i)^(?=.*e)(?!.*^.{0}e)(?=.*a)(?!.*^.{1}a)(?=.*l)(?!.*^.{3}l)(?=.{4}e)(?!.*[g]).{5}$")
    assert matches(rule, "allee")


def test_gray_duplicate_beside_green_twin():
    # 'e' is gray twice and green once in the same guess
    history = _history("those", "geese")
    assert history[0].pattern == "---GG"
    rule = build_rule(history)
    assert rule.pattern == "(?i)^(?=.{3}s)(?=.{4}e)(?!.*[g]).{5}$"
    assert matches(rule, "those")


def test_absent_then_present_promotes_letter():
    history = [Guess.from_pattern("stamp", "-----"), Guess.from_pattern("pouch", "Y----")]
    rule = build_rule(history)
    assert rule.pattern == "(?i)^(?=.*p)(?!.*^.{0}p)(?!.*[stamouch]).{5}$"
    words = ["wiped", "piled", "maple", "stamp", "pouch"]
    assert filter_candidates(words, history) == ["wiped"]


def test_present_then_absent_keeps_letter_out_of_class():
    history = [Guess.from_pattern("pouch", "Y----"), Guess.from_pattern("stamp", "-----")]
    rule = build_rule(history)
    assert rule.pattern == "(?i)^(?=.*p)(?!.*^.{0}p)(?!.*[ouchstam]).{5}$"
    assert matches(rule, "wiped")


def test_three_way_repeat_mixed_classifications():
    history = [
        Guess.from_pattern("eerie", "Y---G"),
        Guess.from_pattern("geese", "-Y---"),
    ]
    rule = build_rule(history)
    assert "e" not in rule.pattern.split("(?!.*[")[-1]
    assert rule.pattern.endswith("(?!.*[rigs]).{5}$")


def test_rebuild_is_idempotent_and_stateless():
    history = _history("shlep", "train", "cough")
    first = build_rule(history)
    build_rule(_history("xxxxx", "ababa"))
    second = build_rule(history)
    assert first.pattern == second.pattern
    # nothing leaks into an unrelated call
    assert build_rule([]).pattern == "(?i)^.{5}$"


def test_turn_order_changes_text_not_verdicts():
    words = ["shlep", "shelf", "whelp", "hello", "queue", "ghost", "spelt", "sheep"]
    a = _history("shlep", "train", "cough", "ships")
    b = list(reversed(a))
    assert build_rule(a).pattern != build_rule(b).pattern
    ra, rb = build_rule(a), build_rule(b)
    for w in words:
        assert matches(ra, w) == matches(rb, w)
    assert filter_candidates(words, a) == filter_candidates(words, b)


def test_trailing_newline_is_not_a_match():
    assert not matches(build_rule([]), "crane\n")
