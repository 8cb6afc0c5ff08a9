import random

import pytest
from regex_wordle.engine import Guess, InvalidInputLength
from regex_wordle.game import pick_secret, play, render

DICTIONARY = ["crane", "raise", "stare", "trace", "cared", "adieu", "alone", "slate"]


def _scripted(*answers):
    it = iter(answers)
    return lambda prompt: next(it)


def test_play_win_with_reprompts():
    out = []
    r = play("crane", DICTIONARY, read=_scripted("xx", "zzzzz", "raise", "raise", "crane"),
             write=out.append, color=False)
    assert r.won is True and r.turns == 2
    assert [g.word for g in r.history] == ["raise", "crane"]
    text = "\n".join(out)
    assert "must be exactly 5 letters" in text
    assert "word not in dictionary" in text
    assert "already guessed" in text
    assert "Candidates left: 2" in text
    assert "Examples: crane, trace" in text
    assert out[-1] == "Solved in 2 turn(s)!"


def test_play_loss_after_six_turns():
    out = []
    guesses = ["raise", "stare", "trace", "cared", "adieu", "alone"]
    r = play("crane", DICTIONARY, read=_scripted(*guesses), write=out.append, color=False)
    assert r.won is False and r.turns == 6
    assert out[-1] == "Secret was: CRANE"


def test_play_enforces_turn_budget_and_secret():
    with pytest.raises(ValueError):
        play("crane", DICTIONARY, max_turns=7)
    with pytest.raises(InvalidInputLength):
        play("cranes", DICTIONARY)


def test_render():
    g = Guess.against("crane", "raise")
    assert render(g, color=False) == "(R)(A) I  S [E]"
    assert render(g).count("\u001B[0m") == 5


def test_pick_secret():
    assert pick_secret(["crane", "toolong", ""], random.Random(1)) == "crane"
    with pytest.raises(ValueError):
        pick_secret(["abc"])
