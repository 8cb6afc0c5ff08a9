import datetime as dt
import json
from pathlib import Path

import pytest
import requests
from regex_wordle.datasets import load_history_answers
from regex_wordle.engine import DataUnavailable
from regex_wordle.history import (fetch_all, fetch_past_answers_page, fetch_solution,
                                  write_history_csv, write_history_json)


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload or {})

    def json(self):
        return json.loads(self.text)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code}")


class FakeSession:
    """Maps URL -> FakeResponse (or an exception to raise)."""

    def __init__(self, routes):
        self.routes = routes
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        r = self.routes.get(url, FakeResponse(404, text="not found"))
        if isinstance(r, Exception):
            raise r
        return r


def _nyt(day):
    return f"https://www.nytimes.com/svc/wordle/v2/{day}.json"


def test_fetch_solution_lowercases_and_sends_user_agent():
    s = FakeSession({_nyt("2021-06-19"): FakeResponse(payload={"solution": "CIGAR"})})
    assert fetch_solution(dt.date(2021, 6, 19), session=s) == "cigar"
    _, kwargs = s.calls[0]
    assert kwargs["headers"]["User-Agent"] == "Mozilla/5.0"


def test_fetch_all_skips_missing_days():
    s = FakeSession({
        _nyt("2021-06-19"): FakeResponse(payload={"solution": "cigar"}),
        _nyt("2021-06-21"): FakeResponse(payload={"solution": "sissy"}),
    })
    out = fetch_all(dt.date(2021, 6, 19), dt.date(2021, 6, 21), session=s)
    assert out == {dt.date(2021, 6, 19): "cigar", dt.date(2021, 6, 21): "sissy"}
    assert len(s.calls) == 3


def test_fetch_all_rejects_reversed_window():
    with pytest.raises(ValueError):
        fetch_all(dt.date(2022, 1, 2), dt.date(2022, 1, 1), session=FakeSession({}))


def test_transport_error_is_data_unavailable():
    s = FakeSession({_nyt("2021-06-19"): requests.ConnectionError("down")})
    with pytest.raises(DataUnavailable):
        fetch_solution(dt.date(2021, 6, 19), session=s)


def test_bad_payload_is_data_unavailable():
    s = FakeSession({_nyt("2021-06-19"): FakeResponse(text="<html>")})
    with pytest.raises(DataUnavailable):
        fetch_solution(dt.date(2021, 6, 19), session=s)


def test_fetch_past_answers_page():
    html = ("<html><body><h1>Past answers</h1>"
            "<p>2021-06-20 (Sun) 1 REBUT</p>"
            "<p>2021-06-19 (Sat) 0 CIGAR</p>"
            "</body></html>")
    s = FakeSession({"https://example.test/past": FakeResponse(text=html)})
    out = fetch_past_answers_page("https://example.test/past", session=s)
    assert list(out.items()) == [(dt.date(2021, 6, 19), "cigar"), (dt.date(2021, 6, 20), "rebut")]


def test_fetch_past_answers_page_without_rows():
    s = FakeSession({"https://example.test/past": FakeResponse(text="<p>nothing</p>")})
    with pytest.raises(DataUnavailable):
        fetch_past_answers_page("https://example.test/past", session=s)


def test_written_csv_feeds_the_loader(tmp_path: Path):
    hist = {dt.date(2021, 6, 19): "cigar", dt.date(2021, 6, 20): "rebut"}
    p = write_history_csv(hist, tmp_path / "out" / "wordle_history.csv")
    assert Path(p).read_text(encoding="utf-8") == "2021-06-19,cigar\n2021-06-20,rebut\n"
    assert load_history_answers(p) == ["cigar", "rebut"]

    j = write_history_json(hist, tmp_path / "wordle_history.json")
    assert json.loads(Path(j).read_text(encoding="utf-8")) == {
        "2021-06-19": "cigar", "2021-06-20": "rebut"}


@pytest.mark.parametrize("text", ['["cigar"]', '{"solution": 5}', '{"solution": null}'])
def test_wrong_shaped_payload_is_data_unavailable(text):
    s = FakeSession({_nyt("2021-06-19"): FakeResponse(text=text)})
    with pytest.raises(DataUnavailable):
        fetch_solution(dt.date(2021, 6, 19), session=s)
