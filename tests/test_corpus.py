# tests/test_corpus.py
import json

import pytest
import requests

from prefix_search.corpus import Corpus, build_corpus, load_corpus
from prefix_search.errors import LoadFailure
from prefix_search.paths import WORDS_FILE, WORD_FREQ_FILE, WORD_INDEX_FILE, PROJECTS_FILE
from prefix_search.utils import write_json, join_source

WORDS = ["cat", "catalog", "dog"]
FREQ = {"cat": 5, "catalog": 3, "dog": 2}
INDEX = {"cat": [0, 1], "catalog": [1], "dog": [2]}
PROJECTS = ["A", "B", "C"]


def write_artifacts(root, words=WORDS, freq=FREQ, index=INDEX, projects=PROJECTS):
    write_json(words, str(root / WORDS_FILE))
    write_json(freq, str(root / WORD_FREQ_FILE))
    write_json(index, str(root / WORD_INDEX_FILE))
    write_json(projects, str(root / PROJECTS_FILE))
    return root


def test_build_corpus_ok():
    c = build_corpus(WORDS, FREQ, INDEX, PROJECTS)
    assert isinstance(c, Corpus)
    assert c.words == ("cat", "catalog", "dog")
    assert c.word_index["cat"] == (0, 1)
    assert c.word_freq["dog"] == 2
    assert c.projects == ("A", "B", "C")


def test_corpus_is_read_only():
    c = build_corpus(WORDS, FREQ, INDEX, PROJECTS)
    with pytest.raises(TypeError):
        c.word_freq["cat"] = 99
    with pytest.raises(TypeError):
        c.word_index["bird"] = (0,)


def test_corpus_copies_inputs():
    words = list(WORDS)
    freq = dict(FREQ)
    c = build_corpus(words, freq, INDEX, PROJECTS)
    words.append("zebra")
    freq["cat"] = 0
    assert "zebra" not in c.words
    assert c.word_freq["cat"] == 5


@pytest.mark.parametrize("words,freq,index,projects", [
    ("cat", FREQ, INDEX, PROJECTS),                          # dictionary not a list
    (["dog", "cat"], FREQ, INDEX, PROJECTS),                 # not sorted
    (["cat", "cat", "dog"], FREQ, INDEX, PROJECTS),          # duplicate
    (["Cat", "dog"], FREQ, INDEX, PROJECTS),                 # not case-normalized
    (["cat", 7], FREQ, INDEX, PROJECTS),                     # non-string entry
    (["", "cat"], FREQ, INDEX, PROJECTS),                    # empty entry
    (WORDS, ["cat"], INDEX, PROJECTS),                       # freq not a mapping
    (WORDS, {"cat": -1}, INDEX, PROJECTS),                   # negative freq
    (WORDS, {"cat": 1.5}, INDEX, PROJECTS),                  # non-integer freq
    (WORDS, {"cat": True}, INDEX, PROJECTS),                 # bool is not a count
    (WORDS, FREQ, [["cat", 0]], PROJECTS),                   # index not a mapping
    (WORDS, FREQ, {"cat": 0}, PROJECTS),                     # postings not a list
    (WORDS, FREQ, {"cat": [0, 3]}, PROJECTS),                # doc id out of range
    (WORDS, FREQ, {"cat": [-1]}, PROJECTS),                  # negative doc id
    (WORDS, FREQ, {"cat": ["0"]}, PROJECTS),                 # non-integer doc id
    (WORDS, FREQ, INDEX, {"0": "A"}),                        # documents not a list
    (WORDS, FREQ, INDEX, ["A", None, "C"]),                  # non-string name
])
def test_build_corpus_rejects_malformed(words, freq, index, projects):
    with pytest.raises(LoadFailure):
        build_corpus(words, freq, index, projects)


def test_load_corpus_from_directory(tmp_path, capsys):
    write_artifacts(tmp_path)
    c = load_corpus(str(tmp_path))
    assert c.words == tuple(WORDS)
    assert c.projects == tuple(PROJECTS)
    out = capsys.readouterr().out
    assert "Ready! Loaded 3 unique words and 3 projects." in out


def test_load_corpus_missing_file(tmp_path):
    write_artifacts(tmp_path)
    (tmp_path / WORD_INDEX_FILE).unlink()
    with pytest.raises(LoadFailure, match=WORD_INDEX_FILE):
        load_corpus(str(tmp_path))


def test_load_corpus_bad_json(tmp_path):
    write_artifacts(tmp_path)
    (tmp_path / PROJECTS_FILE).write_text("[\"A\", ", encoding="utf-8")
    with pytest.raises(LoadFailure):
        load_corpus(str(tmp_path))


def test_load_corpus_unsorted_on_disk(tmp_path):
    write_artifacts(tmp_path, words=["dog", "cat", "catalog"])
    with pytest.raises(LoadFailure, match="ascending"):
        load_corpus(str(tmp_path))


class FakeResponse:
    def __init__(self, payload, status=200):
        self.payload = payload
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return json.loads(json.dumps(self.payload))


def test_load_corpus_over_http(monkeypatch):
    base = "https://example.org/corpus/"
    served = {
        join_source(base, WORDS_FILE): WORDS,
        join_source(base, WORD_FREQ_FILE): FREQ,
        join_source(base, WORD_INDEX_FILE): INDEX,
        join_source(base, PROJECTS_FILE): PROJECTS,
    }
    calls = []

    def fake_get(url, timeout=None):
        calls.append(url)
        return FakeResponse(served[url])

    monkeypatch.setattr(requests, "get", fake_get)
    c = load_corpus(base)
    assert c.words == tuple(WORDS)
    assert calls == [
        "https://example.org/corpus/words.json",
        "https://example.org/corpus/word_freq.json",
        "https://example.org/corpus/word_index.json",
        "https://example.org/corpus/projects.json",
    ]


def test_load_corpus_http_error(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda url, timeout=None: FakeResponse(None, status=404))
    with pytest.raises(LoadFailure, match="words.json"):
        load_corpus("http://example.org/missing")


def test_join_source():
    assert join_source("data", "words.json") == "data/words.json"
    assert join_source("data/", "words.json") == "data/words.json"
    assert join_source("http://h/x/", "words.json") == "http://h/x/words.json"
    assert join_source("", "words.json") == "words.json"


def test_display_names_repaired_but_tokens_untouched():
    c = build_corpus(
        ["amp", "cafe"], {}, {"cafe": [0], "amp": [1]},
        ["Ã¼nicode", "AT&amp;T"],
    )
    assert c.projects == ("ünicode", "AT&amp;T")
    assert c.words == ("amp", "cafe")
