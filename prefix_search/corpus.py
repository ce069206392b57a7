"""
prefix_search/corpus.py

The four precomputed artifacts the engine runs on, validated and frozen.

    words.json       ["cat", "catalog", "dog"]
    word_freq.json   {"cat": 5, "catalog": 3, "dog": 2}
    word_index.json  {"cat": [0, 1], "catalog": [1], "dog": [2]}
    projects.json    ["A", "B", "C"]

build_corpus() checks structure and raises LoadFailure on the first
problem, so a Corpus that exists is always consistent. Display names
are run through ftfy once here; dictionary tokens are used as delivered.
load_corpus() fetches the files from a directory or a base URL first.
"""

from types import MappingProxyType

import requests
from ftfy import fix_text

from prefix_search.errors import LoadFailure
from prefix_search.paths import DATA_DIR, WORDS_FILE, WORD_FREQ_FILE, WORD_INDEX_FILE, PROJECTS_FILE
from prefix_search.utils import join_source, load_json


class Corpus:
    """
    Immutable bundle of dictionary, frequency table, posting index and documents.
    Owned by the engine for its whole lifetime; nothing writes to it after load.
    """

    __slots__ = ("words", "word_freq", "word_index", "projects")

    def __init__(self, words, word_freq, word_index, projects):
        self.words = tuple(words)
        self.word_freq = MappingProxyType(dict(word_freq))
        self.word_index = MappingProxyType({t: tuple(ids) for t, ids in word_index.items()})
        self.projects = tuple(projects)

    def __repr__(self):
        return f"Corpus(words={len(self.words)}, projects={len(self.projects)})"


def _is_int(x):
    return isinstance(x, int) and not isinstance(x, bool)


def _check_words(words):
    if not isinstance(words, list):
        raise LoadFailure(f"dictionary must be a list, got {type(words).__name__}")
    prev = None
    for i, w in enumerate(words):
        if not isinstance(w, str) or not w:
            raise LoadFailure(f"dictionary entry {i} is not a non-empty string: {w!r}")
        if w != w.lower():
            raise LoadFailure(f"dictionary entry {i} is not case-normalized: {w!r}")
        if prev is not None and not prev < w:
            raise LoadFailure(f"dictionary not strictly ascending at {i}: {prev!r} >= {w!r}")
        prev = w


def _check_freq(word_freq):
    if not isinstance(word_freq, dict):
        raise LoadFailure(f"frequency table must be a mapping, got {type(word_freq).__name__}")
    for t, n in word_freq.items():
        if not _is_int(n) or n < 0:
            raise LoadFailure(f"frequency for {t!r} must be a non-negative integer, got {n!r}")


def _check_index(word_index, num_docs):
    if not isinstance(word_index, dict):
        raise LoadFailure(f"posting index must be a mapping, got {type(word_index).__name__}")
    for t, ids in word_index.items():
        if not isinstance(ids, list):
            raise LoadFailure(f"postings for {t!r} must be a list, got {type(ids).__name__}")
        for d in ids:
            if not _is_int(d):
                raise LoadFailure(f"postings for {t!r} contain a non-integer doc id: {d!r}")
            if not 0 <= d < num_docs:
                raise LoadFailure(f"postings for {t!r} reference doc {d}, corpus has {num_docs}")


def _check_projects(projects):
    if not isinstance(projects, list):
        raise LoadFailure(f"document corpus must be a list, got {type(projects).__name__}")
    for i, name in enumerate(projects):
        if not isinstance(name, str):
            raise LoadFailure(f"document {i} name is not a string: {name!r}")


def clean_name(name: str) -> str:
    """
    Repair mojibake in a display name ("Ã¼nicode" -> "ünicode").
    HTML entities are left alone; escaping is the renderer's job.
    """
    return fix_text(name, unescape_html=False)


def build_corpus(words, word_freq, word_index, projects) -> Corpus:
    """
    Validate the four decoded artifacts and freeze them into a Corpus.
    Raises LoadFailure; never returns a partially valid corpus.
    """
    _check_words(words)
    _check_freq(word_freq)
    _check_projects(projects)
    _check_index(word_index, len(projects))
    return Corpus(words, word_freq, word_index, [clean_name(p) for p in projects])


def load_corpus(source: str = DATA_DIR) -> Corpus:
    """
    Load words/word_freq/word_index/projects from a directory or http(s) base URL.
    Any I/O, HTTP or JSON error surfaces as LoadFailure.
    """
    artifacts = []
    for label, name in (
        ("Word list", WORDS_FILE),
        ("Word frequencies", WORD_FREQ_FILE),
        ("Word index", WORD_INDEX_FILE),
        ("Projects", PROJECTS_FILE),
    ):
        path = join_source(source, name)
        try:
            data = load_json(path)
        except (OSError, requests.RequestException, ValueError) as e:
            raise LoadFailure(f"Failed to load {name}: {e}") from e
        size = len(data) if isinstance(data, (list, dict)) else 0
        print(f"{label} loaded: {size} entries from {path}")
        artifacts.append(data)

    corpus = build_corpus(*artifacts)
    print(f"Ready! Loaded {len(corpus.words):,} unique words and {len(corpus.projects):,} projects.")
    return corpus
