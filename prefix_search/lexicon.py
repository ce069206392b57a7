"""
prefix_search/lexicon.py

Lexicon wraps the sorted token dictionary and answers prefix questions.

Backing tables (all read-only once loaded):
    words:      ("cat", "catalog", "dog", ...)   strictly ascending
    word_freq:  {"cat": 5, "catalog": 3, ...}    missing -> 0
    word_index: {"cat": (0, 1), ...}             missing -> no postings

Because the dictionary is sorted, every entry sharing a prefix sits in
one contiguous run. find_first_match() binary-searches the head of that
run and matching_words() walks forward from it, so a prefix lookup costs
O(log N + k) instead of a full scan.
"""

from typing import Mapping, Optional, Sequence

from prefix_search.paths import AUTOCOMPLETE_LIMIT, AUTOCOMPLETE_EXPANSION_LIMIT


class Lexicon:
    """
    Prefix index over the dictionary plus direct frequency/postings lookup.

    Typical usage:
        lex = Lexicon.from_corpus(corpus)
        lex.matching_words("cat")        # ["cat", "catalog"]
        lex.postings("catalog")          # (1,)
        lex.aggregate_frequency("cat")   # 8
    """

    __slots__ = ("words", "word_freq", "word_index")

    def __init__(self, words: Sequence[str], word_freq: Mapping[str, int], word_index: Mapping[str, Sequence[int]]):
        self.words = words
        self.word_freq = word_freq
        self.word_index = word_index

    @classmethod
    def from_corpus(cls, corpus):
        return cls(corpus.words, corpus.word_freq, corpus.word_index)

    def __len__(self):
        return len(self.words)

    def __contains__(self, token):
        i = self.find_first_match(token)
        return i is not None and self.words[i] == token.lower()

    def find_first_match(self, prefix: str) -> Optional[int]:
        """
        Lowest index whose entry starts with `prefix`, or None.

        At each probe:
          - entry has the prefix -> remember it, keep looking left
          - entry < prefix       -> go right
          - otherwise            -> go left
        """
        prefix = prefix.lower()
        words = self.words
        lo, hi = 0, len(words) - 1
        result = None
        while lo <= hi:
            mid = (lo + hi) // 2
            word = words[mid]
            if word.startswith(prefix):
                result = mid
                hi = mid - 1
            elif word < prefix:
                lo = mid + 1
            else:
                hi = mid - 1
        return result

    def matching_words(self, prefix: str, limit: int = AUTOCOMPLETE_LIMIT) -> list[str]:
        """
        Up to `limit` dictionary entries starting with `prefix`, in dictionary order.
        Stops at the first entry without the prefix (matches are contiguous).
        """
        if not prefix:
            return []
        first = self.find_first_match(prefix)
        if first is None:
            return []

        prefix = prefix.lower()
        out = []
        for word in self.words[first:first + limit]:
            if not word.startswith(prefix):
                break
            out.append(word)
        return out

    def postings(self, token: str) -> Sequence[int]:
        return self.word_index.get(token, ())

    def frequency(self, token: str) -> int:
        return self.word_freq.get(token, 0)

    def aggregate_frequency(self, word: str, limit: int = AUTOCOMPLETE_EXPANSION_LIMIT) -> int:
        """
        Treat `word` as a prefix and sum the frequency of everything it expands to
        (itself included), looking at no more than `limit` entries.
        """
        return sum(self.frequency(w) for w in self.matching_words(word, limit))
