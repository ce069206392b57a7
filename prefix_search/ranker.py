# prefix_search/ranker.py
from prefix_search.lexicon import Lexicon
from prefix_search.parser import Parser
from prefix_search.paths import AUTOCOMPLETE_LIMIT, AUTOCOMPLETE_EXPANSION_LIMIT, MIN_FRAGMENT_LENGTH


class Suggestion:
    """
    One autocomplete candidate.
    range_start/range_end are the bounds of the fragment it replaces in the input.
    """

    __slots__ = ("word", "score", "range_start", "range_end")

    def __init__(self, word: str, score: int, range_start: int, range_end: int):
        self.word = word
        self.score = score
        self.range_start = range_start
        self.range_end = range_end

    def __eq__(self, other):
        if not isinstance(other, Suggestion):
            return NotImplemented
        return (self.word, self.score, self.range_start, self.range_end) == (
            other.word, other.score, other.range_start, other.range_end)

    def __repr__(self):
        return f"Suggestion({self.word!r}, {self.score}, {self.range_start}, {self.range_end})"

    def to_dict(self):
        return {
            "word": self.word,
            "score": self.score,
            "rangeStart": self.range_start,
            "rangeEnd": self.range_end,
        }


class Ranker:
    """
    Autocomplete ranker: suggests dictionary completions for the word under the caret.

    Requirements / assumptions:
    - `lexicon` is a Lexicon over a sorted dictionary
    - candidates are scored by aggregate prefix frequency: a candidate W scores
      the summed frequency of every entry starting with W, so a short, general
      completion can outrank a longer exact one
    - limit / expansion_limit / min_length are configurable; defaults come from paths.py
    """

    def __init__(self, lexicon: Lexicon, parser=None, limit=AUTOCOMPLETE_LIMIT,
                 expansion_limit=AUTOCOMPLETE_EXPANSION_LIMIT, min_length=MIN_FRAGMENT_LENGTH):
        self.lexicon = lexicon
        self.parser = parser or Parser()
        self.limit = limit
        self.expansion_limit = expansion_limit
        self.min_length = min_length

    def rank(self, text: str, caret: int) -> list[Suggestion]:
        """
        Rank completions for the fragment at `caret`.

        Returns:
            list[Suggestion] sorted by score desc; ties stay in dictionary order.
            [] when the fragment is blank, too short, or matches nothing.
        """
        if not text.strip():
            return []

        fragment, start, end = self.parser.fragment_at(text, caret)
        tokens = self.parser.tokenize(fragment)
        if not tokens or len(tokens[0]) < self.min_length:
            return []

        candidates = self.lexicon.matching_words(tokens[0], self.limit)
        scored = [
            Suggestion(word, self.lexicon.aggregate_frequency(word, self.expansion_limit), start, end)
            for word in candidates
        ]
        # sorted() is stable, so equal scores keep dictionary order
        scored = sorted(scored, key=lambda s: s.score, reverse=True)
        return scored[:self.limit]


def apply_suggestion(text: str, suggestion: Suggestion):
    """
    Replace the suggestion's fragment in `text` with its word.
    Adds one space after the word unless the input already has one there.

    Returns:
        (new_text:str, new_caret:int) with the caret right after the inserted word/space
    """
    start, end = suggestion.range_start, suggestion.range_end
    space = "" if end < len(text) and text[end] == " " else " "
    new_text = text[:start] + suggestion.word + space + text[end:]
    return new_text, start + len(suggestion.word) + len(space)
