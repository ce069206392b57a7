# prefix_search/searcher.py
import time

from prefix_search.corpus import Corpus, load_corpus
from prefix_search.errors import EmptyQuery, NoMatch, NoResults
from prefix_search.lexicon import Lexicon
from prefix_search.parser import Parser
from prefix_search.paths import DATA_DIR, QUERY_EXPANSION_LIMIT
from prefix_search.ranker import Ranker


class SearchResult:
    """
    Matched document ids (ascending) and how long the lookup took.
    Read-only once built; safe to hand to several renderers.
    """

    __slots__ = ("doc_ids", "elapsed_ms", "_projects")

    def __init__(self, doc_ids, elapsed_ms, projects):
        self.doc_ids = tuple(doc_ids)
        self.elapsed_ms = elapsed_ms
        self._projects = projects

    def __len__(self):
        return len(self.doc_ids)

    def __iter__(self):
        return iter(self.doc_ids)

    @property
    def documents(self):
        """(docid, name) pairs in docid order."""
        return [(d, self._projects[d]) for d in self.doc_ids]


class Searcher:
    """
    Prefix AND-searcher over an in-memory corpus.

    - Every query token expands to all dictionary words it prefixes.
    - A document matches a token if it contains any of those words (OR within a token).
    - A document matches the query if it matches every token (AND across tokens).
    - Results come back ordered by docid, not by relevance.
    """

    def __init__(self, corpus=None, expansion_limit: int = QUERY_EXPANSION_LIMIT):
        # corpus can be:
        # - Corpus (preferred)
        # - str directory / base URL to load from
        # - None (load from DATA_DIR)
        if isinstance(corpus, Corpus):
            self.corpus = corpus
        elif isinstance(corpus, str):
            self.corpus = load_corpus(corpus)
        elif corpus is None:
            self.corpus = load_corpus(DATA_DIR)
        else:
            raise TypeError(f"corpus must be Corpus | str | None, got {type(corpus)}")

        self.expansion_limit = expansion_limit
        self.parser = Parser()
        self.lexicon = Lexicon.from_corpus(self.corpus)
        self.ranker = Ranker(self.lexicon, parser=self.parser)

    def _token_docs(self, token: str) -> set:
        """
        Union of postings over every dictionary word starting with `token`.
        Raises NoMatch if no word does.
        """
        words = self.lexicon.matching_words(token, self.expansion_limit)
        if not words:
            raise NoMatch(token)
        docs = set()
        for w in words:
            docs.update(self.lexicon.postings(w))
        return docs

    def search(self, query: str) -> SearchResult:
        """
        Execute a prefix AND-query.
        Returns:
            SearchResult with ascending doc_ids and elapsed_ms
        Raises:
            EmptyQuery, NoMatch(token), NoResults
        """
        t0 = time.perf_counter()
        q_terms = self.parser.tokenize(query)
        if not q_terms:
            raise EmptyQuery()

        postings_sets = [self._token_docs(t) for t in q_terms]
        allowed = set.intersection(*postings_sets)
        elapsed_ms = (time.perf_counter() - t0) * 1000

        if not allowed:
            raise NoResults(elapsed_ms)
        return SearchResult(sorted(allowed), elapsed_ms, self.corpus.projects)

    def autocomplete(self, text: str, caret: int):
        """Ranked completions for the word under `caret`; see Ranker.rank."""
        return self.ranker.rank(text, caret)


if __name__ == "__main__":
    # Run from project root:  python -m prefix_search.searcher
    from prefix_search.errors import SearchError

    s = Searcher()
    while True:
        try:
            q = input("query> ")
        except EOFError:
            break
        try:
            res = s.search(q)
        except SearchError as e:
            print(e)
            continue
        print(f"Found {len(res)} projects in {res.elapsed_ms:.2f}ms.")
        for docid, name in res.documents[:10]:
            print(f"  {docid + 1}\t{name}")
