# prefix_search/errors.py
"""
Error kinds raised by the engine.

LoadFailure is fatal to corpus construction. Everything else is a
query-time error: the engine stays usable after raising it.
"""


class SearchError(Exception):
    """Base class for every engine error."""


class LoadFailure(SearchError):
    """An artifact is missing, malformed or fails validation."""


class EmptyQuery(SearchError):
    """The input contains no letter or digit tokens."""

    def __init__(self, message="Please enter valid search terms (words or numbers)."):
        super().__init__(message)


class NoMatch(SearchError):
    """A query term has no dictionary entry with that prefix."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f'No words found starting with "{token}".')


class NoResults(SearchError):
    """Every term resolved, but no document contains all of them."""

    def __init__(self, elapsed_ms=None):
        self.elapsed_ms = elapsed_ms
        super().__init__("No projects found matching all search terms.")


class PageOutOfRange(SearchError):
    """A results page outside 1..total_pages was requested."""

    def __init__(self, page: int, total_pages: int):
        self.page = page
        self.total_pages = total_pages
        super().__init__(f"page {page} out of range (1..{total_pages})")
