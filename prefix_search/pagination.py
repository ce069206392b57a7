# prefix_search/pagination.py
import math

from prefix_search.errors import PageOutOfRange
from prefix_search.paths import RESULTS_PER_PAGE, MAX_PAGE_BUTTONS


class Page:
    """
    One page of results.
    number/total_pages are 1-based; start/end are the 1-based positions
    of the first and last item shown ("Showing 101-123 of 123").
    """

    __slots__ = ("number", "total_pages", "start", "end", "items")

    def __init__(self, number, total_pages, start, end, items):
        self.number = number
        self.total_pages = total_pages
        self.start = start
        self.end = end
        self.items = items


def total_pages(n_results: int, per_page: int = RESULTS_PER_PAGE) -> int:
    return math.ceil(n_results / per_page)


def paginate(results, page: int, per_page: int = RESULTS_PER_PAGE) -> Page:
    """
    Slice `results` (any sequence) to page `page`.
    Raises PageOutOfRange for page < 1 or page > total pages.
    """
    if per_page < 1:
        raise ValueError("per_page must be >= 1")
    pages = total_pages(len(results), per_page)
    if page < 1 or page > pages:
        raise PageOutOfRange(page, pages)
    lo = (page - 1) * per_page
    hi = min(lo + per_page, len(results))
    return Page(page, pages, lo + 1, hi, list(results[lo:hi]))


def page_window(current: int, pages: int, max_buttons: int = MAX_PAGE_BUTTONS):
    """
    Page numbers for a pager strip, None where an ellipsis goes.
    The window is centered on `current`, shifted to stay within 1..pages,
    and always includes the first and last page.

        page_window(10, 20) -> [1, None, 7, 8, 9, 10, 11, 12, 13, None, 20]
    """
    if pages <= 1:
        return []
    start = max(1, current - max_buttons // 2)
    end = min(pages, start + max_buttons - 1)
    if end - start < max_buttons - 1:
        start = max(1, end - max_buttons + 1)

    out = []
    if start > 1:
        out.append(1)
        if start > 2:
            out.append(None)
    out.extend(range(start, end + 1))
    if end < pages:
        if end < pages - 1:
            out.append(None)
        out.append(pages)
    return out
