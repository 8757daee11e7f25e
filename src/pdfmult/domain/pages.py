"""Page-count resolution policy.

Explicit user input always wins, the external lookup is best effort, and an
unknown count degrades to the first page only.
"""

from __future__ import annotations

from collections.abc import Callable

PageCountLookup = Callable[[str], int | None]

FALLBACK_PAGE_COUNT = 1


def resolve_page_count(
    explicit: int | None,
    source_file: str,
    *,
    lookup: PageCountLookup,
) -> int:
    """Return the number of source pages to process.

    Args:
        explicit: Page count given by the caller; skips *lookup* when set.
        source_file: Passed to *lookup* unchanged.
        lookup: Returns the page count, or None when it is unknown.
    """
    if explicit is not None:
        return explicit
    count = lookup(source_file)
    if count is None:
        return FALLBACK_PAGE_COUNT
    return count
