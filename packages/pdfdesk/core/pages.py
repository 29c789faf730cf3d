"""Page range parsing and validation shared by the split and delete tools.

Users name pages with a small mini-language: comma separated tokens where each
token is either a 1-based page number (``5``) or an inclusive 1-based range
(``8-10``).  Parsing is lenient: malformed tokens are dropped silently and
duplicates coalesce.  Whether anything useful was selected is decided later by
:func:`validate_page_indices` once the document's page count is known.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, List

from .exceptions import EmptyRangeError, NoValidPagesError

# Upper bound on a single range when no page count is known.
MAX_RANGE_PAGES = 100_000

_INTEGER = re.compile(r"[+-]?[0-9]+")


def require_range_spec(spec: str | None) -> str:
    """Return ``spec`` stripped, raising :class:`EmptyRangeError` when blank."""

    if spec is None or not spec.strip():
        raise EmptyRangeError()
    return spec.strip()


def _parse_int(text: str) -> int | None:
    text = text.strip()
    if not _INTEGER.fullmatch(text):
        return None
    return int(text)


def _token_indices(token: str, page_count: int | None) -> Iterator[int]:
    if "-" in token:
        start_str, end_str = token.split("-", 1)
        start = _parse_int(start_str)
        end = _parse_int(end_str)
        if start is None or end is None:
            return
        if page_count is not None:
            # Nothing past the last page can survive validation.
            end = min(end, page_count)
        else:
            end = min(end, start - 1 + MAX_RANGE_PAGES)
        yield from range(start - 1, end)
        return

    number = _parse_int(token)
    if number is not None:
        yield number - 1


def parse_page_range(spec: str, *, page_count: int | None = None) -> frozenset[int]:
    """Parse ``spec`` into a set of zero-based page indices.

    Args:
        spec: Comma separated page numbers and ranges, e.g. ``"1-3, 5, 8-10"``.
        page_count: Optional page count used only to bound range expansion.
            Indices are not filtered here; see :func:`validate_page_indices`.
            Without it a single range expands to at most
            :data:`MAX_RANGE_PAGES` pages.

    Returns:
        A frozenset of zero-based indices. Never raises; an input without any
        usable token yields an empty set.
    """

    indices: set[int] = set()
    for raw_token in spec.split(","):
        token = raw_token.strip()
        if not token:
            continue
        indices.update(_token_indices(token, page_count))
    return frozenset(indices)


def validate_page_indices(indices: Iterable[int], page_count: int) -> List[int]:
    """Filter ``indices`` to those addressing a page of the document.

    The survivors are returned sorted in ascending order.

    Raises:
        NoValidPagesError: If no index lies in ``[0, page_count)``.
    """

    valid = sorted({index for index in indices if 0 <= index < page_count})
    if not valid:
        raise NoValidPagesError("No valid pages were selected.")
    return valid


def resolve_page_range(spec: str | None, page_count: int) -> List[int]:
    """Run :func:`require_range_spec`, parsing and validation in one step."""

    text = require_range_spec(spec)
    return validate_page_indices(parse_page_range(text, page_count=page_count), page_count)


__all__ = [
    "MAX_RANGE_PAGES",
    "require_range_spec",
    "parse_page_range",
    "validate_page_indices",
    "resolve_page_range",
]
