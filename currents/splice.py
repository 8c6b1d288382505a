"""Marker-delimited text splicing for the currents page."""

from __future__ import annotations

from typing import Iterable

WRAPPER_OPEN = '<div class="currents-entries">'
WRAPPER_CLOSE = "</div>"


class SpliceError(ValueError):
    """Raised when the page markers are missing or out of order."""


def splice_page(
    page_html: str,
    fragments: Iterable[str],
    start_marker: str,
    end_marker: str,
) -> str:
    """
    Replace the region between the two markers with the wrapped fragments.

    Plain string slicing: everything before the start marker and from the end
    marker onward is returned unchanged.
    """
    start_idx = page_html.find(start_marker)
    end_idx = page_html.find(end_marker)
    if start_idx == -1:
        raise SpliceError(f"start marker not found: {start_marker}")
    if end_idx == -1:
        raise SpliceError(f"end marker not found: {end_marker}")
    if end_idx < start_idx + len(start_marker):
        raise SpliceError("end marker appears before start marker")

    before = page_html[: start_idx + len(start_marker)]
    after = page_html[end_idx:]
    region = "\n".join([WRAPPER_OPEN, *fragments, WRAPPER_CLOSE])
    return f"{before}\n{region}\n{after}"
