from __future__ import annotations

import pytest

from currents.splice import SpliceError, splice_page


def test_splice_preserves_outside_text() -> None:
    page = "<p>A</p><!--S-->old<!--E--><p>B</p>"
    out = splice_page(page, ["X"], "<!--S-->", "<!--E-->")
    assert out.startswith("<p>A</p><!--S-->")
    assert out.endswith("<!--E--><p>B</p>")
    assert "old" not in out
    assert out == '<p>A</p><!--S-->\n<div class="currents-entries">\nX\n</div>\n<!--E--><p>B</p>'


def test_splice_joins_fragments_with_newlines() -> None:
    out = splice_page("[s][e]", ["one", "two"], "[s]", "[e]")
    assert out == '[s]\n<div class="currents-entries">\none\ntwo\n</div>\n[e]'


def test_splice_with_no_fragments() -> None:
    out = splice_page("<!--S--><!--E-->", [], "<!--S-->", "<!--E-->")
    assert out == '<!--S-->\n<div class="currents-entries">\n</div>\n<!--E-->'


def test_splice_is_idempotent() -> None:
    page = "head <!--S--> x <!--E--> tail"
    once = splice_page(page, ["F"], "<!--S-->", "<!--E-->")
    assert splice_page(once, ["F"], "<!--S-->", "<!--E-->") == once


@pytest.mark.parametrize(
    "page",
    [
        "<p>no markers</p>",
        "<!--S--> only start",
        "only end <!--E-->",
        "<!--E--> reversed <!--S-->",
    ],
)
def test_splice_rejects_bad_markers(page: str) -> None:
    with pytest.raises(SpliceError):
        splice_page(page, ["X"], "<!--S-->", "<!--E-->")
