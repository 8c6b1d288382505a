"""Shared test fixtures."""

import pytest

PAGE = """<!doctype html>
<html>
<body>
<header>Currents</header>
<!-- CURRENTS:START -->
<p>stale</p>
<!-- CURRENTS:END -->
<footer>bye</footer>
</body>
</html>
"""


@pytest.fixture
def tmp_site(tmp_path):
    """Temporary site with two entries and a page carrying the markers."""
    entries = tmp_path / "src" / "currents" / "entries"
    entries.mkdir(parents=True)

    (entries / "2024-01-01__new-year.md").write_text("""---
id: "2024-01-01__new-year"
date: "2024-01-01"
title: "New Year"
status: "active"
archive: null
tags: ["reading"]
url_1: "https://example.com/a"
---
Hello **world**.
""", encoding="utf-8")

    (entries / "2023-12-31__draft.md").write_text("""---
title: "Draft"
status: "draft"
---
Not yet.
""", encoding="utf-8")

    (tmp_path / "currents.html").write_text(PAGE, encoding="utf-8")
    return tmp_path


@pytest.fixture(autouse=True)
def env_override(tmp_site, tmp_path, monkeypatch):
    """Point every setting at the temporary site."""
    monkeypatch.setenv("CURRENTS_SITE_ROOT", str(tmp_site))
    monkeypatch.setenv("CURRENTS_LOG_DIR", str(tmp_path / "logs"))
    for name in (
        "CURRENTS_ENTRIES_DIR",
        "CURRENTS_PAGE",
        "CURRENTS_MARKER_START",
        "CURRENTS_MARKER_END",
        "CURRENTS_MARKDOWN_EXTENSIONS",
        "CURRENTS_EDITOR_HOST",
        "CURRENTS_EDITOR_PORT",
    ):
        monkeypatch.delenv(name, raising=False)
