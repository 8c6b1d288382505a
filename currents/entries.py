"""Entry documents on disk."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from currents.frontmatter import parse_frontmatter
from currents.logs import get_logger
from currents.render import entry_date

ACTIVE = "active"
ENTRY_SUFFIX = ".md"


@dataclass
class Entry:
    filename: str
    fields: dict[str, object] = field(default_factory=dict)
    body: str = ""

    @property
    def stem(self) -> str:
        return self.filename[: -len(ENTRY_SUFFIX)] if self.filename.endswith(ENTRY_SUFFIX) else self.filename

    @property
    def entry_id(self) -> str:
        value = self.fields.get("id")
        return value if isinstance(value, str) and value else self.stem

    @property
    def date(self) -> str:
        return entry_date(self.fields, self.filename)

    @property
    def status(self) -> str:
        value = self.fields.get("status")
        return value if isinstance(value, str) and value else ACTIVE

    @property
    def tags(self) -> list[str]:
        value = self.fields.get("tags")
        return list(value) if isinstance(value, list) else []

    @property
    def is_active(self) -> bool:
        return self.status == ACTIVE

    def summary(self) -> dict[str, str]:
        """Row for the editor's entry list."""
        title = self.fields.get("title")
        date = self.fields.get("date")
        return {
            "file": self.filename,
            "id": self.entry_id,
            "date": date if isinstance(date, str) else "",
            "title": title if isinstance(title, str) and title else self.stem,
            "status": self.status,
        }


def read_entry(path: Path) -> Entry:
    fields, body = parse_frontmatter(path.read_text(encoding="utf-8"))
    return Entry(filename=path.name, fields=fields, body=body)


def entry_files(entries_dir: Path) -> list[Path]:
    """``*.md`` files, newest first (descending filename)."""
    if not entries_dir.is_dir():
        get_logger("currents.entries").warning("entries dir not found, treating as empty: %s", entries_dir)
        return []
    files = [p for p in entries_dir.iterdir() if p.is_file() and p.name.endswith(ENTRY_SUFFIX)]
    return sorted(files, key=lambda p: p.name, reverse=True)


def load_entries(entries_dir: Path) -> list[Entry]:
    return [read_entry(path) for path in entry_files(entries_dir)]


def active_entries(entries: list[Entry]) -> list[Entry]:
    return [entry for entry in entries if entry.is_active]
