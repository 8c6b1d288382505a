"""File-backed CRUD over the currents entries directory."""

from __future__ import annotations

import re
from pathlib import Path

from currents.entries import ENTRY_SUFFIX, Entry, entry_files, read_entry
from currents.frontmatter import build_entry_document
from currents.render import entry_date

_SAFE_NAME_RE = re.compile(r"^[A-Za-z0-9._-]+$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_SLUG_MAX = 80


class EntryStoreError(RuntimeError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def safe_basename(name: str | None) -> str | None:
    """Basename of ``name`` if it only uses letters, digits, dot, dash, underscore."""
    base = Path(name or "").name
    if not base or base in {".", ".."} or not _SAFE_NAME_RE.match(base):
        return None
    return base


def slugify(text: str | None) -> str:
    slug = str(text or "").lower().strip()
    slug = re.sub(r"['\"]", "", slug)
    slug = re.sub(r"[^a-z0-9]+", "-", slug)
    slug = slug.strip("-")[:_SLUG_MAX]
    return slug or "entry"


def _clean_tags(tags: object) -> list[str]:
    if not isinstance(tags, list):
        return []
    return [str(t).strip() for t in tags if str(t).strip()]


class EntryStore:
    def __init__(self, entries_dir: Path) -> None:
        self.entries_dir = entries_dir

    def _path(self, file: str | None) -> Path:
        name = safe_basename(file)
        if name is None:
            raise EntryStoreError("bad file name", status_code=400)
        return self.entries_dir / name

    def list_entries(self) -> list[dict[str, str]]:
        rows = [read_entry(path).summary() for path in entry_files(self.entries_dir)]
        # YYYY-MM-DD sorts lexically
        rows.sort(key=lambda row: row["date"], reverse=True)
        return rows

    def read_entry(self, file: str | None) -> Entry:
        path = self._path(file)
        if not path.is_file():
            raise EntryStoreError(f"entry not found: {path.name}", status_code=404)
        return read_entry(path)

    def create_entry(self, data: dict[str, object], body: str) -> tuple[str, str]:
        """Write a new entry; returns (file, id). Never overwrites."""
        date = str(data.get("date") or "").strip()
        title = str(data.get("title") or "").strip()
        if not _DATE_RE.match(date):
            raise EntryStoreError("date must be YYYY-MM-DD", status_code=400)
        if not title:
            raise EntryStoreError("title required", status_code=400)

        entry_id = f"{date}__{slugify(title)}"
        file = f"{entry_id}{ENTRY_SUFFIX}"
        fields = dict(data)
        fields.update(
            id=entry_id,
            date=date,
            title=title,
            status=str(data.get("status") or "").strip() or "active",
            archive=None,
            tags=_clean_tags(data.get("tags")),
        )

        self.entries_dir.mkdir(parents=True, exist_ok=True)
        path = self.entries_dir / file
        try:
            with path.open("x", encoding="utf-8") as handle:
                handle.write(build_entry_document(fields, body))
        except FileExistsError as exc:
            raise EntryStoreError(f"file already exists: {file}", status_code=409) from exc
        return file, entry_id

    def save_entry(self, file: str | None, data: dict[str, object], body: str) -> str:
        """Rewrite an existing entry, keeping its stored id, date and archive."""
        existing = self.read_entry(file)
        old = existing.fields

        # header date, else the filename prefix when it is one
        stored_date = entry_date(old, existing.filename)
        if stored_date == existing.filename[:10] and not _DATE_RE.match(stored_date):
            stored_date = ""
        new_date = str(data.get("date") or "").strip()
        if stored_date and new_date and new_date != stored_date:
            raise EntryStoreError("date is fixed once an entry is created", status_code=400)

        old_id = old.get("id")
        new_id = data.get("id")
        if isinstance(old_id, str) and old_id:
            entry_id = old_id
        elif isinstance(new_id, str) and new_id:
            entry_id = new_id
        else:
            entry_id = existing.stem

        fields = dict(data)
        fields.update(
            id=entry_id,
            date=stored_date or new_date,
            status=str(data.get("status") or "").strip() or "active",
            archive=old.get("archive"),
            tags=_clean_tags(data.get("tags")),
        )

        path = self.entries_dir / existing.filename
        path.write_text(build_entry_document(fields, body), encoding="utf-8")
        return existing.filename
