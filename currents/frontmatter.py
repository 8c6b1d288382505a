"""
currents.frontmatter
───────────────────────
Frontmatter codec for currents entries.

Header grammar (one field per line, between two ``---`` lines)::

    header  := "---" NL { line NL } "---" [NL]
    line    := key ":" value          # lines without ":" are skipped
    value   := "null"                 # -> None
             | "[" [item {"," item}] "]"   # -> list[str], empty items dropped
             | quoted | bare          # -> str

Quoted values lose one layer of matching quotes. Double-quoted values that
are valid JSON string literals are JSON-decoded, which undoes the escaping
applied by :func:`serialize_frontmatter`.
"""

from __future__ import annotations

import json

DELIMITER = "---"

FIELD_ORDER: tuple[str, ...] = (
    "id",
    "date",
    "title",
    "status",
    "archive",
    "tags",
    "url_1",
    "url_2",
    "url_3",
    "image_top",
    "image_bottom",
    "image_alt",
    "audio_top",
    "audio_bottom",
    "audio_caption",
)

# Closing rule the editor appends after every body.
ENTRY_RULE = "-" * 89


# ── Parsing ──────────────────────────────────────────────────────

def _is_delimiter(line: str) -> bool:
    return line.rstrip() == DELIMITER


def _unquote(raw: str) -> str:
    if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in {'"', "'"}:
        if raw[0] == '"':
            try:
                decoded = json.loads(raw)
            except ValueError:
                return raw[1:-1]
            if isinstance(decoded, str):
                return decoded
        return raw[1:-1]
    return raw


def _split_items(inner: str) -> list[str]:
    """Split ``a, "b, c", 'd'`` on the commas that sit outside quotes."""
    items: list[str] = []
    current: list[str] = []
    quote: str | None = None
    escaped = False
    for ch in inner:
        if quote is not None:
            current.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\" and quote == '"':
                escaped = True
            elif ch == quote:
                quote = None
            continue
        if ch == ",":
            items.append("".join(current))
            current = []
            continue
        if ch in {'"', "'"} and not "".join(current).strip():
            quote = ch
        current.append(ch)
    items.append("".join(current))
    return items


def parse_value(raw: str) -> str | list[str] | None:
    """Parse one header value (already stripped of the key and colon)."""
    value = raw.strip()
    if value == "null":
        return None
    if value.startswith("[") and value.endswith("]"):
        inner = value[1:-1].strip()
        if not inner:
            return []
        parsed = (_unquote(piece.strip()) for piece in _split_items(inner))
        return [item for item in parsed if item.strip()]
    return _unquote(value)


def parse_header(lines: list[str]) -> dict[str, object]:
    fields: dict[str, object] = {}
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        key, sep, rest = stripped.partition(":")
        if not sep:
            continue
        key = key.strip()
        if not key:
            continue
        fields[key] = parse_value(rest)
    return fields


def parse_frontmatter(content: str) -> tuple[dict[str, object], str]:
    """
    Split an entry document into header fields and body.

    Returns:
        (fields, body). Without an opening ``---`` on the first line, or
        without a closing one, returns ({}, content).
    """
    lines = content.split("\n")
    if not _is_delimiter(lines[0]):
        return {}, content

    for index in range(1, len(lines)):
        if _is_delimiter(lines[index]):
            header = [line.rstrip("\r") for line in lines[1:index]]
            body = "\n".join(lines[index + 1:])
            return parse_header(header), body

    return {}, content


# ── Serializing ──────────────────────────────────────────────────

def _quote(value: object) -> str:
    text = str(value)
    # Colons and control characters (newlines included) would break the header line.
    if ":" in text or any(ch < " " for ch in text):
        return json.dumps(text, ensure_ascii=False)
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _tags_line(value: object) -> str:
    if isinstance(value, str):
        tags = [value] if value.strip() else []
    elif isinstance(value, (list, tuple)):
        tags = list(value)
    else:
        tags = []
    rendered = ", ".join(_quote(tag) for tag in tags)
    return f"tags: [{rendered}]"


def serialize_frontmatter(fields: dict[str, object]) -> str:
    """Render the fixed fifteen-field header. Keys outside FIELD_ORDER are dropped."""
    lines = [DELIMITER]
    for key in FIELD_ORDER:
        if key == "tags":
            lines.append(_tags_line(fields.get("tags")))
            continue
        if key not in fields:
            lines.append(f'{key}: ""')
        elif fields[key] is None:
            lines.append(f"{key}: null")
        else:
            lines.append(f"{key}: {_quote(fields[key])}")
    lines.append(DELIMITER)
    return "\n".join(lines)


def build_entry_document(fields: dict[str, object], body: str) -> str:
    """Header + body + closing rule, in the shape the editor writes to disk."""
    clean_body = (body or "").rstrip()
    return f"{serialize_frontmatter(fields)}\n{clean_body}\n\n{ENTRY_RULE}\n"
