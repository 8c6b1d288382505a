"""
Render one currents entry into an HTML fragment.

Header values (date, title, urls, media paths, alt text) are HTML-escaped, so
markup typed into a title such as <em> shows as text. Only the markdown body
produces markup.
"""

from __future__ import annotations

from html import escape
from typing import Callable

import markdown

from currents.config import markdown_extensions

MarkdownRenderer = Callable[[str], str]

# Class name as spelled in the site stylesheet.
SEPARATOR = '<hr class="currents-seperator">'


def markdown_to_html(text: str, extensions: list[str] | None = None) -> str:
    """Default body renderer (Python-Markdown)."""
    if extensions is None:
        extensions = markdown_extensions()
    return markdown.markdown(text or "", extensions=extensions)


def _text(fields: dict[str, object], key: str) -> str:
    """Trimmed string value, or "" for absent, null and non-string values."""
    value = fields.get(key)
    return value.strip() if isinstance(value, str) else ""


def _attr(value: str) -> str:
    return escape(value, quote=True)


def _audio(src: str) -> str:
    return f'<audio controls src="{_attr(src)}"></audio>'


def _image(src: str, alt: object) -> str:
    alt_text = alt if isinstance(alt, str) else ""
    return f'<img src="{_attr(src)}" alt="{_attr(alt_text)}">'


def _link_block(url: str, position: str) -> str:
    return (
        f'<div class="currents-links currents-links-{position}">'
        f'<a href="{_attr(url)}" target="_blank" rel="noopener noreferrer">{escape(url)}</a>'
        "</div>"
    )


def _link_url(fields: dict[str, object], key: str) -> str:
    value = fields.get(key)
    return value if isinstance(value, str) and value else ""


def entry_date(fields: dict[str, object], filename: str) -> str:
    """Header date, else the YYYY-MM-DD prefix of the filename."""
    return _text(fields, "date") or (filename or "")[:10]


def render_entry(
    fields: dict[str, object],
    body: str,
    filename: str,
    to_html: MarkdownRenderer | None = None,
) -> str:
    """
    Build the <article> fragment for one entry.

    Block order is fixed: date, title, top audio, top image, top link, body,
    bottom link, bottom image, bottom audio, separator. Media and text blocks
    are emitted only for non-empty (trimmed) values; link blocks for any
    non-empty url_1 / url_2.
    """
    to_html = to_html or markdown_to_html
    parts: list[str] = []

    date_text = entry_date(fields, filename)
    if date_text:
        parts.append(f'<div class="currents-date">{escape(date_text)}</div>')

    title = _text(fields, "title")
    if title:
        parts.append(f'<div class="currents-title">{escape(title)}</div>')

    audio_top = _text(fields, "audio_top")
    if audio_top:
        parts.append(_audio(audio_top))

    image_top = _text(fields, "image_top")
    if image_top:
        parts.append(_image(image_top, fields.get("image_alt")))

    url_1 = _link_url(fields, "url_1")
    if url_1:
        parts.append(_link_block(url_1, "top"))

    parts.append(to_html(body or ""))

    url_2 = _link_url(fields, "url_2")
    if url_2:
        parts.append(_link_block(url_2, "bottom"))

    image_bottom = _text(fields, "image_bottom")
    if image_bottom:
        parts.append(_image(image_bottom, fields.get("image_alt")))

    audio_bottom = _text(fields, "audio_bottom")
    if audio_bottom:
        parts.append(_audio(audio_bottom))

    parts.append(SEPARATOR)

    inner = "\n".join(parts)
    return f'<article class="currents-entry">\n{inner}\n</article>'
