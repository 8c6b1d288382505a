from currents.entries import Entry, active_entries, load_entries
from currents.frontmatter import build_entry_document, parse_frontmatter, serialize_frontmatter
from currents.pipeline import BuildConfig, BuildResult, build_page
from currents.render import render_entry
from currents.splice import SpliceError, splice_page

__all__ = [
    "BuildConfig",
    "BuildResult",
    "Entry",
    "SpliceError",
    "active_entries",
    "build_entry_document",
    "build_page",
    "load_entries",
    "parse_frontmatter",
    "render_entry",
    "serialize_frontmatter",
    "splice_page",
]
