"""
currents.pipeline
────────────────────
entries dir → parse → status filter → render → splice → one write.

The page is read, spliced and written as a whole; nothing touches the output
file until the full replacement exists.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from currents import config
from currents.entries import active_entries, load_entries
from currents.logs import get_logger
from currents.render import MarkdownRenderer, markdown_to_html, render_entry
from currents.splice import splice_page


@dataclass
class BuildConfig:
    entries_dir: Path
    page_path: Path
    output_path: Path | None = None
    start_marker: str = "<!-- CURRENTS:START -->"
    end_marker: str = "<!-- CURRENTS:END -->"
    markdown_extensions: list[str] = field(default_factory=lambda: ["fenced_code", "tables"])

    @property
    def target(self) -> Path:
        return self.output_path or self.page_path

    @classmethod
    def from_env(cls) -> "BuildConfig":
        return cls(
            entries_dir=config.entries_dir(),
            page_path=config.page_path(),
            start_marker=config.marker_start(),
            end_marker=config.marker_end(),
            markdown_extensions=config.markdown_extensions(),
        )


@dataclass
class BuildResult:
    rendered: int
    skipped: int
    output_path: Path
    changed: bool
    html: str
    written: bool = False


def _write_whole(path: Path, content: str) -> None:
    tmp = path.with_name(path.name + ".tmp")
    tmp.write_text(content, encoding="utf-8")
    tmp.replace(path)


def build_page(
    cfg: BuildConfig,
    to_html: MarkdownRenderer | None = None,
    dry_run: bool = False,
) -> BuildResult:
    logger = get_logger("currents.pipeline")
    if to_html is None:
        extensions = list(cfg.markdown_extensions)

        def to_html(text: str) -> str:
            return markdown_to_html(text, extensions)

    entries = load_entries(cfg.entries_dir)
    active = active_entries(entries)
    fragments = [render_entry(e.fields, e.body, e.filename, to_html) for e in active]

    page_html = cfg.page_path.read_text(encoding="utf-8")
    new_html = splice_page(page_html, fragments, cfg.start_marker, cfg.end_marker)

    target = cfg.target
    if target == cfg.page_path:
        previous = page_html
    elif target.exists():
        previous = target.read_text(encoding="utf-8")
    else:
        previous = None
    result = BuildResult(
        rendered=len(active),
        skipped=len(entries) - len(active),
        output_path=target,
        changed=new_html != previous,
        html=new_html,
    )

    if dry_run:
        logger.info("dry run: %d rendered, %d skipped, target=%s", result.rendered, result.skipped, target)
        return result

    _write_whole(target, new_html)
    result.written = True
    logger.info("built %s: %d rendered, %d skipped", target, result.rendered, result.skipped)
    return result
