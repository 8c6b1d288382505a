"""
build_currents.py ── render entries into the currents page

Usage:
  python scripts/build_currents.py                 # splice into currents.html in place
  python scripts/build_currents.py --dry-run       # compute only, write nothing
  python scripts/build_currents.py --out /tmp/currents.html
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from rich.console import Console
from rich.markup import escape

from currents.pipeline import BuildConfig, build_page
from currents.splice import SpliceError

console = Console()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render currents entries into the page marker region.")
    parser.add_argument("--entries", type=Path, default=None, help="Entries directory. Default: CURRENTS_ENTRIES_DIR.")
    parser.add_argument("--page", type=Path, default=None, help="Page with the marker region. Default: CURRENTS_PAGE.")
    parser.add_argument("--out", type=Path, default=None, help="Write here instead of overwriting --page.")
    parser.add_argument("--dry-run", action="store_true", help="Build without writing.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    cfg = BuildConfig.from_env()
    if args.entries:
        cfg.entries_dir = args.entries.expanduser()
    if args.page:
        cfg.page_path = args.page.expanduser()
    cfg.output_path = args.out.expanduser() if args.out else None

    if not cfg.page_path.exists():
        console.print(f"[red]error:[/red] page not found: {escape(str(cfg.page_path))}", soft_wrap=True)
        return 1

    try:
        result = build_page(cfg, dry_run=args.dry_run)
    except SpliceError as exc:
        console.print(f"[red]error:[/red] {escape(str(exc))} ({escape(str(cfg.page_path))})", soft_wrap=True)
        return 1

    mode = "dry-run" if args.dry_run else "write"
    state = "changed" if result.changed else "unchanged"
    console.print(
        f"mode={mode} entries={escape(str(cfg.entries_dir))} rendered={result.rendered} "
        f"skipped={result.skipped} out={escape(str(result.output_path))} [bold]{state}[/bold]",
        soft_wrap=True,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
