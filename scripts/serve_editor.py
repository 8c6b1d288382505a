"""
serve_editor.py ── run the currents editor locally (development only)

Usage:
  python scripts/serve_editor.py
  python scripts/serve_editor.py --port 9000
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import uvicorn

from currents.config import editor_host, editor_port


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the currents editor GUI and API.")
    parser.add_argument("--host", default=editor_host(), help="Bind address. Default: CURRENTS_EDITOR_HOST.")
    parser.add_argument("--port", type=int, default=editor_port(), help="Port. Default: CURRENTS_EDITOR_PORT.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    print(f"currents editor: http://{args.host}:{args.port}/__currents")
    uvicorn.run("apps.currents_editor.main:app", host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
