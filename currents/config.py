"""
currents.config
──────────────────
Settings for the currents build and the editor. No hardcoded site paths.

Precedence: environment variables > .env file > defaults.
Every setting is a function so tests can steer it with monkeypatch.setenv.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# ── .env (loaded once) ────────────────────────────────────────────
load_dotenv(Path.cwd() / ".env", override=False)


# ── Paths ─────────────────────────────────────────────────────────

def site_root() -> Path:
    """Root of the static site. CURRENTS_SITE_ROOT overrides the working directory."""
    return Path(os.getenv("CURRENTS_SITE_ROOT", str(Path.cwd())))


def entries_dir() -> Path:
    """Directory holding the entry markdown files."""
    custom = os.getenv("CURRENTS_ENTRIES_DIR", "").strip()
    if custom:
        return Path(custom)
    return site_root() / "src" / "currents" / "entries"


def page_path() -> Path:
    """HTML page whose marker region receives the rendered entries."""
    custom = os.getenv("CURRENTS_PAGE", "").strip()
    if custom:
        return Path(custom)
    return site_root() / "currents.html"


def log_dir() -> Path:
    """Log directory (created on demand). Defaults outside the served site tree."""
    custom = os.getenv("CURRENTS_LOG_DIR", "").strip()
    d = Path(custom) if custom else Path.home() / ".currents" / "logs"
    d.mkdir(parents=True, exist_ok=True)
    return d


# ── Page markers ──────────────────────────────────────────────────

def marker_start() -> str:
    return os.getenv("CURRENTS_MARKER_START", "<!-- CURRENTS:START -->")


def marker_end() -> str:
    return os.getenv("CURRENTS_MARKER_END", "<!-- CURRENTS:END -->")


# ── Markdown ──────────────────────────────────────────────────────

def markdown_extensions() -> list[str]:
    """Python-Markdown extensions used for entry bodies."""
    raw = os.getenv("CURRENTS_MARKDOWN_EXTENSIONS", "fenced_code,tables")
    return [x.strip() for x in raw.split(",") if x.strip()]


# ── Editor ────────────────────────────────────────────────────────

def editor_host() -> str:
    return os.getenv("CURRENTS_EDITOR_HOST", "127.0.0.1").strip() or "127.0.0.1"


def editor_port() -> int:
    return int(os.getenv("CURRENTS_EDITOR_PORT", "8765"))
