"""Logging setup and message cleanup.

Kept free of tkinter imports so both the CLI and headless hosts can use it.
"""

from __future__ import annotations

import logging
import os
import re
import sys
from pathlib import Path
from typing import Optional

_ANSI_ESCAPE_RE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def helpers_home() -> Path:
    env = os.environ.get("SCRIPTUI_HELPERS_HOME")
    if env:
        return Path(env).expanduser()
    return Path.home() / ".scriptui_helpers"


def sanitize_log(text: str) -> str:
    """Normalize host messages before they are logged or alerted.

    - ``\\r\\n`` and lone ``\\r`` become ``\\n``.
    - ANSI escape sequences are stripped.
    - Trailing whitespace is removed per line.
    """
    if not text:
        return ""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _ANSI_ESCAPE_RE.sub("", text)
    return "\n".join(line.rstrip() for line in text.split("\n"))


def setup_logging(level: int = logging.INFO, *, log_file: bool = True) -> Optional[str]:
    """Configure root logging to stdout and ``<home>/scriptui.log``.

    An existing root configuration (e.g. when embedded in a host that already
    logs) is left alone, level included. Returns the log file path, or None
    if no file handler was added.
    """
    root = logging.getLogger()
    if root.handlers:
        return None

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    log_path: Optional[Path] = None
    if log_file:
        try:
            log_dir = helpers_home()
            log_dir.mkdir(parents=True, exist_ok=True)
            log_path = log_dir / "scriptui.log"
            handlers.append(logging.FileHandler(str(log_path), mode="a", encoding="utf-8"))
        except OSError as e:
            log_path = None
            print(f"[warn] could not open log file: {e}", file=sys.stderr)

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
    return str(log_path) if log_path else None


__all__ = ["LOG_FORMAT", "helpers_home", "sanitize_log", "setup_logging"]
