"""Readable context for resource strings the host refused to parse."""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from .log_utils import sanitize_log

_LOCATION_RE = re.compile(r"Error in line (\d+), at character offset (\d+),")

DEFAULT_CONTEXT_LINES = 10


def parse_error_location(description: str) -> Optional[Tuple[int, int]]:
    """Return ``(line, offset)`` from a host grammar error, or None.

    ``line`` is 1-based, ``offset`` is the character offset within that line.
    """
    m = _LOCATION_RE.search(description or "")
    if not m:
        return None
    return int(m.group(1)), int(m.group(2))


def _numbered(lines: List[str], start: int, stop: int, mark: Optional[int], offset: int) -> List[str]:
    width = len(str(stop))
    out: List[str] = []
    for no in range(start, stop + 1):
        prefix = ">>" if no == mark else "  "
        out.append(f"{prefix} {no:>{width}} | {lines[no - 1]}")
        if no == mark:
            pad = " " * (len(prefix) + 1 + width + 3)
            out.append(pad + " " * max(0, offset) + "^")
    return out


def format_resource_error(resource: str, description: str, context: int = DEFAULT_CONTEXT_LINES) -> str:
    """Render *description* plus up to *context* lines either side of the error."""
    description = sanitize_log(description).strip()
    lines = (resource or "").split("\n")
    header = [f"Resource error: {description}"]

    loc = parse_error_location(description)
    if loc is None:
        stop = min(len(lines), 2 * context + 1)
        return "\n".join(header + _numbered(lines, 1, stop, None, 0))

    line, offset = loc
    # Host line numbers can point one past the end on unterminated input.
    line = max(1, min(line, len(lines)))
    start = max(1, line - context)
    stop = min(len(lines), line + context)
    return "\n".join(header + _numbered(lines, start, stop, line, offset))


__all__ = ["DEFAULT_CONTEXT_LINES", "format_resource_error", "parse_error_location"]
