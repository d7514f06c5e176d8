"""Tk implementation of the host UI materialization call.

The grammar parser is importable without tkinter; the widget builder is
loaded lazily so headless environments can still parse and check resources.
"""

from __future__ import annotations

from typing import Any

from .grammar import ResourceNode, ResourceParseError, parse_resource

__all__ = ["ResourceNode", "ResourceParseError", "TkAlertChannel", "TkElement", "TkUIHost", "parse_resource"]


def __getattr__(name: str) -> Any:
    if name in {"TkAlertChannel", "TkElement", "TkUIHost"}:
        from . import materialize

        return getattr(materialize, name)
    raise AttributeError(name)
