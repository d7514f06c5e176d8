"""Command line interface for working with resource strings."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .diagnostics import format_resource_error
from .log_utils import setup_logging
from .resource_format import format_resource
from .tk_host.grammar import ResourceParseError, parse_resource

log = logging.getLogger(__name__)


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _cmd_format(args: argparse.Namespace) -> int:
    print(format_resource(_read_source(args.file)))
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    text = _read_source(args.file)
    try:
        node = parse_resource(text)
    except ResourceParseError as e:
        print(format_resource_error(text, e.description, context=args.context))
        return 1
    names = [n.name for n in node.walk() if n.name]
    print(f"OK: {node.type} with {len(names)} named elements")
    if args.list:
        for name in names:
            print(f"  {name}")
    return 0


def _cmd_preview(args: argparse.Namespace) -> int:
    from .tk_host.materialize import TkUIHost

    text = _read_source(args.file)
    host = TkUIHost()
    try:
        window = host.materialize(text)
    except ResourceParseError as e:
        print(format_resource_error(text, e.description))
        return 1
    window.widget.protocol("WM_DELETE_WINDOW", host.master.destroy)
    log.info("Previewing %s (close the window to exit)", args.file)
    host.master.mainloop()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="scriptui-helpers", description="Format, check and preview UI resource strings.")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = ap.add_subparsers(dest="command", required=True)

    p_fmt = sub.add_parser("format", help="Print the resource with a line break after each block token")
    p_fmt.add_argument("file", help="Resource file, or - for stdin")
    p_fmt.set_defaults(func=_cmd_format)

    p_check = sub.add_parser("check", help="Parse the resource and report the first grammar error")
    p_check.add_argument("file", help="Resource file, or - for stdin")
    p_check.add_argument("--context", type=int, default=10, help="Lines of context around an error")
    p_check.add_argument("--list", action="store_true", help="List named elements on success")
    p_check.set_defaults(func=_cmd_check)

    p_prev = sub.add_parser("preview", help="Show the resource as a Tk window")
    p_prev.add_argument("file", help="Resource file, or - for stdin")
    p_prev.set_defaults(func=_cmd_preview)

    args = ap.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, log_file=False)

    try:
        return int(args.func(args))
    except OSError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
