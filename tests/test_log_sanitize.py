from __future__ import annotations

import logging

from scriptui_helpers.log_utils import helpers_home, sanitize_log, setup_logging


def test_sanitize_log_removes_ansi_and_cr() -> None:
    raw = "hello\rworld  \n\x1b[0;93mError in line 2\x1b[m\r\ndone\x1b[0m"

    cleaned = sanitize_log(raw)

    assert "\r" not in cleaned
    assert "\x1b" not in cleaned
    assert cleaned.splitlines() == ["hello", "world", "Error in line 2", "done"]


def test_sanitize_log_empty() -> None:
    assert sanitize_log("") == ""


def test_helpers_home_env(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("SCRIPTUI_HELPERS_HOME", str(tmp_path))
    assert helpers_home() == tmp_path


def test_setup_logging_keeps_existing_handlers() -> None:
    root = logging.getLogger()
    handler = logging.NullHandler()
    root.addHandler(handler)
    before = list(root.handlers)
    level = root.level
    try:
        assert setup_logging(logging.DEBUG) is None
        assert root.handlers == before
        assert root.level == level
    finally:
        root.removeHandler(handler)
        root.setLevel(level)
