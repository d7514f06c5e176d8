from __future__ import annotations

from scriptui_helpers.diagnostics import format_resource_error, parse_error_location


def test_parse_error_location() -> None:
    assert parse_error_location("Error in line 3, at character offset 12, bad token") == (3, 12)
    assert parse_error_location("Something else went wrong") is None
    assert parse_error_location("") is None


def test_context_window_is_bounded() -> None:
    resource = "\n".join(f"line {i}" for i in range(1, 41))

    report = format_resource_error(resource, "Error in line 20, at character offset 2, oops")

    lines = report.splitlines()
    assert lines[0] == "Resource error: Error in line 20, at character offset 2, oops"
    numbered = [ln for ln in lines[1:] if "|" in ln]
    assert len(numbered) == 21
    assert numbered[0].endswith("10 | line 10")
    assert numbered[-1].endswith("30 | line 30")
    marked = [ln for ln in numbered if ln.startswith(">>")]
    assert marked == [">> 20 | line 20"]


def test_caret_points_at_offset() -> None:
    report = format_resource_error("abc\ndefgh", "Error in line 2, at character offset 3, x")

    lines = report.splitlines()
    idx = lines.index(">> 2 | defgh")
    caret = lines[idx + 1]
    assert caret.index("^") == lines[idx].index("defgh") + 3


def test_window_clamped_at_start_and_end() -> None:
    resource = "\n".join(f"l{i}" for i in range(1, 6))

    report = format_resource_error(resource, "Error in line 1, at character offset 0, x")
    assert ">> 1 | l1" in report
    assert "5 | l5" in report

    report = format_resource_error(resource, "Error in line 99, at character offset 0, x")
    assert ">> 5 | l5" in report


def test_without_location_shows_head_of_resource() -> None:
    resource = "\n".join(f"l{i}" for i in range(1, 50))

    report = format_resource_error(resource, "\x1b[31mhost crashed\x1b[0m")

    assert report.splitlines()[0] == "Resource error: host crashed"
    assert "21 | l21" in report
    assert "22 | l22" not in report
    assert ">>" not in report
