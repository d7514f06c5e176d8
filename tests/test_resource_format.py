from __future__ import annotations

import re

import pytest

from scriptui_helpers.resource_format import (
    FIELD_FAILED,
    FieldDescriptor,
    field_failed,
    format_resource,
    generate_field,
)
from scriptui_helpers.tk_host.grammar import parse_resource


BASE = {"groupName": "g", "labelName": "l", "inputName": "i", "labelText": "L"}


def _wrap(fragment: str) -> str:
    return "dialog { " + fragment + " }"


def test_generate_field_defaults(alerts) -> None:
    out = generate_field(BASE, alert=alerts)

    assert out == (
        "g: Group { orientation: 'row', margins: 0, alignment: ['fill', 'fill'], "
        "l: StaticText { text: 'L' }, "
        "i: EditText { text: '', minimumSize: [0, 0], alignment: ['fill', 'fill'], justify: 'right' }, },"
    )
    assert alerts.messages == []


@pytest.mark.parametrize("kind", [None, "EditText", "DropDownList", "Checkbox"])
def test_one_label_one_input_and_text_only_for_edit_text(kind, alerts) -> None:
    out = generate_field(BASE, kind, alert=alerts)
    effective = kind or "EditText"

    assert out.count("StaticText {") == 1
    assert out.count(f"{effective} {{") == 1
    input_block = out.split(f"i: {effective} {{", 1)[1].split("}", 1)[0]
    assert ("text:" in input_block) == (effective == "EditText")


@pytest.mark.parametrize(
    "missing, expected",
    [("groupName", "group_name"), ("labelName", "label_name"), ("inputName", "input_name")],
)
def test_missing_required_name_returns_sentinel_and_alerts_once(missing, expected, alerts) -> None:
    desc = {k: v for k, v in BASE.items() if k != missing}

    out = generate_field(desc, alert=alerts)

    assert out is FIELD_FAILED
    assert field_failed(out)
    assert not out
    assert len(alerts.messages) == 1
    assert expected in alerts.messages[0]


def test_missing_descriptor(alerts) -> None:
    assert generate_field(None, alert=alerts) is FIELD_FAILED
    assert alerts.messages == ["generate_field: no field descriptor given"]


def test_explicit_falsy_values_override_defaults(alerts) -> None:
    desc = FieldDescriptor(
        group_name="g",
        label_name="l",
        input_name="i",
        label_text="L",
        group_margins=0,
        input_text="",
        input_min_size=[120, 0],
        input_justify="left",
        group_orientation="column",
    )

    out = generate_field(desc, alert=alerts)

    assert "margins: 0," in out
    assert "orientation: 'column'" in out
    assert "minimumSize: [120, 0]" in out
    assert "justify: 'left'" in out


def test_nonzero_margins_and_list_margins(alerts) -> None:
    assert "margins: 5," in generate_field({**BASE, "groupMargins": 5}, alert=alerts)
    assert "margins: [1, 2, 3, 4]," in generate_field({**BASE, "groupMargins": [1, 2, 3, 4]}, alert=alerts)


def test_trailing_fragment_is_inside_group(alerts) -> None:
    out = generate_field(BASE, trailing_fragment="browse: Button { text: '...' }", alert=alerts)

    node = parse_resource(_wrap(out))
    group = node.find("g")
    assert [c.name for c in group.children] == ["l", "i", "browse"]


def test_quotes_are_escaped(alerts) -> None:
    out = generate_field({**BASE, "labelText": "It's"}, alert=alerts)

    node = parse_resource(_wrap(out))
    assert node.find("l").props["text"] == "It's"


def test_generated_field_parses(alerts) -> None:
    out = generate_field({**BASE, "inputText": "hello"}, alert=alerts)

    node = parse_resource(_wrap(out))
    field = node.find("i")
    assert field.type == "EditText"
    assert field.props["text"] == "hello"
    assert field.props["minimumSize"] == [0, 0]
    assert node.find("g").props["alignment"] == ["fill", "fill"]


def test_format_resource_breaks_after_block_tokens() -> None:
    raw = "a: Group { b: StaticText { text: 'x' }, c: Button { } }"

    out = format_resource(raw)

    assert out.count("{\n") == raw.count("{")
    assert "},\n" in out


def test_format_resource_keeps_token_stream() -> None:
    raw = "a: Group { b: StaticText { text: 'x' }, c: Button { } }"

    once = format_resource(raw)
    twice = format_resource(once)

    strip = lambda s: re.sub(r"\s+", "", s)  # noqa: E731
    assert strip(once) == strip(raw)
    assert strip(twice) == strip(raw)
    assert parse_resource(_wrap(twice)).find("c").type == "Button"


def test_format_resource_leaves_quoted_braces_alone() -> None:
    raw = "b: Button { text: 'x},y' }, s: StaticText { text: \"{a}\" }, e: EditText { text: 'it\\'s {' }"

    out = format_resource(raw)

    assert "'x},y'" in out
    assert '"{a}"' in out
    assert "'it\\'s {'" in out
    assert out.count("{\n") == 3
    assert out.count("},\n") == 2


def test_braces_in_label_and_button_survive_add_view(alerts) -> None:
    from scriptui_helpers.view_set import ViewSetBuilder

    field = generate_field(
        {**BASE, "labelText": "Size {px}"},
        trailing_fragment="b: Button { text: 'x},y' }",
        alert=alerts,
    )
    views = ViewSetBuilder(host=None)
    views.add_view("main", field)

    node = parse_resource(views.get_res())

    assert node.find("l").props["text"] == "Size {px}"
    assert node.find("b").props["text"] == "x},y"


@pytest.mark.parametrize("descriptor", ["g", 42, ["g", "l", "i"]])
def test_non_mapping_descriptor_is_missing_descriptor(descriptor, alerts) -> None:
    assert generate_field(descriptor, alert=alerts) is FIELD_FAILED
    assert alerts.messages == ["generate_field: no field descriptor given"]
