"""Resource-string fragments for label + input rows.

``generate_field`` turns a small descriptor into one row of the host's UI
resource grammar: a ``Group`` holding a ``StaticText`` label and an input
element, optionally followed by an extra fragment (e.g. a browse button).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, List, Mapping, Optional, Sequence, Union

from .errors import (
    FieldDescriptorError,
    MissingDescriptor,
    MissingGroupName,
    MissingInputName,
    MissingLabelName,
)
from .host import AlertChannel, log_alert

log = logging.getLogger(__name__)

TEXT_INPUT_KIND = "EditText"


@dataclass(frozen=True)
class FieldDescriptor:
    group_name: Optional[str] = None
    label_name: Optional[str] = None
    input_name: Optional[str] = None
    label_text: Optional[str] = None
    group_orientation: Optional[str] = None
    group_margins: Any = None
    group_alignment: Any = None
    input_text: Optional[str] = None
    input_min_size: Any = None
    input_alignment: Any = None
    input_justify: Optional[str] = None


# Applied per field when the descriptor leaves it as None.
FIELD_DEFAULTS: Mapping[str, Any] = {
    "group_orientation": "row",
    "group_margins": 0,
    "group_alignment": ("fill", "fill"),
    "input_text": "",
    "input_min_size": (0, 0),
    "input_alignment": ("fill", "fill"),
    "input_justify": "right",
}

# camelCase keys as used by host-side scripts
_ALIASES = {
    "groupName": "group_name",
    "labelName": "label_name",
    "inputName": "input_name",
    "labelText": "label_text",
    "groupOrientation": "group_orientation",
    "groupMargins": "group_margins",
    "groupAlignment": "group_alignment",
    "inputText": "input_text",
    "inputMinSize": "input_min_size",
    "inputAlignment": "input_alignment",
    "inputJustify": "input_justify",
}

_FIELD_NAMES = frozenset(f.name for f in fields(FieldDescriptor))


class _FieldFailed:
    """Sentinel returned by :func:`generate_field` on invalid input."""

    _instance: Optional["_FieldFailed"] = None

    def __new__(cls) -> "_FieldFailed":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "FIELD_FAILED"


FIELD_FAILED = _FieldFailed()


def field_failed(value: object) -> bool:
    return value is FIELD_FAILED


def _coerce_descriptor(descriptor: Any) -> Optional[FieldDescriptor]:
    if isinstance(descriptor, FieldDescriptor):
        return descriptor
    if not isinstance(descriptor, Mapping):
        if descriptor is not None:
            log.debug("generate_field: unusable descriptor of type %s", type(descriptor).__name__)
        return None
    kwargs = {}
    for key, value in descriptor.items():
        name = _ALIASES.get(key, key)
        if name in _FIELD_NAMES:
            kwargs[name] = value
        else:
            log.debug("generate_field: ignoring unknown descriptor key %r", key)
    return FieldDescriptor(**kwargs)


def _first_defined(*values: Any) -> Any:
    for v in values:
        if v is not None:
            return v
    return None


def quote(text: Any) -> str:
    s = "" if text is None else str(text)
    s = s.replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n")
    return f"'{s}'"


def literal(value: Any) -> str:
    """Render a Python value as a resource-grammar literal."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return quote(value)
    if isinstance(value, Sequence):
        return "[" + ", ".join(literal(v) for v in value) + "]"
    raise TypeError(f"cannot render {type(value).__name__} as a resource literal")


def format_resource(raw: str) -> str:
    """Break a resource string after every ``{`` and ``},``.

    Whitespace only; quoted strings are copied untouched, so the token stream
    is unchanged and host error line numbers point at something readable.
    """
    text = raw or ""
    out: List[str] = []
    quote_ch: Optional[str] = None
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if quote_ch is not None:
            out.append(ch)
            if ch == "\\" and i + 1 < n:
                out.append(text[i + 1])
                i += 2
                continue
            if ch == quote_ch:
                quote_ch = None
        elif ch in "'\"":
            quote_ch = ch
            out.append(ch)
        elif ch == "{":
            out.append("{\n")
        elif ch == "}" and i + 1 < n and text[i + 1] == ",":
            out.append("},\n")
            i += 2
            continue
        else:
            out.append(ch)
        i += 1
    return "".join(out)


def _validate(desc: Optional[FieldDescriptor]) -> Optional[FieldDescriptorError]:
    if desc is None:
        return MissingDescriptor()
    if not desc.group_name:
        return MissingGroupName()
    if not desc.label_name:
        return MissingLabelName()
    if not desc.input_name:
        return MissingInputName()
    return None


def generate_field(
    descriptor: Union[FieldDescriptor, Mapping[str, Any], None],
    input_kind: Optional[str] = None,
    trailing_fragment: Optional[str] = None,
    *,
    alert: Optional[AlertChannel] = None,
):
    """Build a ``Group { StaticText, <input_kind> }`` resource fragment.

    Returns the fragment (ending in ``},``) or :data:`FIELD_FAILED` when the
    descriptor is missing a required name. Failures are reported once through
    *alert* and never raised.
    """
    alert = alert or log_alert
    desc = _coerce_descriptor(descriptor)

    err = _validate(desc)
    if err is not None:
        log.debug("generate_field rejected descriptor: %s", err.kind)
        alert(str(err))
        return FIELD_FAILED

    kind = input_kind or TEXT_INPUT_KIND

    def opt(name: str) -> Any:
        return _first_defined(getattr(desc, name), FIELD_DEFAULTS[name])

    group_props = ", ".join(
        (
            f"orientation: {literal(opt('group_orientation'))}",
            f"margins: {literal(opt('group_margins'))}",
            f"alignment: {literal(opt('group_alignment'))}",
        )
    )

    input_props = []
    if kind == TEXT_INPUT_KIND:
        input_props.append(f"text: {quote(opt('input_text'))}")
    input_props.append(f"minimumSize: {literal(opt('input_min_size'))}")
    input_props.append(f"alignment: {literal(opt('input_alignment'))}")
    input_props.append(f"justify: {quote(opt('input_justify'))}")

    out = (
        f"{desc.group_name}: Group {{ {group_props}, "
        f"{desc.label_name}: StaticText {{ text: {quote(desc.label_text)} }}, "
        f"{desc.input_name}: {kind} {{ {', '.join(input_props)} }},"
    )
    if trailing_fragment:
        out += " " + trailing_fragment
    return out + " },"


__all__ = [
    "FIELD_DEFAULTS",
    "FIELD_FAILED",
    "FieldDescriptor",
    "TEXT_INPUT_KIND",
    "field_failed",
    "format_resource",
    "generate_field",
    "literal",
    "quote",
]
