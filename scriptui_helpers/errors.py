"""Exception types shared across the package."""

from __future__ import annotations

from typing import Optional


class ScriptUIHelperError(Exception):
    """Base class for all package errors."""


# ---------------------------------------------------------------------------
# Field descriptor validation (reported through the alert channel, not raised)
# ---------------------------------------------------------------------------


class FieldDescriptorError(ScriptUIHelperError):
    kind = "FieldDescriptorError"


class MissingDescriptor(FieldDescriptorError):
    kind = "MissingDescriptor"

    def __init__(self) -> None:
        super().__init__("generate_field: no field descriptor given")


class MissingGroupName(FieldDescriptorError):
    kind = "MissingGroupName"

    def __init__(self) -> None:
        super().__init__("generate_field: descriptor has no group_name")


class MissingLabelName(FieldDescriptorError):
    kind = "MissingLabelName"

    def __init__(self) -> None:
        super().__init__("generate_field: descriptor has no label_name")


class MissingInputName(FieldDescriptorError):
    kind = "MissingInputName"

    def __init__(self) -> None:
        super().__init__("generate_field: descriptor has no input_name")


# ---------------------------------------------------------------------------
# View sets
# ---------------------------------------------------------------------------


class ViewSetError(ScriptUIHelperError):
    pass


class DuplicateViewError(ViewSetError):
    def __init__(self, name: str):
        super().__init__(f"view {name!r} is already registered")
        self.name = name


class AlreadyBuiltError(ViewSetError):
    pass


class ResourceGrammarError(ScriptUIHelperError):
    """The host rejected the combined resource string.

    Fatal: a malformed UI description cannot be partially displayed.
    """

    def __init__(
        self,
        description: str,
        resource: str,
        *,
        line: Optional[int] = None,
        offset: Optional[int] = None,
    ):
        super().__init__(description)
        self.description = description
        self.resource = resource
        self.line = line
        self.offset = offset


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class SettingsError(ScriptUIHelperError):
    pass


class NoSettingsRegistered(SettingsError):
    def __init__(self, section: str):
        super().__init__(f"no settings registered for section {section!r}")
        self.section = section


class SettingDoesNotExist(SettingsError):
    def __init__(self, section: str, key: str):
        super().__init__(f"setting {key!r} is not registered in section {section!r}")
        self.section = section
        self.key = key


__all__ = [
    "ScriptUIHelperError",
    "FieldDescriptorError",
    "MissingDescriptor",
    "MissingGroupName",
    "MissingLabelName",
    "MissingInputName",
    "ViewSetError",
    "DuplicateViewError",
    "AlreadyBuiltError",
    "ResourceGrammarError",
    "SettingsError",
    "NoSettingsRegistered",
    "SettingDoesNotExist",
]
