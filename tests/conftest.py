from __future__ import annotations

from typing import Dict, List, Optional

import pytest


class FakeElement:
    def __init__(self, name: str, children: Optional[List["FakeElement"]] = None, visible: bool = True):
        self.name = name
        self.children = children or []
        self.visible = visible

    def find_element(self, name: str) -> Optional["FakeElement"]:
        for child in self.children:
            if child.name == name:
                return child
            found = child.find_element(name)
            if found is not None:
                return found
        return None


class FakeHostError(Exception):
    def __init__(self, description: str):
        super().__init__(description)
        self.description = description


class FakeUIHost:
    """Records submitted resources and returns a window with one child per name."""

    def __init__(self, names: Optional[List[str]] = None, error: Optional[str] = None):
        self.names = names
        self.error = error
        self.calls: List[str] = []

    def materialize(self, resource: str) -> FakeElement:
        self.calls.append(resource)
        if self.error is not None:
            raise FakeHostError(self.error)
        return FakeElement("", [FakeElement(n) for n in (self.names or [])])


class Alerts:
    def __init__(self) -> None:
        self.messages: List[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)


class FakeSettingsBackend:
    def __init__(self, data: Optional[Dict[str, Dict[str, str]]] = None):
        self.data = data or {}
        self.writes: List[tuple] = []

    def get(self, section: str, key: str) -> str:
        return self.data[section][key]

    def set(self, section: str, key: str, value: str) -> None:
        self.writes.append((section, key, value))
        self.data.setdefault(section, {})[key] = value

    def exists(self, section: str, key: str) -> bool:
        return key in self.data.get(section, {})


@pytest.fixture
def alerts() -> Alerts:
    return Alerts()
