"""Protocols for the host application objects this package talks to.

Nothing here is implemented by the package itself (except the Tk adapter in
:mod:`scriptui_helpers.tk_host` and the JSON settings backend). The host
owns the real state; helpers only delegate.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Protocol, runtime_checkable

log = logging.getLogger(__name__)


AlertChannel = Callable[[str], None]


def log_alert(message: str) -> None:
    """Fallback alert channel used when no host alert is supplied."""
    log.warning("%s", message)


@runtime_checkable
class UIElement(Protocol):
    """A named node of a materialized host UI tree."""

    name: str
    visible: bool

    def find_element(self, name: str) -> Optional["UIElement"]:
        ...


class UIHost(Protocol):
    def materialize(self, resource: str) -> UIElement:
        """Build a UI tree from a resource string.

        Raises on grammar errors; the exception should carry a ``description``
        with an ``Error in line N, at character offset M,`` prefix.
        """
        ...


class SettingsBackend(Protocol):
    def get(self, section: str, key: str) -> str:
        ...

    def set(self, section: str, key: str, value: str) -> None:
        ...

    def exists(self, section: str, key: str) -> bool:
        ...


class MarkerProperty(Protocol):
    """Marker stream of a host layer. Key indices are 1-based."""

    @property
    def num_keys(self) -> int:
        ...

    def key_time(self, index: int) -> float:
        ...

    def key_value(self, index: int) -> Any:
        ...

    def set_value_at_time(self, time: float, value: Any) -> None:
        ...

    def remove_key(self, index: int) -> None:
        ...


class HostLayer(Protocol):
    in_point: float
    out_point: float

    @property
    def markers(self) -> MarkerProperty:
        ...


def error_description(exc: BaseException) -> str:
    """Human readable description of a host error."""
    desc = getattr(exc, "description", None)
    if desc:
        return str(desc)
    return str(exc) or type(exc).__name__


__all__ = [
    "AlertChannel",
    "HostLayer",
    "MarkerProperty",
    "SettingsBackend",
    "UIElement",
    "UIHost",
    "error_description",
    "log_alert",
]
