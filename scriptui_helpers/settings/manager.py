from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List

from ..errors import NoSettingsRegistered, SettingDoesNotExist
from ..host import SettingsBackend

log = logging.getLogger(__name__)

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off", ""}


def _to_bool(text: str) -> bool:
    s = text.strip().lower()
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    raise ValueError(f"not a boolean: {text!r}")


def _converter(default: Any) -> Callable[[str], Any]:
    # bool before int: bool is an int subclass
    if isinstance(default, bool):
        return _to_bool
    if isinstance(default, int):
        return int
    if isinstance(default, float):
        return float
    return str


def _to_host(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class SettingsManager:
    """Cached view of one settings section with save-on-write.

    Keys must be registered (with a default) before use. The default's type
    decides how the host's string value is read back.
    """

    def __init__(self, backend: SettingsBackend, section: str):
        self.backend = backend
        self.section = section
        self._defaults: Dict[str, Any] = {}
        self._cache: Dict[str, Any] = {}

    def register(self, key: str, default: Any) -> Any:
        """Register *key*; returns its current value."""
        self._defaults[key] = default
        if self.backend.exists(self.section, key):
            self._cache[key] = self._read(key)
        else:
            log.debug("Setting %s/%s not stored yet; writing default", self.section, key)
            self.backend.set(self.section, key, _to_host(default))
            self._cache[key] = default
        return self._cache[key]

    def _read(self, key: str) -> Any:
        raw = self.backend.get(self.section, key)
        default = self._defaults[key]
        try:
            return _converter(default)(raw)
        except ValueError:
            log.warning("Setting %s/%s has unusable value %r; using default", self.section, key, raw)
            return default

    def _check(self, key: str) -> None:
        if not self._defaults:
            raise NoSettingsRegistered(self.section)
        if key not in self._defaults:
            raise SettingDoesNotExist(self.section, key)

    def get(self, key: str) -> Any:
        self._check(key)
        return self._cache[key]

    def set(self, key: str, value: Any) -> None:
        """Store *value*; raises ValueError if it does not fit the default's type.

        The cached value is the one a later :meth:`reload` would read back.
        """
        self._check(key)
        raw = _to_host(value)
        try:
            coerced = _converter(self._defaults[key])(raw)
        except ValueError:
            raise ValueError(
                f"setting {self.section}/{key}: {value!r} does not fit {type(self._defaults[key]).__name__}"
            ) from None
        self.backend.set(self.section, key, raw)
        self._cache[key] = coerced

    def exists(self, key: str) -> bool:
        return key in self._defaults

    def keys(self) -> List[str]:
        return list(self._defaults)

    def reload(self) -> None:
        """Re-read every registered key from the backend."""
        if not self._defaults:
            raise NoSettingsRegistered(self.section)
        for key in self._defaults:
            if self.backend.exists(self.section, key):
                self._cache[key] = self._read(key)
            else:
                self._cache[key] = self._defaults[key]

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._cache)


__all__ = ["SettingsManager"]
