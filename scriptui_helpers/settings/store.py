from __future__ import annotations

import json
import logging
import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

from ..log_utils import helpers_home

log = logging.getLogger(__name__)

SCHEMA_VERSION = 1


def empty_settings() -> Dict[str, Any]:
    return {
        "schema_version": SCHEMA_VERSION,
        "saved_at": None,
        # section -> key -> string value
        "sections": {},
    }


@dataclass
class JsonSettingsBackend:
    """Host settings store backed by a single versioned JSON file.

    Values are stored as strings, matching what script hosts hand back.
    Unknown top-level keys in the file are preserved on save.
    """

    filename: str = "settings.json"
    home: Path = field(default_factory=helpers_home)

    def path(self) -> Path:
        return Path(self.home) / self.filename

    def load(self) -> Dict[str, Any]:
        path = self.path()
        base = empty_settings()

        if not path.exists():
            return base

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError("settings root is not an object")
            if not isinstance(data.get("sections", {}), dict):
                raise ValueError("settings 'sections' is not an object")
        except (OSError, ValueError) as e:
            log.warning("Unreadable settings file %s (%s); starting empty", path, e)
            self._backup(path)
            return base

        merged = dict(base)
        merged.update(data)
        return merged

    def _backup(self, path: Path) -> None:
        ts = time.strftime("%Y%m%d_%H%M%S")
        bak = path.with_name(f"{path.name}.bak.{ts}")
        try:
            bak.write_bytes(path.read_bytes())
            log.info("Backed up corrupt settings to %s", bak)
        except OSError:
            log.exception("Could not back up corrupt settings file %s", path)

    def save(self, data: Dict[str, Any]) -> None:
        home = Path(self.home)
        home.mkdir(parents=True, exist_ok=True)
        path = self.path()
        tmp = path.with_suffix(path.suffix + ".tmp")

        # Shallow copy so we can stamp the timestamp without mutating the caller
        payload = dict(data or {})
        payload.setdefault("schema_version", SCHEMA_VERSION)
        payload.setdefault("sections", {})
        payload["saved_at"] = time.strftime("%Y-%m-%dT%H:%M:%S")

        tmp.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
        os.replace(tmp, path)

    # Host settings protocol ----------------------------------------------
    def exists(self, section: str, key: str) -> bool:
        return key in self.load()["sections"].get(section, {})

    def get(self, section: str, key: str) -> str:
        try:
            return self.load()["sections"][section][key]
        except KeyError:
            raise KeyError(f"{section}/{key}") from None

    def set(self, section: str, key: str, value: str) -> None:
        data = self.load()
        sections = dict(data["sections"])
        sections[section] = {**sections.get(section, {}), key: str(value)}
        data["sections"] = sections
        self.save(data)
