"""Settings persistence.

``SettingsManager`` caches one section of a host settings store and writes
every change straight through. ``JsonSettingsBackend`` is a file-backed store
for running outside a host application.

Backend goals:
  * Atomic writes (no corrupted settings on crash)
  * Resilient loads (back up a corrupt file and start empty)
"""

from .manager import SettingsManager
from .store import JsonSettingsBackend

__all__ = ["JsonSettingsBackend", "SettingsManager"]
