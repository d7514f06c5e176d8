"""Marker and time helpers for host layers.

Every call delegates to the host layer's marker stream (1-based keys, as in
the host API). Nothing is cached here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from .host import HostLayer

log = logging.getLogger(__name__)


@dataclass
class MarkerValue:
    comment: str = ""
    duration: float = 0.0


def _comment_of(value: Any) -> str:
    return str(getattr(value, "comment", "") or "")


def add_marker(layer: HostLayer, time: float, comment: str = "", duration: float = 0.0) -> MarkerValue:
    marker = MarkerValue(comment=comment, duration=duration)
    layer.markers.set_value_at_time(time, marker)
    log.debug("Added marker %r at %.3fs", comment, time)
    return marker


def find_marker(layer: HostLayer, comment: str) -> Optional[int]:
    """Index of the first marker whose comment equals *comment*."""
    markers = layer.markers
    for i in range(1, markers.num_keys + 1):
        if _comment_of(markers.key_value(i)) == comment:
            return i
    return None


def marker_time(layer: HostLayer, comment: str) -> Optional[float]:
    idx = find_marker(layer, comment)
    if idx is None:
        return None
    return layer.markers.key_time(idx)


def remove_marker(layer: HostLayer, comment: str) -> bool:
    idx = find_marker(layer, comment)
    if idx is None:
        return False
    layer.markers.remove_key(idx)
    return True


def remove_all_markers(layer: HostLayer) -> int:
    markers = layer.markers
    count = markers.num_keys
    # Remove from the end so remaining indices stay valid.
    for i in range(count, 0, -1):
        markers.remove_key(i)
    return count


def list_markers(layer: HostLayer) -> List[Tuple[float, Any]]:
    markers = layer.markers
    return [(markers.key_time(i), markers.key_value(i)) for i in range(1, markers.num_keys + 1)]


def layer_span(layer: HostLayer) -> Tuple[float, float]:
    return float(layer.in_point), float(layer.out_point)


def layer_duration(layer: HostLayer) -> float:
    start, end = layer_span(layer)
    return end - start


def is_time_in_layer(layer: HostLayer, time: float) -> bool:
    start, end = layer_span(layer)
    return start <= time < end


__all__ = [
    "MarkerValue",
    "add_marker",
    "find_marker",
    "is_time_in_layer",
    "layer_duration",
    "layer_span",
    "list_markers",
    "marker_time",
    "remove_all_markers",
    "remove_marker",
]
