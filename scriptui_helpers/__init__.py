"""Helpers for host-application scripting UIs.

The host owns project data, layers and windows. This package only builds
resource strings, manages view visibility and wraps host settings/marker
calls behind small protocols (see :mod:`scriptui_helpers.host`).
"""

from __future__ import annotations

__version__ = "0.3.0"

from .resource_format import FIELD_FAILED, FieldDescriptor, field_failed, format_resource, generate_field
from .view_set import ViewDescriptor, ViewSetBuilder

__all__ = [
    "__version__",
    "FIELD_FAILED",
    "FieldDescriptor",
    "ViewDescriptor",
    "ViewSetBuilder",
    "field_failed",
    "format_resource",
    "generate_field",
]
