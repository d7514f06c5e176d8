"""A set of named views built once and switched by name.

Typical use::

    views = ViewSetBuilder(host, "orientation: 'stack'", alert=alert)
    views.add_view("main", main_res)
    views.add_view("prefs", prefs_res)
    window = views.build()
    views.show_view("main")

Only one view is visible at a time. The builder is single-use: it submits the
combined resource to the host exactly once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .diagnostics import format_resource_error, parse_error_location
from .errors import AlreadyBuiltError, DuplicateViewError, ResourceGrammarError
from .host import AlertChannel, UIElement, UIHost, error_description, log_alert
from .log_utils import sanitize_log
from .resource_format import format_resource

log = logging.getLogger(__name__)

STATE_UNBUILT = "unbuilt"
STATE_BUILT = "built"
STATE_FAILED = "failed"


def _is_grammar_error(exc: BaseException) -> bool:
    """Host errors that describe the resource text itself."""
    if getattr(exc, "description", None):
        return True
    return parse_error_location(str(exc)) is not None


@dataclass(frozen=True)
class ViewDescriptor:
    name: str
    raw_content: str
    formatted_resource: str = field(init=False)

    def __post_init__(self) -> None:
        formatted = format_resource(f"{self.name}: Group {{ {self.raw_content} }}")
        object.__setattr__(self, "formatted_resource", formatted)


class ViewSetBuilder:
    """Collect named views, build them in one host call, toggle visibility."""

    def __init__(
        self,
        host: UIHost,
        container_properties: str = "",
        *,
        container_type: str = "palette",
        alert: Optional[AlertChannel] = None,
    ):
        self._host = host
        self.container_properties = container_properties or ""
        self.container_type = container_type
        self._alert = alert or log_alert
        self._views: List[ViewDescriptor] = []
        self._handles: Dict[str, Optional[UIElement]] = {}
        self._state = STATE_UNBUILT

    @property
    def built(self) -> bool:
        return self._state == STATE_BUILT

    @property
    def state(self) -> str:
        return self._state

    @property
    def views(self) -> List[ViewDescriptor]:
        return list(self._views)

    def add_view(self, name: str, raw_resource: str) -> None:
        if any(v.name == name for v in self._views):
            raise DuplicateViewError(name)
        if self._state != STATE_UNBUILT:
            log.warning("add_view(%r) after build has no effect on the built window", name)
        self._views.append(ViewDescriptor(name, raw_resource))

    def get_res(self) -> str:
        body = ",\n".join(v.formatted_resource for v in self._views)
        props = self.container_properties.strip().rstrip(",")
        if props and body:
            inner = f"{props},\n{body}"
        else:
            inner = props or body
        return f"{self.container_type} {{ {inner} }}"

    def build(self) -> UIElement:
        if self._state == STATE_BUILT:
            raise AlreadyBuiltError("view set was already built")
        if self._state == STATE_FAILED:
            raise AlreadyBuiltError("view set build already failed; create a new builder")

        res = self.get_res()
        log.debug("Building view set with %d views (%d chars)", len(self._views), len(res))
        try:
            window = self._host.materialize(res)
        except Exception as e:
            if not _is_grammar_error(e):
                # e.g. no display; nothing was built, the builder stays usable
                log.exception("Host failed to materialize view set")
                raise
            self._state = STATE_FAILED
            self._report_failure(res, e)
            description = sanitize_log(error_description(e))
            loc = parse_error_location(description)
            raise ResourceGrammarError(
                description,
                res,
                line=loc[0] if loc else None,
                offset=loc[1] if loc else None,
            ) from e

        handles: Dict[str, Optional[UIElement]] = {}
        for view in self._views:
            handle = window.find_element(view.name)
            if handle is None:
                log.warning("View %r not found in materialized window", view.name)
            handles[view.name] = handle
        self._handles = handles
        self._state = STATE_BUILT
        log.info("View set built: %s", ", ".join(handles) or "(empty)")
        return window

    def _report_failure(self, res: str, exc: Exception) -> None:
        self._alert(res)
        report = format_resource_error(res, error_description(exc))
        log.error("%s", report)
        self._alert(report)

    def show_view(self, name: str) -> None:
        if self._state != STATE_BUILT:
            return
        if name not in self._handles:
            log.debug("show_view(%r): no such view, hiding all", name)
        for view_name, handle in self._handles.items():
            if handle is not None:
                handle.visible = view_name == name

    def get_views(self) -> Dict[str, Optional[UIElement]]:
        return dict(self._handles)


__all__ = ["STATE_BUILT", "STATE_FAILED", "STATE_UNBUILT", "ViewDescriptor", "ViewSetBuilder"]
