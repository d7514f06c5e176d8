"""Build tkinter/ttk widgets from a parsed resource string."""

from __future__ import annotations

import logging
import tkinter as tk
from tkinter import messagebox, ttk
from typing import Any, Callable, Dict, List, Optional

from .grammar import ResourceNode, ResourceParseError, parse_resource

log = logging.getLogger(__name__)

WINDOW_TYPES = ("palette", "dialog", "window")


class TkElement:
    """Materialized resource node; the handle the view-set builder toggles."""

    def __init__(
        self,
        node: ResourceNode,
        widget: tk.Misc,
        *,
        variable: Optional[tk.Variable] = None,
        grid: Optional[Dict[str, Any]] = None,
    ):
        self.node = node
        self.name = node.name or ""
        self.type = node.type
        self.widget = widget
        self.variable = variable
        self.children: List["TkElement"] = []
        self._grid = grid
        self._visible = True

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool) -> None:
        value = bool(value)
        if value == self._visible:
            return
        self._visible = value
        if isinstance(self.widget, (tk.Tk, tk.Toplevel)):
            if value:
                self.widget.deiconify()
            else:
                self.widget.withdraw()
        elif value:
            self.widget.grid(**(self._grid or {}))
        else:
            self.widget.grid_remove()

    def find_element(self, name: str) -> Optional["TkElement"]:
        for child in self.children:
            if child.name == name:
                return child
            found = child.find_element(name)
            if found is not None:
                return found
        return None

    @property
    def text(self) -> str:
        if self.variable is not None:
            return str(self.variable.get())
        try:
            return str(self.widget.cget("text"))
        except tk.TclError:
            return ""

    def __repr__(self) -> str:
        return f"TkElement({self.type} {self.name!r})"


def _padding(props: Dict[str, Any]) -> Any:
    margins = props.get("margins", 0)
    if isinstance(margins, list):
        # host order is [left, top, right, bottom]
        return tuple(int(m) for m in margins[:4])
    return int(margins or 0)


def _text(props: Dict[str, Any]) -> str:
    return str(props.get("text", ""))


def _make_group(master: tk.Misc, node: ResourceNode):
    return ttk.Frame(master, padding=_padding(node.props)), None


def _make_panel(master: tk.Misc, node: ResourceNode):
    return ttk.LabelFrame(master, text=_text(node.props), padding=_padding(node.props)), None


def _make_static_text(master: tk.Misc, node: ResourceNode):
    return ttk.Label(master, text=_text(node.props)), None


def _make_edit_text(master: tk.Misc, node: ResourceNode):
    var = tk.StringVar(master=master, value=_text(node.props))
    justify = str(node.props.get("justify", "left"))
    if justify not in ("left", "center", "right"):
        justify = "left"
    min_size = node.props.get("minimumSize") or [0, 0]
    width = max(1, int(min_size[0]) // 8) if min_size and min_size[0] else 20
    return ttk.Entry(master, textvariable=var, justify=justify, width=width), var


def _make_button(master: tk.Misc, node: ResourceNode):
    return ttk.Button(master, text=_text(node.props)), None


def _make_checkbox(master: tk.Misc, node: ResourceNode):
    var = tk.BooleanVar(master=master, value=bool(node.props.get("value", False)))
    return ttk.Checkbutton(master, text=_text(node.props), variable=var), var


def _make_dropdown(master: tk.Misc, node: ResourceNode):
    items = [str(i) for i in (node.props.get("items") or [])]
    var = tk.StringVar(master=master, value=items[0] if items else "")
    return ttk.Combobox(master, values=items, textvariable=var, state="readonly"), var


ELEMENT_FACTORIES: Dict[str, Callable[[tk.Misc, ResourceNode], Any]] = {
    "Group": _make_group,
    "Panel": _make_panel,
    "StaticText": _make_static_text,
    "EditText": _make_edit_text,
    "Button": _make_button,
    "Checkbox": _make_checkbox,
    "DropDownList": _make_dropdown,
}


def _grid_options(orientation: str, index: int, props: Dict[str, Any]) -> Dict[str, Any]:
    alignment = props.get("alignment")
    if isinstance(alignment, str):
        alignment = [alignment, alignment]
    sticky = "nsew" if alignment and "fill" in alignment else "w"
    if orientation == "stack":
        return {"row": 0, "column": 0, "sticky": sticky}
    if orientation == "row":
        return {"row": 0, "column": index, "sticky": sticky, "padx": 2, "pady": 2}
    return {"row": index, "column": 0, "sticky": sticky, "padx": 2, "pady": 2}


def _build_children(parent: TkElement, node: ResourceNode, default_orientation: str) -> None:
    orientation = str(node.props.get("orientation", default_orientation))
    for index, child in enumerate(node.children):
        factory = ELEMENT_FACTORIES.get(child.type)
        if factory is None:
            raise ResourceParseError(f"unknown element type {child.type!r}", child.line, child.offset)
        widget, var = factory(parent.widget, child)
        grid = _grid_options(orientation, index, child.props)
        widget.grid(**grid)
        if orientation == "row":
            parent.widget.columnconfigure(index, weight=1)
        else:
            parent.widget.rowconfigure(index, weight=1)
            parent.widget.columnconfigure(0, weight=1)

        element = TkElement(child, widget, variable=var, grid=grid)
        parent.children.append(element)
        if child.children:
            # host default: groups lay out in rows, panels in columns
            _build_children(element, child, "row" if child.type == "Group" else "column")
        if child.props.get("visible") is False:
            element.visible = False


class TkUIHost:
    """Materialize resource strings as Tk toplevel windows."""

    def __init__(self, master: Optional[tk.Misc] = None):
        self._master = master

    @property
    def master(self) -> tk.Misc:
        if self._master is None:
            root = tk.Tk()
            root.withdraw()
            self._master = root
        return self._master

    def materialize(self, resource: str) -> TkElement:
        node = parse_resource(resource)
        if node.type not in WINDOW_TYPES:
            raise ResourceParseError(
                f"top-level element must be one of {', '.join(WINDOW_TYPES)}, got {node.type!r}",
                node.line,
                node.offset,
            )

        top = tk.Toplevel(self.master)
        top.title(_text(node.props))
        top.columnconfigure(0, weight=1)
        window = TkElement(node, top)
        try:
            _build_children(window, node, "column")
        except Exception:
            top.destroy()
            raise
        log.debug("Materialized %s with %d top-level children", node.type, len(window.children))
        return window


class TkAlertChannel:
    def __init__(self, title: str = "Script", master: Optional[tk.Misc] = None):
        self.title = title
        self.master = master

    def __call__(self, message: str) -> None:
        messagebox.showinfo(self.title, message, parent=self.master)


__all__ = ["ELEMENT_FACTORIES", "TkAlertChannel", "TkElement", "TkUIHost", "WINDOW_TYPES"]
