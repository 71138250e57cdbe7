from __future__ import annotations

from ..textual import ListView


def clear_list(list_view: ListView) -> None:
    if hasattr(list_view, "clear"):
        list_view.clear()
    else:  # pragma: no cover - older Textual versions
        list_view.remove_children()
