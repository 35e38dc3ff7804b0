from rich.markup import escape
from rich.text import Text
from textual.containers import Vertical
from textual.widgets import DataTable, Static

from vatview.models import Snapshot
from vatview.tui.columns import BROWSE_HINTS, DETAIL_HINTS
from vatview.tui.projector import ProjectedView
from vatview.tui.views.base import View
from vatview.tui.views.detail import detail_markup


class SnapshotTable(DataTable):
    """Read-only table; the cursor follows the projected highlight.

    Keys never reach it: the app's priority bindings handle them.
    """

    can_focus = False

    def __init__(self, view: ProjectedView, **kwargs):
        super().__init__(cursor_type="row", zebra_stripes=True, **kwargs)
        self._view = view

    def on_mount(self) -> None:
        self.add_columns(*self._view.headers)
        self.add_rows([Text(cell) for cell in row] for row in self._view.rows)
        if self._view.highlighted is not None:
            self.move_cursor(row=self._view.highlighted)


def tab_strip(view: ProjectedView) -> str:
    parts = []
    for index, label in enumerate(view.tab_labels):
        if index == view.tab:
            parts.append(f"[b black on green]{label}[/]")
        else:
            parts.append(label)
    return "   " + "  <->  ".join(parts)


class TableView(View):
    name = "table"

    def render(self, view: ProjectedView, snapshot: Snapshot):
        count = len(view.rows)
        title = f"{view.title} ({count})"
        if count == 0:
            title = f"{view.title} (none online)"

        widgets = [
            Static(tab_strip(view), id="tabs"),
            Static(title, id="breadcrumb"),
            SnapshotTable(view, id="table"),
        ]

        hints = BROWSE_HINTS
        if view.popup_open and view.popup is not None:
            widgets.append(Static(detail_markup(view.popup, snapshot), id="popup"))
            hints = DETAIL_HINTS

        widgets.append(Static(escape(hints), id="hint-bar"))
        return [Vertical(*widgets, id="table-layout")]
