# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from rich.console import Console, Group
from rich.padding import Padding
from rich.text import Text

from schedview_lib.core.config import CFG
from schedview_lib.views.models import IndexView
from schedview_lib.views.presenter import Presenter


class IndexPresenter(Presenter):
    """
    Presents the identity metadata of the cluster serving the dashboard.
    """

    def __init__(self, view: IndexView):
        super().__init__(view)

    def createPanel(self, console: Console | None = None) -> Group:
        console = console or Console()

        content = Group(
            Padding(Presenter._createContextTable(self._view.context), (0, 1)),
            Text(""),
            Text(
                f"Run '{CFG.binary_name} jobs' to list jobs.",
                style=CFG.index_presenter.notes_style,
                justify="center",
            ),
        )

        return Presenter._wrapInPanel(
            content,
            "SCHEDULER DASHBOARD",
            console,
            CFG.index_presenter.title_style,
            CFG.index_presenter.border_style,
            CFG.index_presenter.min_width,
            CFG.index_presenter.max_width,
        )
