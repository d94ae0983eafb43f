# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from abc import ABC, abstractmethod

import yaml
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from schedview_lib.core.common import get_panel_width, load_yaml_dumper
from schedview_lib.core.config import CFG
from schedview_lib.core.error import SVRenderError
from schedview_lib.core.logger import get_logger

from .context import DashboardContext
from .models import ExecutionsView, IndexView, JobsView

logger = get_logger(__name__)

Dumper: type[yaml.Dumper] = load_yaml_dumper()


class Presenter(ABC):
    """
    Base class for presenters rendering assembled dashboard views.
    """

    def __init__(self, view: IndexView | JobsView | ExecutionsView):
        """
        Initialize the presenter with an assembled view.

        Args:
            view (IndexView | JobsView | ExecutionsView): The view to present.
        """
        self._view = view

    @abstractmethod
    def createPanel(self, console: Console | None = None) -> Group:
        """
        Create a Rich panel displaying the view.

        Args:
            console (Console | None): Optional Rich Console instance.
                If None, a new Console will be created.

        Returns:
            Group: Rich Group containing the panel.
        """
        pass

    def render(self, console: Console | None = None, as_yaml: bool = False) -> None:
        """
        Render the view to the console, or dump it as YAML to stdout.

        Args:
            console (Console | None): Optional Rich Console instance.
            as_yaml (bool): Dump the view as YAML instead of drawing a panel.

        Raises:
            SVRenderError: If the view could not be rendered.
        """
        try:
            if as_yaml:
                self.dumpYaml()
            else:
                console = console or Console()
                console.print(self.createPanel(console))
        except Exception as e:
            raise SVRenderError(f"Could not render the view: {e}") from e

    def dumpYaml(self) -> None:
        """
        Print the YAML representation of the view to stdout.
        """
        print(
            yaml.dump(
                self._view.toDict(),
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
                Dumper=Dumper,
            )
        )

    @staticmethod
    def _createContextTable(context: DashboardContext) -> Table:
        """
        Create a table with the identity metadata of the cluster.

        Args:
            context (DashboardContext): The identity metadata.

        Returns:
            Table: A Rich table with key-value pairs.
        """
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column(justify="right", style=CFG.index_presenter.key_style)
        table.add_column(
            justify="left", overflow="fold", style=CFG.index_presenter.value_style
        )

        table.add_row("Version:", Text(context.version))
        table.add_row(
            "Leader:",
            Text(context.leader_name)
            if context.leader_name
            else Text("unknown", style=CFG.index_presenter.notes_style),
        )
        table.add_row("Node:", Text(context.member_name))
        table.add_row("Backend:", Text(context.backend))
        table.add_row("Keyspace:", Text(context.keyspace))

        return table

    @staticmethod
    def _wrapInPanel(
        content: RenderableType,
        title: str,
        console: Console,
        title_style: str,
        border_style: str,
        min_width: int | None,
        max_width: int | None,
    ) -> Group:
        """
        Wrap content into a titled Rich panel surrounded by empty lines.
        """
        panel = Panel(
            content,
            title=Text(title, style=title_style, justify="center"),
            border_style=border_style,
            padding=(1, 1),
            width=get_panel_width(console, 1, min_width, max_width),
            expand=False,
        )

        return Group(Text(""), panel, Text(""))
