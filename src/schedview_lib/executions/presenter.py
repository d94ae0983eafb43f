# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from rich.console import Console, Group
from rich.padding import Padding
from rich.rule import Rule
from rich.text import Text
from tabulate import Line, TableFormat, tabulate

from schedview_lib.core.common import format_datetime
from schedview_lib.core.config import CFG
from schedview_lib.views.models import ExecutionEntry, ExecutionsView
from schedview_lib.views.presenter import Presenter


class ExecutionsPresenter(Presenter):
    """
    Present the execution history of a job, one table per execution group.
    """

    # Mapping of human-readable color names to ANSI escape codes.
    _ANSI_COLORS = {
        "default": "",
        "white": "\033[37m",
        "bright_red": "\033[91m",
        "bright_green": "\033[92m",
        "bright_yellow": "\033[93m",
        "bright_blue": "\033[94m",
        "grey70": "\033[38;5;249m",
        "grey50": "\033[38;5;244m",
        "bold": "\033[1m",
        "reset": "\033[0m",
    }

    # Table formatting configuration for `tabulate`.
    _COMPACT_TABLE = TableFormat(
        lineabove=Line("", "", "", ""),
        linebelowheader="",
        linebetweenrows="",
        linebelow=Line("", "", "", ""),
        headerrow=("", " ", ""),
        datarow=("", " ", ""),
        padding=0,
        with_header_hide=["lineabove", "linebelow"],
    )

    _HEADERS = ["Node", "Started", "Finished", "Attempt", "Result", "Output"]

    def __init__(self, view: ExecutionsView):
        super().__init__(view)

    def createPanel(self, console: Console | None = None) -> Group:
        console = console or Console()

        sections = [
            Padding(Presenter._createContextTable(self._view.context), (0, 1)),
        ]

        if not self._view.by_group:
            sections.append(Text(""))
            sections.append(
                Text(
                    "No executions found.",
                    style=CFG.executions_presenter.main_style,
                    justify="center",
                )
            )

        for group in self._view.by_group:
            entries = self._view.groups[group]
            sections.append(Text(""))
            sections.append(
                Rule(
                    title=Text(
                        f"GROUP {group}", style=CFG.executions_presenter.group_style
                    ),
                    style=CFG.executions_presenter.rule_style,
                )
            )
            sections.append(Text(""))
            # convert ANSI codes to Rich Text
            sections.append(Text.from_ansi(self._createGroupTable(entries)))

        return Presenter._wrapInPanel(
            Group(*sections),
            f"EXECUTIONS: {self._view.job_name}",
            console,
            CFG.executions_presenter.title_style,
            CFG.executions_presenter.border_style,
            CFG.executions_presenter.min_width,
            CFG.executions_presenter.max_width,
        )

    def _createGroupTable(self, entries: list[ExecutionEntry]) -> str:
        """
        Build a compact tabulated string representation of an execution group.

        Args:
            entries (list[ExecutionEntry]): Executions of the group.

        Returns:
            str: Tabulated execution information with ANSI color codes applied.
        """
        headers = [
            ExecutionsPresenter._color(
                header, color=CFG.executions_presenter.headers_style, bold=True
            )
            for header in ExecutionsPresenter._HEADERS
        ]
        rows = [ExecutionsPresenter._createExecutionRow(entry) for entry in entries]

        return tabulate(
            rows,
            headers=headers,
            tablefmt=ExecutionsPresenter._COMPACT_TABLE,
            stralign="center",
            numalign="center",
        )

    @staticmethod
    def _createExecutionRow(entry: ExecutionEntry) -> list[str]:
        """
        Create a single row of execution data.

        Args:
            entry (ExecutionEntry): Execution to show information for.

        Returns:
            list[str]: List of formatted cell values.
        """
        execution = entry.execution
        return [
            ExecutionsPresenter._mainColor(execution.node_name or ""),
            ExecutionsPresenter._mainColor(format_datetime(execution.started_at)),
            ExecutionsPresenter._mainColor(format_datetime(execution.finished_at)),
            ExecutionsPresenter._mainColor(str(execution.attempt)),
            ExecutionsPresenter._formatResult(execution.success),
            ExecutionsPresenter._mainColor(
                ExecutionsPresenter._flattenOutput(entry.output_preview)
            ),
        ]

    @staticmethod
    def _formatResult(success: bool) -> str:
        """
        Format the outcome of an execution with color coding.

        Args:
            success (bool): Whether the execution succeeded.

        Returns:
            str: ANSI-colored outcome.
        """
        if success:
            return ExecutionsPresenter._color("success", CFG.status_colors.success)

        return ExecutionsPresenter._color("failed", CFG.status_colors.danger)

    @staticmethod
    def _flattenOutput(output: str) -> str:
        """
        Replace line breaks and tabs so that the output fits on a single table line.
        """
        return " ".join(output.split())

    @staticmethod
    def _color(string: str, color: str | None = None, bold: bool = False) -> str:
        """
        Apply ANSI color codes and optional bold styling to a string.

        Unknown colors are ignored.

        Args:
            string (str): The string to colorize.
            color (str | None): Optional color.
            bold (bool): Whether to apply bold formatting.

        Returns:
            str: ANSI-colored and optionally bolded string.
        """
        code = ExecutionsPresenter._ANSI_COLORS.get(color, "") if color else ""
        prefix = f"{ExecutionsPresenter._ANSI_COLORS['bold'] if bold else ''}{code}"
        return f"{prefix}{string}{ExecutionsPresenter._ANSI_COLORS['reset'] if prefix else ''}"

    @staticmethod
    def _mainColor(string: str, bold: bool = False) -> str:
        """
        Apply the main presenter color with optional bold styling.
        """
        return ExecutionsPresenter._color(
            string, CFG.executions_presenter.main_style, bold
        )
