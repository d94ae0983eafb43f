# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from datetime import datetime

import pytest
import yaml
from rich.console import Console, Group
from rich.panel import Panel

from schedview_lib.core.config import CFG
from schedview_lib.executions.presenter import ExecutionsPresenter
from schedview_lib.properties.execution import Execution
from schedview_lib.views.context import DashboardContext
from schedview_lib.views.models import ExecutionEntry, ExecutionsView


@pytest.fixture
def context():
    return DashboardContext(
        version="1.4.2",
        leader_name="node-2",
        member_name="node-1",
        backend="file",
        keyspace="dkron",
        path="../../../dashboard",
        api_path="../../../v1",
    )


def _entry(group: int, success: bool, node: str, output: str) -> ExecutionEntry:
    execution = Execution(
        job_name="backup",
        group=group,
        success=success,
        output=output,
        node_name=node,
        started_at=datetime(2025, 3, 1, 8, 0, 0),
    )
    return ExecutionEntry(execution=execution, output_preview=output[:25])


@pytest.fixture
def view(context):
    return ExecutionsView(
        context,
        "backup",
        groups={
            7: [
                _entry(7, True, "node-1", "done"),
                _entry(7, False, "node-2", "disk full"),
            ],
            8: [_entry(8, True, "node-3", "done")],
        },
        by_group=[7, 8],
    )


def _render(presenter: ExecutionsPresenter) -> str:
    console = Console(record=True, width=140)
    presenter.render(console)
    return console.export_text()


def test_create_panel_structure(view):
    panel_group = ExecutionsPresenter(view).createPanel(Console(width=140))

    assert isinstance(panel_group, Group)
    main_panel = panel_group.renderables[1]
    assert isinstance(main_panel, Panel)
    assert main_panel.title.plain == "EXECUTIONS: backup"


def test_render_groups_in_ascending_order(view):
    output = _render(ExecutionsPresenter(view))

    assert "GROUP 7" in output
    assert "GROUP 8" in output
    assert output.index("GROUP 7") < output.index("GROUP 8")
    assert output.index("disk full") < output.index("GROUP 8") < output.index("node-3")


def test_render_shows_executions(view):
    output = _render(ExecutionsPresenter(view))

    for header in ExecutionsPresenter._HEADERS:
        assert header in output
    assert "disk full" in output
    assert "failed" in output
    assert "success" in output
    assert "2025-03-01 08:00:00" in output


def test_render_no_executions(context):
    output = _render(ExecutionsPresenter(ExecutionsView(context, "cleanup")))

    assert "No executions found." in output
    assert "GROUP" not in output
    assert "EXECUTIONS: cleanup" in output


def test_render_shows_preview_not_full_output(context):
    entry = ExecutionEntry(
        execution=Execution(
            job_name="backup", group=1, success=True, output="a" * 20 + "b" * 20
        ),
        output_preview="a" * 20 + "b" * 5,
    )
    view = ExecutionsView(context, "backup", {1: [entry]}, [1])

    output = _render(ExecutionsPresenter(view))

    assert "a" * 20 + "b" * 5 in output
    assert "b" * 6 not in output


def test_create_group_table_contains_rows(view):
    table = ExecutionsPresenter(view)._createGroupTable(view.groups[7])

    assert "node-1" in table
    assert "node-2" in table
    assert len(table.splitlines()) == 3


@pytest.mark.parametrize(
    "success,label,color",
    [
        (True, "success", CFG.status_colors.success),
        (False, "failed", CFG.status_colors.danger),
    ],
)
def test_format_result(success, label, color):
    result = ExecutionsPresenter._formatResult(success)

    assert label in result
    assert result.startswith(ExecutionsPresenter._ANSI_COLORS[color])
    assert result.endswith(ExecutionsPresenter._ANSI_COLORS["reset"])


@pytest.mark.parametrize(
    "output,expected",
    [
        ("line one\nline two", "line one line two"),
        ("\ttabbed  text ", "tabbed text"),
        ("", ""),
    ],
)
def test_flatten_output(output, expected):
    assert ExecutionsPresenter._flattenOutput(output) == expected


@pytest.mark.parametrize(
    "color,bold,expected_prefix",
    [
        (None, False, ""),
        ("bright_red", False, "\033[91m"),
        ("bright_green", True, "\033[1m\033[92m"),
        ("no_such_color", False, ""),
        (None, True, "\033[1m"),
    ],
)
def test_color_applies_ansi(color, bold, expected_prefix):
    result = ExecutionsPresenter._color("text", color, bold)

    assert result.startswith(f"{expected_prefix}text")
    if expected_prefix:
        assert result.endswith(ExecutionsPresenter._ANSI_COLORS["reset"])
    else:
        assert result == "text"


def test_dump_yaml(view, capsys):
    ExecutionsPresenter(view).dumpYaml()

    data = yaml.safe_load(capsys.readouterr().out)

    assert data["job_name"] == "backup"
    assert list(data["groups"]) == [7, 8]
    assert [x["success"] for x in data["groups"][7]] == [True, False]
    assert data["groups"][7][1]["output_preview"] == "disk full"
