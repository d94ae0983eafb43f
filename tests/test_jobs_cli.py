# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from unittest.mock import patch

import pytest
import yaml
from click.testing import CliRunner

from schedview_lib.core.config import CFG
from schedview_lib.jobs import jobs
from schedview_lib.jobs.presenter import JobsPresenter
from schedview_lib.views.assembler import ViewAssembler

_ENV = {"COLUMNS": "200"}


@pytest.fixture
def snapshot(tmp_path):
    keyspace = tmp_path / "dkron"
    (keyspace / "jobs").mkdir(parents=True)
    (keyspace / "executions").mkdir()

    (keyspace / "jobs" / "backup.yaml").write_text(
        "name: backup\nschedule: '@every 1h'\nsuccess_count: 2\nerror_count: 1\n"
    )
    (keyspace / "jobs" / "cleanup.yaml").write_text(
        "name: cleanup\nschedule: '@daily'\n"
    )
    (keyspace / "jobs" / "report.yaml").write_text(
        "name: report\nschedule: '@weekly'\n"
    )
    (keyspace / "executions" / "backup.yaml").write_text(
        """
- {group: 7, success: true, node_name: node-1, output: done}
- {group: 7, success: false, node_name: node-2, output: disk full}
- {group: 8, success: true, node_name: node-1, output: done}
"""
    )
    (keyspace / "executions" / "report.yaml").write_text(
        """
- {group: 3, success: true}
- {group: 3, success: false}
"""
    )
    (keyspace / "members.yaml").write_text(
        "- name: node-1\n- name: node-2\n  leader: true\n"
    )

    return tmp_path


def test_jobs_command_shows_jobs(snapshot):
    runner = CliRunner()
    result = runner.invoke(
        jobs, ["--data-dir", str(snapshot), "--node-name", "node-1"], env=_ENV
    )

    assert result.exit_code == 0
    output = result.output
    for name in ["backup", "cleanup", "report"]:
        assert name in output
    assert "success" in output
    assert "unknown" in output
    assert "warning" in output
    assert "node-2" in output


def test_jobs_command_yaml_flag_outputs_yaml(snapshot):
    runner = CliRunner()
    result = runner.invoke(jobs, ["--data-dir", str(snapshot), "--yaml"], env=_ENV)

    assert result.exit_code == 0
    data = yaml.safe_load(result.stdout)

    assert data["context"]["leader_name"] == "node-2"
    assert data["context"]["path"] == "../dashboard"
    assert {job["name"]: job["status"] for job in data["jobs"]} == {
        "backup": "success",
        "cleanup": "unknown",
        "report": "warning",
    }


def test_jobs_command_extra_flag_shows_definitions(snapshot):
    runner = CliRunner()
    result = runner.invoke(jobs, ["--data-dir", str(snapshot), "-e"], env=_ENV)

    assert result.exit_code == 0
    assert '"schedule": "@every 1h"' in result.output


def test_jobs_command_data_dir_from_env_var(snapshot):
    runner = CliRunner()
    result = runner.invoke(
        jobs, ["--yaml"], env={**_ENV, CFG.env_vars.data_dir: str(snapshot)}
    )

    assert result.exit_code == 0
    assert len(yaml.safe_load(result.stdout)["jobs"]) == 3


def test_jobs_command_missing_keyspace_shows_no_jobs(snapshot):
    runner = CliRunner()

    with (
        patch("schedview_lib.views.assembler.logger"),
        patch("schedview_lib.views.context.logger"),
    ):
        result = runner.invoke(
            jobs, ["--data-dir", str(snapshot), "--keyspace", "prod"], env=_ENV
        )

    assert result.exit_code == 0
    assert "No jobs found." in result.output


def test_jobs_command_unknown_backend_exits_91(snapshot):
    runner = CliRunner()

    with patch("schedview_lib.jobs.cli.logger") as mock_logger:
        result = runner.invoke(
            jobs, ["--data-dir", str(snapshot), "--backend", "etcd"], env=_ENV
        )

    assert result.exit_code == CFG.exit_codes.default
    mock_logger.error.assert_called_once()


def test_jobs_command_render_failure_exits_92(snapshot):
    runner = CliRunner()

    with (
        patch("schedview_lib.jobs.cli.logger") as mock_logger,
        patch.object(JobsPresenter, "createPanel", side_effect=RuntimeError("boom")),
    ):
        result = runner.invoke(jobs, ["--data-dir", str(snapshot)], env=_ENV)

    assert result.exit_code == CFG.exit_codes.render_error
    mock_logger.error.assert_called_once()


def test_jobs_command_unexpected_exception_exits_99(snapshot):
    runner = CliRunner()

    with (
        patch("schedview_lib.jobs.cli.logger") as mock_logger,
        patch.object(
            ViewAssembler, "fromBackend", side_effect=RuntimeError("unexpected")
        ),
    ):
        result = runner.invoke(jobs, ["--data-dir", str(snapshot)], env=_ENV)

    assert result.exit_code == CFG.exit_codes.unexpected_error
    mock_logger.critical.assert_called_once()
