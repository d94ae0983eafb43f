# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Configuration system for schedview.

This module defines dataclasses representing all configurable aspects of schedview,
including environment variables, dashboard limits, store backend selection,
presentation settings, status colors, and exit codes.

The `Config` class loads user configuration from a TOML file (if available)
and provides a globally accessible `CFG` instance.
"""

import os
import socket
import tomllib
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Self


@dataclass
class EnvironmentVariables:
    """Environment variable names used by schedview."""

    # Enables schedview debug mode.
    debug_mode: str = "SCHEDVIEW_DEBUG"
    # Path to an explicit configuration file.
    config: str = "SCHEDVIEW_CONFIG"
    # Name of the store backend to use.
    backend: str = "SCHEDVIEW_BACKEND"
    # Directory holding the store snapshots.
    data_dir: str = "SCHEDVIEW_DATA_DIR"


@dataclass
class DashboardSettings:
    """Settings for assembling dashboard views."""

    # Maximal number of executions surfaced in the executions view.
    max_executions: int = 100
    # Maximal number of characters of free text shown before truncation.
    truncate_length: int = 25
    # Path segment under which the dashboard is served.
    dashboard_path_prefix: str = "dashboard"
    # Path segment under which the API is served.
    api_path_prefix: str = "v1"
    # Upward traversal used to build relative links from the index view.
    index_path_prefix: str = ""
    # Upward traversal used to build relative links from the jobs view.
    jobs_path_prefix: str = "../"
    # Upward traversal used to build relative links from the executions view.
    executions_path_prefix: str = "../../../"
    # Indentation of the pretty-printed job definition.
    definition_indent: int = 2


@dataclass
class StoreSettings:
    """Settings for the store the dashboard reads from."""

    # Name of the store backend.
    backend: str = "file"
    # Directory holding the store snapshots.
    data_dir: Path = field(default_factory=lambda: Path.cwd() / "schedview_data")
    # Namespace under which the agent keeps its data.
    keyspace: str = "dkron"
    # Name of the node serving the dashboard.
    node_name: str = field(default_factory=socket.gethostname)


@dataclass
class IndexPresenterSettings:
    """Settings for IndexPresenter."""

    # Maximal width of the index panel.
    max_width: int | None = None
    # Minimal width of the index panel.
    min_width: int | None = 60
    # Style of the border lines.
    border_style: str = "white"
    # Style of the title.
    title_style: str = "white bold"
    # Style used for the keys in the identity table.
    key_style: str = "default bold"
    # Style used for the values in the identity table.
    value_style: str = "white"
    # Style used for notes.
    notes_style: str = "grey50"


@dataclass
class JobsPresenterSettings:
    """Settings for JobsPresenter."""

    # Maximal width of the jobs panel.
    max_width: int | None = None
    # Minimal width of the jobs panel.
    min_width: int | None = 80
    # Style used for border lines.
    border_style: str = "white"
    # Style used for the title.
    title_style: str = "white bold"
    # Style used for table headers.
    headers_style: str = "default"
    # Style used for table values.
    main_style: str = "white"
    # Style used for job statistics.
    secondary_style: str = "grey70"
    # Style used for the job definitions.
    definition_style: str = "grey50"
    # Style of the separators between individual sections of the panel.
    rule_style: str = "white"
    # Code used to signify "total jobs".
    sum_jobs_code: str = "Σ"


@dataclass
class ExecutionsPresenterSettings:
    """Settings for ExecutionsPresenter."""

    # Maximal width of the executions panel.
    max_width: int | None = None
    # Minimal width of the executions panel.
    min_width: int | None = 80
    # Style used for border lines.
    border_style: str = "white"
    # Style used for the title.
    title_style: str = "white bold"
    # Style used for table headers.
    headers_style: str = "default"
    # Style used for table values.
    main_style: str = "white"
    # Style used for group headers.
    group_style: str = "bright_blue bold"
    # Style of the separators between groups.
    rule_style: str = "grey50"


@dataclass
class DateFormats:
    """Date and time format strings."""

    # Standard date format used by schedview.
    standard: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class ExitCodes:
    """Exit codes used for various errors."""

    # Default error code for failures of schedview commands.
    default: int = 91
    # Returned when a view could not be rendered.
    render_error: int = 92
    # Returned on an unexpected or unhandled error.
    unexpected_error: int = 99


@dataclass
class StatusColors:
    """Color scheme for HealthStatus display."""

    # Style used when the latest group fully succeeded.
    success: str = "bright_green"
    # Style used when the latest group fully failed.
    danger: str = "bright_red"
    # Style used when the latest group partially failed.
    warning: str = "bright_yellow"
    # Style used for jobs without executions.
    unknown: str = "grey70"
    # Style used whenever a summary of jobs is provided.
    sum: str = "white"


@dataclass
class Config:
    """Main configuration for schedview."""

    env_vars: EnvironmentVariables = field(default_factory=EnvironmentVariables)
    dashboard: DashboardSettings = field(default_factory=DashboardSettings)
    store: StoreSettings = field(default_factory=StoreSettings)
    index_presenter: IndexPresenterSettings = field(
        default_factory=IndexPresenterSettings
    )
    jobs_presenter: JobsPresenterSettings = field(default_factory=JobsPresenterSettings)
    executions_presenter: ExecutionsPresenterSettings = field(
        default_factory=ExecutionsPresenterSettings
    )
    date_formats: DateFormats = field(default_factory=DateFormats)
    exit_codes: ExitCodes = field(default_factory=ExitCodes)
    status_colors: StatusColors = field(default_factory=StatusColors)

    # Name of the schedview binary.
    binary_name: str = "schedview"

    @classmethod
    def load(cls, config_path: Path | None = None) -> Self:
        """
        Load configuration from TOML file or use defaults.

        Args:
            config_path: Explicit path to config file. If None, searches standard locations.

        Returns:
            Config instance with loaded or default values.
        """
        if config_path is None:
            config_path = Config._get_config_path()

        try:
            if config_path and config_path.exists():
                with config_path.open("rb") as f:
                    config_data = tomllib.load(f)
                return _dict_to_dataclass(cls, config_data)
        except Exception as e:
            raise ValueError(f"Could not read schedview config '{config_path}': {e}.")

        # no config found - use defaults
        return cls()

    @staticmethod
    def _get_config_path() -> Path | None:
        """
        Search for config file in standard locations (XDG compliant).
        Returns the first existing config file, or None.
        """
        config_locations: list[Path | None] = [
            # 1. Explicit environment variable (highest priority)
            Path(env_path)
            if (env_path := os.getenv(EnvironmentVariables.config))
            else None,
            # 2. Current working directory (for development/override)
            Path.cwd() / "schedview_config.toml",
            # 3. XDG config home (standard user config location)
            Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
            / "schedview"
            / "config.toml",
        ]

        for path in config_locations:
            if path and path.is_file():
                return path

        return None


def _dict_to_dataclass(cls, data: dict[str, Any]):
    """
    Recursively convert a dictionary to a dataclass instance.
    Handles nested dataclasses and paths properly.
    """
    if not is_dataclass(cls):
        return data

    field_values = {}
    for field_info in fields(cls):
        field_name = field_info.name
        field_type = field_info.type

        if field_name in data:
            value = data[field_name]
            if is_dataclass(field_type) and isinstance(value, dict):
                field_values[field_name] = _dict_to_dataclass(field_type, value)
            elif field_type is Path and isinstance(value, str):
                field_values[field_name] = Path(value)
            else:
                field_values[field_name] = value

    return cls(**field_values)


# Global configuration for schedview.
CFG = Config.load()
