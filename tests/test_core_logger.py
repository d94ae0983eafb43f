# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import io
import logging
from datetime import datetime

import pytest
from rich.console import Console
from rich.logging import RichHandler

from schedview_lib.core.logger import CFG, get_logger


@pytest.fixture
def buffer(monkeypatch):
    """Redirect consoles created by the logger into a StringIO buffer."""
    buf = io.StringIO()
    monkeypatch.setitem(
        get_logger.__globals__,
        "Console",
        lambda **kwargs: Console(file=buf, force_terminal=False, width=200, **kwargs),
    )
    return buf


def _fresh_logger(name: str, show_time: bool = False) -> logging.Logger:
    logging.getLogger(name).handlers.clear()
    return get_logger(name, show_time=show_time)


def _minute_timestamp() -> str:
    # seconds may tick over while logging
    return datetime.now().strftime(CFG.date_formats.standard)[:-3]


@pytest.mark.parametrize("debug,level", [(True, logging.DEBUG), (False, logging.INFO)])
def test_logger_level_follows_debug_env_var(monkeypatch, debug, level):
    if debug:
        monkeypatch.setenv(CFG.env_vars.debug_mode, "1")
    else:
        monkeypatch.delenv(CFG.env_vars.debug_mode, raising=False)

    logger = _fresh_logger(f"test_level_{debug}")

    assert logger.level == level
    assert all(handler.level == level for handler in logger.handlers)


def test_logger_does_not_propagate():
    assert _fresh_logger("test_propagate").propagate is False


def test_logger_repeated_calls_attach_one_handler():
    _fresh_logger("test_repeated")
    logger = get_logger("test_repeated")

    assert len([h for h in logger.handlers if isinstance(h, RichHandler)]) == 1


def test_logger_writes_warnings(monkeypatch, buffer):
    monkeypatch.delenv(CFG.env_vars.debug_mode, raising=False)

    _fresh_logger("test_warning").warning("Could not resolve the cluster leader")

    output = buffer.getvalue()
    assert "WARNING" in output
    assert "Could not resolve the cluster leader" in output


def test_logger_hides_debug_records_by_default(monkeypatch, buffer):
    monkeypatch.delenv(CFG.env_vars.debug_mode, raising=False)

    _fresh_logger("test_hidden_debug").debug("Loading snapshot")

    assert "Loading snapshot" not in buffer.getvalue()


def test_logger_debug_mode_shows_debug_records_with_time(monkeypatch, buffer):
    monkeypatch.setenv(CFG.env_vars.debug_mode, "1")

    _fresh_logger("test_shown_debug").debug("Loading snapshot")

    output = buffer.getvalue()
    assert "Loading snapshot" in output
    assert _minute_timestamp() in output


def test_logger_show_time(monkeypatch, buffer):
    monkeypatch.delenv(CFG.env_vars.debug_mode, raising=False)

    _fresh_logger("test_show_time", show_time=True).info("hello")

    assert _minute_timestamp() in buffer.getvalue()


def test_logger_no_time_by_default(monkeypatch, buffer):
    monkeypatch.delenv(CFG.env_vars.debug_mode, raising=False)

    _fresh_logger("test_no_time").info("hello")

    assert _minute_timestamp() not in buffer.getvalue()
