# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Shared helper functions used across schedview.

Includes YAML loader and dumper selection, unicode-safe text truncation,
datetime formatting for display, and panel width computation for Rich output.
"""

from datetime import datetime

import yaml
from rich.console import Console

from .config import CFG
from .logger import get_logger

logger = get_logger(__name__)


def load_yaml_dumper() -> type[yaml.Dumper]:
    """Return the fastest available YAML dumper (CDumper if possible)."""
    try:
        from yaml import CDumper as Dumper  # ty: ignore[possibly-missing-import]

        logger.debug("Loaded YAML CDumper.")
    except ImportError:
        from yaml import Dumper

        logger.debug("Loaded default YAML dumper.")

    return Dumper


def load_yaml_loader() -> type[yaml.SafeLoader]:
    """Return the fastest available safe YAML loader (CSafeLoader if possible)."""
    try:
        from yaml import (
            CSafeLoader as SafeLoader,  # ty: ignore[possibly-missing-import]
        )

        logger.debug("Loaded YAML CLoader.")
    except ImportError:
        from yaml import SafeLoader

        logger.debug("Loaded default YAML loader.")

    return SafeLoader


def decode_text(value: object) -> str:
    """
    Convert a raw text field into a displayable string.

    Bytes are decoded as UTF-8, with undecodable sequences replaced,
    so the result is always valid text.

    Args:
        value (object): The raw value. Values other than text and bytes are stringified.

    Returns:
        str: The decoded string. Empty string if `value` is None.
    """
    if value is None:
        return ""

    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")

    return str(value)


def truncate_text(text: str | bytes | None, length: int | None = None) -> str:
    """
    Truncate text to a fixed number of characters.

    Characters are counted as decoded code points, so multi-byte
    characters are never split.

    Args:
        text (str | bytes | None): The text to truncate.
        length (int | None): Maximal number of characters to keep.
            Defaults to `CFG.dashboard.truncate_length`.

    Returns:
        str: The original text if it fits into `length` characters,
             otherwise its first `length` characters.
    """
    if length is None:
        length = CFG.dashboard.truncate_length

    text = decode_text(text)
    if len(text) <= length:
        return text

    return text[:length]


def format_datetime(value: datetime | None) -> str:
    """
    Format a datetime using the standard schedview date format.

    Args:
        value (datetime | None): The datetime to format.

    Returns:
        str: The formatted datetime, or an empty string if `value` is None.
    """
    if value is None:
        return ""

    return value.strftime(CFG.date_formats.standard)


def parse_datetime(value: object) -> datetime | None:
    """
    Convert a raw timestamp loaded from a store snapshot into a datetime.

    Accepts datetimes (as produced by the YAML loader), strings in the standard
    schedview date format, and ISO 8601 strings.

    Args:
        value (object): The raw value.

    Returns:
        datetime | None: The parsed datetime, or None if `value` is None.

    Raises:
        ValueError: If `value` cannot be interpreted as a timestamp.
    """
    if value is None or isinstance(value, datetime):
        return value

    if not isinstance(value, str):
        raise ValueError(f"Invalid timestamp '{value}'.")

    try:
        return datetime.strptime(value, CFG.date_formats.standard)
    except ValueError:
        return datetime.fromisoformat(value)


def parse_bool(value: object) -> bool:
    """
    Convert a raw flag loaded from a store snapshot into a bool.

    Only YAML booleans and the strings "true" and "false" (case-insensitive)
    are accepted, so that a quoted "false" is never read as a success.

    Args:
        value (object): The raw value.

    Returns:
        bool: The parsed flag.

    Raises:
        ValueError: If `value` is not a boolean.
    """
    if isinstance(value, bool):
        return value

    if isinstance(value, str) and value.strip().lower() in {"true", "false"}:
        return value.strip().lower() == "true"

    raise ValueError(f"Invalid boolean '{value}'.")


def parse_tags(value: object) -> dict[str, str]:
    """
    Convert raw tags loaded from a store snapshot into a string mapping.

    Args:
        value (object): The raw value. None means no tags.

    Returns:
        dict[str, str]: Tags with keys and values stringified.

    Raises:
        TypeError: If `value` is not a mapping.
    """
    if value is None:
        return {}

    if not isinstance(value, dict):
        raise TypeError(f"Invalid tags '{value}': expected a mapping.")

    return {str(k): str(v) for k, v in value.items()}


def get_panel_width(
    console: Console, factor: int, min_width: int | None, max_width: int | None
):
    """
    Calculate the width of a panel relative to the console width, constrained by
    optional minimum and maximum width values.

    Args:
        console (Console): A rich Console-like object that provides terminal size.
        factor (int): A divisor used to scale down the terminal width.
        min_width (int): The minimum allowable panel width. If None, no lower bound is applied.
        max_width (int): The maximum allowable panel width. If None, no upper bound is applied.

    Returns:
        int: The computed panel width after applying scaling and bounds.
    """

    term_width = console.size.width
    panel_width = term_width // factor
    if min_width is not None:
        panel_width = max(panel_width, min_width)
    if max_width is not None:
        panel_width = min(panel_width, max_width)

    return panel_width
