"""Small helpers shared across the package: timestamps and indentation."""

from __future__ import annotations

import sys
import time
from typing import TextIO

INDENT_UNIT = "    "


def get_timestamp() -> float:
    """Return the current wall-clock time in seconds, with sub-second precision."""
    return time.time()


def indent_text(indent: int) -> str:
    """Return the indentation string for the given depth (four spaces per level)."""
    if indent < 0:
        raise ValueError(f"indent must be non-negative, got {indent}")
    return INDENT_UNIT * indent


def print_indent(indent: int, out: TextIO | None = None) -> None:
    """Write the indentation for the given depth to ``out`` (standard output by default)."""
    (out if out is not None else sys.stdout).write(indent_text(indent))