"""Locating executables along the search path and reporting errors."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def find_path(env: Mapping[str, str] | None) -> list[str] | None:
    """Return the directories listed in the environment's PATH.

    Writes a message to standard error and returns None when there is no
    environment or it has no PATH entry.
    """
    if env is None:
        sys.stderr.write("Error: Invalid environment\n")
        return None
    value = env.get("PATH")
    if value is None:
        sys.stderr.write("Error: No path found\n")
        return None
    return split_words(value, ":")


def path_cmd(cmd: str, env: Mapping[str, str] | None) -> str | None:
    """Resolve ``cmd`` to an executable path, or None if it cannot be found.

    A command containing a slash is returned unchanged; otherwise each PATH
    directory is searched in order for an executable entry.
    """
    if not cmd:
        return None
    if "/" in cmd:
        return cmd
    directories = find_path(env)
    if directories is None:
        return None
    for directory in directories:
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def report_error(name: str, exc: OSError) -> None:
    """Write ``pipex: <name>: <reason>`` to standard error."""
    reason = exc.strerror or str(exc)
    prefix = f"{name}: " if name else ""
    sys.stderr.write(f"pipex: {prefix}{reason}\n")