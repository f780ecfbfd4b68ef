"""Run ``< file1 cmd1 | cmd2 > file2`` as a two-stage pipeline."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence

from pipex.paths import path_cmd, report_error, split_words

USAGE = "Usage: pipex [file1] [cmd1] [cmd2] [file2]\n"
EXIT_USAGE = 22
EXIT_NOT_FOUND = 127
EXIT_FAILURE = 1


def _open_fd(path: str, flags: int, mode: int = 0o777) -> int | None:
    try:
        return os.open(path, flags, mode)
    except OSError as exc:
        report_error(path, exc)
        return None


def _start(
    command: str, stdin_fd: int, stdout_fd: int, env: Mapping[str, str]
) -> subprocess.Popen | int:
    """Launch one stage, or return the exit status it would have had."""
    words = split_words(command, " ")
    name = words[0] if words else ""
    path = path_cmd(name, env)
    if path is None:
        sys.stderr.write(f"pipex: {name}: command not found\n")
        return EXIT_NOT_FOUND
    try:
        return subprocess.Popen(
            words,
            executable=path,
            stdin=stdin_fd,
            stdout=stdout_fd,
            env=dict(env),
        )
    except OSError as exc:
        report_error(name, exc)
        return EXIT_NOT_FOUND


def _wait(stage: subprocess.Popen | int) -> int:
    if isinstance(stage, int):
        return stage
    code = stage.wait()
    # A stage killed by a signal has no exit code of its own.
    return code if code >= 0 else 0


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> int:
    """Feed ``infile`` through ``cmd1`` then ``cmd2`` into ``outfile``.

    Returns the exit status of the second command.
    """
    if env is None:
        env = os.environ
    in_fd = _open_fd(infile, os.O_RDONLY)
    out_fd = _open_fd(outfile, os.O_CREAT | os.O_RDWR | os.O_TRUNC, 0o644)
    try:
        read_end, write_end = os.pipe()
    except OSError as exc:
        report_error("Pipe", exc)
        for fd in (in_fd, out_fd):
            if fd is not None:
                os.close(fd)
        return EXIT_FAILURE

    try:
        first = (
            _start(cmd1, in_fd, write_end, env) if in_fd is not None else EXIT_FAILURE
        )
        second = (
            _start(cmd2, read_end, out_fd, env) if out_fd is not None else EXIT_FAILURE
        )
    finally:
        for fd in (in_fd, out_fd, read_end, write_end):
            if fd is not None:
                os.close(fd)

    _wait(first)
    return _wait(second)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: ``pipex file1 cmd1 cmd2 file2``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        sys.stderr.write(USAGE)
        return EXIT_USAGE
    infile, cmd1, cmd2, outfile = args
    return run_pipeline(infile, cmd1, cmd2, outfile, os.environ)


if __name__ == "__main__":
    sys.exit(main())