"""Run two commands joined by a pipe, reading from one file and writing to another."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping

from pipex.resolve import ERR_ARGS, ERR_ENV, CommandNotFoundError, PipexError, resolve_command

_Child = "subprocess.Popen[bytes] | int"


def _report(message: str) -> None:
    sys.stderr.write(message + "\n")
    sys.stderr.flush()


def _start(
    arg_cmd: str, env: Mapping[str, str], stdin_fd: int, stdout_fd: int
) -> subprocess.Popen[bytes] | int:
    """Start a command; on failure report it and return the exit status it would have had."""
    try:
        path, argv = resolve_command(arg_cmd, env)
    except CommandNotFoundError as exc:
        _report(str(exc))
        return exc.exit_status
    except PipexError as exc:
        _report(str(exc))
        return 1
    try:
        return subprocess.Popen(
            argv, executable=path, env=dict(env), stdin=stdin_fd, stdout=stdout_fd
        )
    except OSError as exc:
        _report(f"Execution failed: {exc.strerror}")
        return 1


def _start_left(
    infile: str, arg_cmd: str, env: Mapping[str, str], write_fd: int
) -> subprocess.Popen[bytes] | int:
    try:
        in_fd = os.open(infile, os.O_RDONLY)
    except OSError as exc:
        _report(f"Input file: {exc.strerror}")
        return 1
    try:
        return _start(arg_cmd, env, in_fd, write_fd)
    finally:
        os.close(in_fd)


def _start_right(
    outfile: str, arg_cmd: str, env: Mapping[str, str], read_fd: int
) -> subprocess.Popen[bytes] | int:
    try:
        out_fd = os.open(outfile, os.O_WRONLY | os.O_TRUNC | os.O_CREAT, 0o777)
    except OSError as exc:
        _report(f"Output file: {exc.strerror}")
        return 1
    try:
        return _start(arg_cmd, env, read_fd, out_fd)
    finally:
        os.close(out_fd)


def _wait(child: subprocess.Popen[bytes] | int) -> int:
    return child if isinstance(child, int) else child.wait()


def run_pipeline(
    infile: str, cmd1: str, cmd2: str, outfile: str, env: Mapping[str, str]
) -> tuple[int, int]:
    """Run ``< infile cmd1 | cmd2 > outfile`` and return both exit statuses.

    A failure on one side is reported on standard error and does not stop
    the other side from running.
    """
    if env is None:
        raise PipexError(ERR_ENV)
    read_fd, write_fd = os.pipe()
    try:
        left = _start_left(infile, cmd1, env, write_fd)
    finally:
        os.close(write_fd)
    try:
        right = _start_right(outfile, cmd2, env, read_fd)
    finally:
        os.close(read_fd)
    return _wait(left), _wait(right)


def main(argv: list[str] | None = None) -> int:
    """Command entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 4:
        _report(ERR_ARGS)
        return 1
    infile, cmd1, cmd2, outfile = args
    run_pipeline(infile, cmd1, cmd2, outfile, os.environ)
    return 0


if __name__ == "__main__":
    sys.exit(main())