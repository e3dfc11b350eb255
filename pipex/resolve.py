"""Parsing command strings and finding their executables on PATH."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pipex.splitting import split_words

ERR_CMD = "Error: Command not found"
ERR_ENV = "Error: Environment not found"
ERR_ARGS = "Error: Invalid number of arguments"


class PipexError(Exception):
    """A command could not be prepared for execution."""


class CommandNotFoundError(PipexError):
    """No executable was found for a command name."""

    exit_status = 127

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Command not found: {command}")


def _is_executable(path: str) -> bool:
    return os.access(path, os.F_OK | os.X_OK)


def parse_command(arg_cmd: str) -> list[str]:
    """Split a command string into its words, honouring single and double quotes."""
    if arg_cmd is None:
        raise PipexError("Invalid command or environment")
    words = split_words(arg_cmd, " ")
    if not words:
        raise PipexError("Empty command")
    return words


def find_command(command: str, env: Mapping[str, str]) -> str | None:
    """Return the path of the executable for ``command``, or None.

    A name starting with ``/`` or ``./`` is used as is when it is
    executable; otherwise each directory of ``PATH`` is tried in order.
    """
    if command is None or env is None:
        raise PipexError("Invalid command or environment")
    if command.startswith(("/", "./")) and _is_executable(command):
        return command
    search_path = env.get("PATH")
    if search_path is None:
        return None
    for directory in split_words(search_path, ":"):
        candidate = f"{directory}/{command}"
        if _is_executable(candidate):
            return candidate
    return None


def resolve_command(arg_cmd: str, env: Mapping[str, str]) -> tuple[str, list[str]]:
    """Return the executable path and argument list for a command string."""
    if arg_cmd is None or env is None:
        raise PipexError("Invalid command or environment")
    argv = parse_command(arg_cmd)
    path = find_command(argv[0], env)
    if path is None:
        raise CommandNotFoundError(argv[0])
    return path, argv