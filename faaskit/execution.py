"""Running external commands and reading Git metadata."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

_NOT_A_REPO = "not a git repository"


class CommandError(RuntimeError):
    """An external command could not be run or exited with failure."""


def _failure(command: Sequence[str]) -> CommandError:
    return CommandError(f"ERROR - Could not execute command: [{' '.join(command)}]")


def exec_command(temp_path: str, command: Sequence[str]) -> None:
    """Run ``command`` in ``temp_path``, streaming its output to ours."""
    try:
        result = subprocess.run(list(command), cwd=temp_path, check=False)
    except OSError as exc:
        raise _failure(command) from exc
    if result.returncode != 0:
        raise _failure(command)


def exec_command_with_output(command: Sequence[str], skip_failure: bool) -> str:
    """Run ``command`` and return its combined stdout and stderr.

    A failure raises ``CommandError`` unless ``skip_failure`` is set, in which
    case whatever output there was is returned.
    """
    try:
        result = subprocess.run(
            list(command),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=False,
        )
    except OSError as exc:
        if skip_failure:
            return ""
        raise _failure(command) from exc
    if result.returncode != 0 and not skip_failure:
        raise _failure(command)
    output = result.stdout or b""
    return output.decode("utf-8", errors="replace")


def _git_output(command: list[str]) -> str:
    output = exec_command_with_output(command, True)
    if _NOT_A_REPO in output.lower():
        return ""
    return output.removesuffix("\n")


def get_git_sha() -> str:
    """Return the short commit SHA of the current repository, or ``""``."""
    return _git_output(["git", "rev-parse", "--short", "HEAD"])


def get_git_branch() -> str:
    """Return the current branch name, or ``""`` outside a repository."""
    return _git_output(["git", "rev-parse", "--symbolic-full-name", "--abbrev-ref", "HEAD"])