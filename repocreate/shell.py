"""
shell.py

Responsibility: Run the external tools (`git`, `gh`) as child processes.

The child inherits stdout/stderr so the tool's own output reaches the user.
Failures are raised as `CommandError`; deciding the exit status is left to the CLI.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

log = logging.getLogger(__name__)


class CommandError(RuntimeError):
    def __init__(self, command: str, args: Sequence[str], cause: str) -> None:
        self.command = command
        self.args_list = list(args)
        self.cause = cause
        super().__init__(f"Command failed: {_format(command, args)}: {cause}")


def _format(command: str, args: Sequence[str]) -> str:
    return " ".join([command, *args])


def run_command(command: str, *args: str, cwd: Path) -> None:
    """
    Run `command args...` in `cwd`, raising CommandError on launch failure or non-zero exit.
    """
    print(f"\tRunning command: {_format(command, args)}")
    try:
        result = subprocess.run([command, *args], cwd=str(cwd), check=False)
    except OSError as e:
        raise CommandError(command, args, str(e)) from e
    if result.returncode != 0:
        raise CommandError(command, args, f"exit status {result.returncode}")


def command_ok(command: str, *args: str, cwd: Path) -> bool:
    """Return True when the command exits with status 0; any failure is False."""
    try:
        result = subprocess.run(
            [command, *args],
            cwd=str(cwd),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as e:
        log.debug("Probe %s could not start: %s", _format(command, args), e)
        return False
    log.debug("Probe %s exited with %s", _format(command, args), result.returncode)
    return result.returncode == 0
