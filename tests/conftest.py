"""Shared fixtures: fake `git`/`gh` runners and scripted stdin."""

from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

from repocreate import cli, config
from repocreate.shell import CommandError


class FakeTools:
    """Records every external command instead of running it."""

    def __init__(self) -> None:
        self.remote_exists = False
        self.fail_on: tuple[str, ...] | None = None
        self.calls: list[tuple[str, ...]] = []
        self.cwds: list[Path] = []

    def run_command(self, command: str, *args: str, cwd: Path) -> None:
        call = (command, *args)
        self.calls.append(call)
        self.cwds.append(cwd)
        if self.fail_on is not None and call[: len(self.fail_on)] == self.fail_on:
            raise CommandError(command, args, "exit status 1")

    def command_ok(self, command: str, *args: str, cwd: Path) -> bool:
        self.calls.append((command, *args))
        self.cwds.append(cwd)
        return self.remote_exists


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("GITHUB_OWNER", raising=False)
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.setattr(config, "DEFAULT_CONFIG_PATH", tmp_path / "no-such-config.yaml")


@pytest.fixture
def tools(monkeypatch: pytest.MonkeyPatch) -> FakeTools:
    fake = FakeTools()
    monkeypatch.setattr(cli, "run_command", fake.run_command)
    monkeypatch.setattr(cli, "command_ok", fake.command_ok)
    return fake


@pytest.fixture
def answers(monkeypatch: pytest.MonkeyPatch):
    """Script the user's answers to confirmation prompts, one per line."""

    def _answers(*lines: str) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO("".join(f"{line}\n" for line in lines)))

    _answers()
    return _answers
