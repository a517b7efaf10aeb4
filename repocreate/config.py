"""
config.py

Responsibility: Load the optional YAML defaults file into a typed model.

Example `~/.config/create-repo/config.yaml`:

    owner: my-org
    private: true
    create_dir: false
    commit_message: "ci: create repository"
    template_dir: ~/templates/python-lib
    clone_protocol: ssh

Every key is optional; command-line flags take precedence over the file.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_PATH = Path("~/.config/create-repo/config.yaml")
CLONE_PROTOCOLS = ("https", "ssh")


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class Config:
    """Defaults read from the config file."""

    owner: str | None = None
    private: bool | None = None
    create_dir: bool | None = None
    commit_message: str | None = None
    template_dir: Path | None = None
    clone_protocol: str | None = None


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    return str(value).strip() or None


def _optional_bool(data: dict[str, Any], key: str) -> bool | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigError(f"`{key}` must be true or false, got {value!r}.")
    return value


def load_config(path: str | Path | None = None) -> Config:
    """
    Load a `Config` from `path`.

    With no path the default location is used, and a missing file yields an empty
    `Config`. An explicitly given path must exist.
    """
    if path is None:
        cfg_path = DEFAULT_CONFIG_PATH.expanduser()
        if not cfg_path.exists():
            return Config()
    else:
        cfg_path = Path(path).expanduser()
        if not cfg_path.exists():
            raise ConfigError(f"Config file does not exist: {cfg_path}")

    try:
        data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Config file is not valid YAML: {cfg_path}") from e
    if not isinstance(data, dict):
        raise ConfigError("Config file must be a mapping/object at the top level.")

    protocol = _optional_str(data, "clone_protocol")
    if protocol is not None:
        protocol = protocol.lower()
        if protocol not in CLONE_PROTOCOLS:
            raise ConfigError(f"`clone_protocol` must be one of {', '.join(CLONE_PROTOCOLS)}, got {protocol!r}.")

    template_dir = _optional_str(data, "template_dir")

    return Config(
        owner=_optional_str(data, "owner"),
        private=_optional_bool(data, "private"),
        create_dir=_optional_bool(data, "create_dir"),
        commit_message=_optional_str(data, "commit_message"),
        # Relative template paths are resolved against the config file's directory.
        template_dir=(cfg_path.parent / Path(template_dir).expanduser()) if template_dir else None,
        clone_protocol=protocol,
    )
