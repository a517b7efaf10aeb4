"""
repocreate package

This package implements `create-repo`, a CLI that turns a local directory into
a git repository hosted on GitHub.

Key responsibilities are split across modules:
- `cli.py`: option parsing and orchestration (check -> clone or init -> commit -> create/push)
- `shell.py`: child process execution for `git` and `gh`
- `prompt.py`: interactive yes/no confirmation
- `config.py`: optional YAML defaults file
- `github_client.py`: GitHub REST lookup of the authenticated account
- `renderer.py`: optional template seeding of the new repository
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
