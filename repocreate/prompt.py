"""Interactive yes/no confirmation."""

from __future__ import annotations

import sys
from typing import TextIO


def confirm(prompt: str, *, stream: TextIO | None = None) -> bool:
    """
    Ask `prompt` and return True only for a "y" answer (case-insensitive, trimmed).

    EOF and every other answer count as "no".
    """
    print(f"{prompt} (y/N): ", end="", flush=True)
    line = (stream or sys.stdin).readline()
    return line.strip().lower() == "y"
