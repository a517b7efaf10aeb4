"""
renderer.py

Responsibility: Seed a new repository from a template directory before the initial commit.

Rules:
- Walk template files in sorted order.
- UTF-8 files containing Jinja2 markers are rendered with the repository context.
- Everything else is copied byte-for-byte.
- Files already present in the destination are left untouched.
"""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import Environment, StrictUndefined, TemplateError

log = logging.getLogger(__name__)

_MARKERS = ("{{", "{%", "{#")


class RenderError(RuntimeError):
    pass


@dataclass(frozen=True)
class RenderResult:
    rendered_files: int
    copied_files: int
    skipped_files: int


def _read_text(path: Path) -> str | None:
    """Return the file's UTF-8 text, or None for binary files."""
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        return None


def _iter_template_files(template_dir: Path) -> list[Path]:
    files: list[Path] = []
    for root, dirs, filenames in os.walk(template_dir):
        # A template's own history must not leak into the new repository.
        dirs[:] = [d for d in dirs if d != ".git"]
        root_path = Path(root)
        files.extend(root_path / name for name in filenames)
    files.sort(key=lambda p: p.relative_to(template_dir).as_posix())
    return files


def build_context(*, repo_name: str, owner: str | None, private: bool) -> dict[str, Any]:
    return {
        "repo_name": repo_name,
        "owner": owner or "",
        "private": private,
        "visibility": "private" if private else "public",
    }


def seed_repository(
    *,
    template_dir: str | Path,
    destination_dir: str | Path,
    context: dict[str, Any],
) -> RenderResult:
    """
    Render/copy `template_dir` into `destination_dir` without overwriting existing files.
    """
    tpl_dir = Path(template_dir).expanduser().resolve()
    dst_dir = Path(destination_dir).resolve()

    if not tpl_dir.is_dir():
        raise RenderError(f"Template directory not found: {tpl_dir}")

    env = Environment(autoescape=False, undefined=StrictUndefined, keep_trailing_newline=True)

    rendered = copied = skipped = 0
    for src_path in _iter_template_files(tpl_dir):
        rel = src_path.relative_to(tpl_dir)
        dst_path = dst_dir / rel
        if dst_path.exists():
            log.debug("Keeping existing file %s", rel)
            skipped += 1
            continue
        dst_path.parent.mkdir(parents=True, exist_ok=True)

        text = _read_text(src_path)
        if text is None or not any(marker in text for marker in _MARKERS):
            shutil.copy2(src_path, dst_path)
            copied += 1
            continue

        try:
            out = env.from_string(text).render(**context)
        except TemplateError as e:
            raise RenderError(f"Failed rendering template file: {rel}: {e}") from e
        dst_path.write_text(out, encoding="utf-8", newline="\n")
        shutil.copystat(src_path, dst_path)
        rendered += 1

    return RenderResult(rendered_files=rendered, copied_files=copied, skipped_files=skipped)
