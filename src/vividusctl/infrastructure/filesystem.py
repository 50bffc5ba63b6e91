"""Filesystem operations: exit-code persistence and JSON reading.

The exit-code file is plain text holding one decimal integer and nothing
else.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def resolve_exit_code_path(
    raw: str,
    *,
    project_root: Path,
    build_dir: Path,
    resolve_against_build_dir: bool,
) -> Path:
    """Resolve the configured exit-code file location.

    Relative paths resolve against *build_dir* when
    *resolve_against_build_dir* is set, otherwise against *project_root*.
    Absolute paths are returned unchanged.
    """
    path = Path(raw).expanduser()
    if path.is_absolute():
        return path
    base = build_dir if resolve_against_build_dir else project_root
    return base / path


def write_exit_code(path: Path, exit_code: int) -> Path:
    """Write the decimal exit code to *path*, replacing any previous content.

    Creates parent directories if they don't exist.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fh:
        fh.write(str(exit_code))
    return path


def read_json(path: Path) -> Any:
    """Read and parse a UTF-8 JSON document."""
    return json.loads(path.read_text(encoding="utf-8"))
