"""Locating ``vividusctl.toml`` for the current VIVIDUS project.

The file marks the project root: classpath entries, the build directory and
the resources directory in it resolve against its parent, so vividusctl can
be run from any subdirectory such as ``src/main/resources/story``.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "vividusctl.toml"
CONFIG_ENV_VAR = "VIVIDUSCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the project config file, or None when running on defaults.

    ``VIVIDUSCTL_CONFIG`` pins the file; if it names a missing file no
    search happens. Otherwise the nearest ``vividusctl.toml`` from *start*
    (default: CWD) upwards wins.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    start_dir = (start or Path.cwd()).resolve()
    for directory in (start_dir, *start_dir.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
