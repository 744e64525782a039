"""Path resolution for the project config file."""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = ".tabalign.toml"


def resolve_project_root(explicit: Path | None = None) -> Path:
    """Resolve the directory whose `.tabalign.toml` applies.

    Precedence:
    1. Explicit function argument.
    2. `TABALIGN_PROJECT_ROOT` environment variable.
    3. Current directory / ancestors containing `.tabalign.toml`, stopping at
       the first `.git` boundary.
    4. Current working directory.
    """

    if explicit is not None:
        return explicit.expanduser().resolve()

    env_root = os.getenv("TABALIGN_PROJECT_ROOT")
    if env_root:
        return Path(env_root).expanduser().resolve()

    cwd = Path.cwd().resolve()
    candidate = cwd
    while True:
        if (candidate / CONFIG_FILENAME).is_file():
            return candidate
        # A .git entry (file for worktrees, directory otherwise) ends the search.
        if (candidate / ".git").exists():
            return candidate
        parent = candidate.parent
        if parent == candidate:
            break
        candidate = parent

    return cwd


def config_path(project_root: Path) -> Path:
    return project_root / CONFIG_FILENAME
