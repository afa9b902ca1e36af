"""Locating and reading budgetgraph.toml.

A budget workspace keeps its traversal, goal and spending settings in
one budgetgraph.toml, found by walking up from the working directory.
BUDGETGRAPH_CONFIG points at a file elsewhere; the CLI's --config flag
bypasses both (see :mod:`budgetgraph.config.settings`).
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from budgetgraph.config.models import BudgetGraphConfig

CONFIG_FILENAME = "budgetgraph.toml"
CONFIG_ENV_VAR = "BUDGETGRAPH_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for budgetgraph.toml.

    Returns the path to the config file, or None if not found.
    Checks BUDGETGRAPH_CONFIG first; a dangling env path means no config.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent


def load_config(path: Path | None = None, cwd: Path | None = None) -> BudgetGraphConfig:
    """Load and validate config from a TOML file.

    If *path* is None, discovers the file from *cwd*. Returns the
    default configuration when nothing is found.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return BudgetGraphConfig()

    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    return BudgetGraphConfig.model_validate(data)
