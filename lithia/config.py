from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List

# Defaults
_DEFAULT_INCLUDE_DIRS: List[Path] = []
_DEFAULT_PROMPT = "> "
_DEFAULT_LOG_LEVEL = "WARNING"


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_include_roots() -> List[Path]:
    return paths_from_env('LITHIA_PATH', _DEFAULT_INCLUDE_DIRS)


def get_prompt() -> str:
    return os.environ.get('LITHIA_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> int:
    name = os.environ.get('LITHIA_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def resolve_include(name: str) -> Path:
    """Find an included file: as given (absolute or relative to cwd), then under each include root.

    Returns the path as given when nothing matches, so opening it reports the error.
    """
    path = Path(name)
    if path.is_absolute() or path.exists():
        return path
    for root in get_include_roots():
        candidate = root / path
        if candidate.exists():
            return candidate
    return path
