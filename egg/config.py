from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List, Optional


def paths_from_env(var: str, defaults: Iterable[Path] = ()) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_prelude_files() -> List[Path]:
    """Egg source files named by EGG_PRELUDE_PATH; directories contribute their *.egg files."""
    files: List[Path] = []
    for p in paths_from_env('EGG_PRELUDE_PATH'):
        if p.is_dir():
            files.extend(sorted(p.glob('*.egg')))
        else:
            files.append(p)
    return files


def get_log_level() -> str:
    return os.environ.get('EGG_LOG_LEVEL', 'WARNING').upper()


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get('EGG_RECURSION_LIMIT')
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"EGG_RECURSION_LIMIT must be an integer, got {raw!r}") from None
