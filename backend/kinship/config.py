from __future__ import annotations

import os
from dataclasses import dataclass


def _i(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return default


def _s(name: str, default: str) -> str:
    value = os.getenv(name)
    return value.strip().upper() if value and value.strip() else default


@dataclass(frozen=True)
class ResolverSettings:
    # Deep enough for 2nd cousin with an in-law, step or co modifier
    max_depth: int = _i("KINSHIP_MAX_DEPTH", 8)
    # Hard stop for enumeration in densely connected graphs
    max_paths: int = _i("KINSHIP_MAX_PATHS", 10_000)

    log_level: str = _s("KINSHIP_LOG_LEVEL", "INFO")


SETTINGS = ResolverSettings()
