from __future__ import annotations
import os
from dataclasses import dataclass
from functools import lru_cache


def _env_flag(name: str, default: str) -> bool:
    return (os.getenv(name, default) or default).strip().lower() not in ("0", "false", "no", "off", "")


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name, "") or "").strip()
    if not raw:
        return default
    value = int(raw)
    if value < 1:
        raise ValueError(f"{name} must be a positive integer, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    parallel: bool
    workers: int
    rounds: int
    max_rounds: int
    max_bits: int
    release_gil: bool

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            parallel=_env_flag("MRPRIME_PARALLEL", "1"),
            workers=_env_int("MRPRIME_WORKERS", os.cpu_count() or 1),
            rounds=_env_int("MRPRIME_ROUNDS", 16),
            max_rounds=_env_int("MRPRIME_MAX_ROUNDS", 256),
            max_bits=_env_int("MRPRIME_MAX_BITS", 8192),
            release_gil=_env_flag("MRPRIME_RELEASE_GIL", "1"),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings read once from the environment; call ``get_settings.cache_clear()`` to reload."""
    return Settings.from_env()
