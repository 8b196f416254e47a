"""Application configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

DEFAULT_ENV_FILES: tuple[str, ...] = (".env", ".env.local")


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = Path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files in order; later files win."""
    for path in tuple(paths) if paths is not None else DEFAULT_ENV_FILES:
        load_env_file(path, override_existing=override_existing)


def _int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


DEFAULT_STRATEGY = "probability"
DEFAULT_MAX_TURNS = 100


@dataclass(frozen=True, slots=True)
class TargetingSettings:
    """Targeting run settings sourced from environment."""

    strategy: str = DEFAULT_STRATEGY
    seed: int | None = None
    max_turns: int = DEFAULT_MAX_TURNS

    @classmethod
    def from_env(cls) -> TargetingSettings:
        strategy = os.getenv("BATTLEGROUP_STRATEGY", "").strip().lower() or DEFAULT_STRATEGY
        max_turns = _int("BATTLEGROUP_MAX_TURNS", DEFAULT_MAX_TURNS)
        return cls(
            strategy=strategy,
            seed=_int("BATTLEGROUP_SEED", None),
            max_turns=max_turns if max_turns and max_turns > 0 else DEFAULT_MAX_TURNS,
        )
