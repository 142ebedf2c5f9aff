# state_space/core/config.py
# Runtime tunables, read from environment variables the same way the benchmark runner reads its knobs.
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_MAX_EXPANSIONS = "STATE_SPACE_MAX_EXPANSIONS"
ENV_SEED = "STATE_SPACE_SEED"
ENV_TRACE_MEMORY = "STATE_SPACE_TRACE_MEMORY"
ENV_LOG_LEVEL = "STATE_SPACE_LOG_LEVEL"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    max_expansions: Optional[int] = None
    seed: Optional[int] = None
    trace_memory: bool = True
    log_level: str = "WARNING"


def _int_or_none(env: Mapping[str, str], name: str) -> Optional[int]:
    raw = env.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if env is None else env
    max_expansions = _int_or_none(env, ENV_MAX_EXPANSIONS)
    if max_expansions is not None and max_expansions < 0:
        raise ValueError(f"{ENV_MAX_EXPANSIONS} must be >= 0, got {max_expansions}")

    level = env.get(ENV_LOG_LEVEL, "").strip().upper() or "WARNING"
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{ENV_LOG_LEVEL} is not a logging level: {level!r}")

    return Settings(
        max_expansions=max_expansions,
        seed=_int_or_none(env, ENV_SEED),
        trace_memory=_flag(env, ENV_TRACE_MEMORY, True),
        log_level=level,
    )


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
