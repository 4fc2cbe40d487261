import os
from dataclasses import dataclass
from functools import cache

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)

    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class LockstepConfig:
    """Process-wide settings, read from the environment."""

    debug: bool = False  # LOCKSTEP_DEBUG

    @classmethod
    def from_env(cls) -> "LockstepConfig":
        return cls(debug=_env_flag("LOCKSTEP_DEBUG"))


@cache
def get_config() -> LockstepConfig:
    return LockstepConfig.from_env()


def reset_config():
    """forget the cached config so the environment is read again"""
    get_config.cache_clear()
