"""Store configuration for pyreward."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyreward.exceptions import RewardConfigError

#: Greeting held by a freshly deployed store.
DEFAULT_GREETING: str = "Building Unstoppable Apps!!!"


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise RewardConfigError(f"{name} must be an integer, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class RewardConfig:
    """Store configuration.

    Parameters
    ----------
    default_greeting : str
        Greeting a new store starts with.
    enforce_owner : bool
        Reject writes whose caller is not the owner.  Disabled by
        default: any caller may overwrite the greeting.
    log_value_max_length : int
        Greeting values longer than this are truncated in debug logs.
    """

    default_greeting: str = DEFAULT_GREETING
    enforce_owner: bool = False
    log_value_max_length: int = 64

    def __post_init__(self) -> None:
        if not isinstance(self.default_greeting, str):
            raise RewardConfigError("default_greeting must be a string")
        if not isinstance(self.enforce_owner, bool):
            raise RewardConfigError("enforce_owner must be a bool")
        if isinstance(self.log_value_max_length, bool) or not isinstance(self.log_value_max_length, int):
            raise RewardConfigError("log_value_max_length must be an integer")
        if self.log_value_max_length < 1:
            raise RewardConfigError("log_value_max_length must be positive")

    @classmethod
    def from_env(cls, **overrides: Any) -> RewardConfig:
        """Create configuration from environment variables.

        Reads ``REWARD_DEFAULT_GREETING``, ``REWARD_ENFORCE_OWNER`` and
        ``REWARD_LOG_VALUE_MAX_LENGTH``.  Explicit keyword arguments
        override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        RewardConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        greeting_env = env.get("REWARD_DEFAULT_GREETING")
        if greeting_env is not None:
            config_kwargs["default_greeting"] = greeting_env

        if "enforce_owner" not in overrides:
            config_kwargs["enforce_owner"] = _env_bool(env.get("REWARD_ENFORCE_OWNER"), False)

        max_len_env = env.get("REWARD_LOG_VALUE_MAX_LENGTH")
        if max_len_env is not None and "log_value_max_length" not in overrides:
            config_kwargs["log_value_max_length"] = _env_int("REWARD_LOG_VALUE_MAX_LENGTH", max_len_env)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
