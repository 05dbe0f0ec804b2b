from __future__ import annotations

import logging
import os

_FALSE_TOKENS = frozenset({"0", "false", "no", "off"})


def _parse_level(raw: str | None, default: int) -> int:
    if raw is None or not raw.strip():
        return default
    token = raw.strip()
    if token.lstrip("-").isdigit():
        return int(token)
    level = logging.getLevelName(token.upper())
    # getLevelName returns "Level X" for unknown names.
    if isinstance(level, int):
        return level
    return default


class Runtime:
    def __init__(
        self,
        *,
        env_prefix: str = "CACHEMATRIX",
        default_log_level: int = logging.INFO,
    ) -> None:
        self._env_prefix = env_prefix
        self._default_log_level = default_log_level
        self._log_level_cache: int | None = None
        self._warn_params_cache: bool | None = None

    def _env(self, name: str) -> str | None:
        return os.environ.get(f"{self._env_prefix}_{name}")

    def log_level(self) -> int:
        """Level used for the cache-hit record."""
        if self._log_level_cache is not None:
            return self._log_level_cache

        self._log_level_cache = _parse_level(self._env("LOG_LEVEL"), self._default_log_level)
        return self._log_level_cache

    def warn_on_param_mismatch(self) -> bool:
        if self._warn_params_cache is not None:
            return self._warn_params_cache

        raw = self._env("WARN_PARAMS")
        if raw is None:
            enabled = True
        else:
            enabled = raw.strip().lower() not in _FALSE_TOKENS
        self._warn_params_cache = enabled
        return enabled

    def reset(self) -> None:
        self._log_level_cache = None
        self._warn_params_cache = None


runtime = Runtime()
