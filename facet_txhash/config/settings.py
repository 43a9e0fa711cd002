"""
Application settings and environment configuration.

Loads settings from environment variables (and .env via env.py), validates
them and exposes a typed, immutable Settings object for the API server, the
CLI tools and the derivation pipeline.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from facet_txhash.config.env import ChainConfig, get_chain_table, load_txhash_env
from facet_txhash.core.exceptions import ConfigurationError, ValidationError
from facet_txhash.derivation.constants import FACET_INBOX_ADDRESS, L2_BLOCK_TIME


@dataclass(frozen=True)
class Settings:
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "info"
    rpc_timeout_sec: float = 30.0
    l2_block_time_sec: int = L2_BLOCK_TIME
    inbox_address: str = FACET_INBOX_ADDRESS
    chains: dict[int, ChainConfig] = field(default_factory=dict)

    def chain(self, l1_chain_id: int) -> ChainConfig:
        """Return the chain row for an L1 chain id; unknown ids are a request error."""
        try:
            return self.chains[l1_chain_id]
        except KeyError:
            raise ValidationError("Invalid chainId") from None


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    try:
        return int(raw) if raw else default
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def _env_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    try:
        return float(raw) if raw else default
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None


def get_settings() -> Settings:
    """
    Return the current application settings.

    Read on every call so tests and tools can change the environment;
    the values are cheap to build.
    """
    load_txhash_env()
    block_time = _env_int("L2_BLOCK_TIME_SEC", L2_BLOCK_TIME)
    if block_time <= 0:
        raise ConfigurationError("L2_BLOCK_TIME_SEC must be positive")
    timeout = _env_float("RPC_TIMEOUT_SEC", 30.0)
    if timeout <= 0:
        raise ConfigurationError("RPC_TIMEOUT_SEC must be positive")
    return Settings(
        api_host=(os.getenv("API_HOST") or "0.0.0.0").strip(),
        api_port=_env_int("API_PORT", 8000),
        log_level=(os.getenv("LOG_LEVEL") or "info").strip().lower(),
        rpc_timeout_sec=timeout,
        l2_block_time_sec=block_time,
        inbox_address=(os.getenv("FACET_INBOX_ADDRESS") or FACET_INBOX_ADDRESS).strip(),
        chains=get_chain_table(),
    )
