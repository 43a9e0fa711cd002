"""
Configuration management for the Facet transaction hash service.

Loads and validates settings from environment variables and the optional .env
file. Exposes a single source of truth for service configuration, including
the chain table keyed by L1 chain id.
"""

from facet_txhash.config.env import CHAINS, ChainConfig, get_chain_table  # noqa: F401
from facet_txhash.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["CHAINS", "ChainConfig", "Settings", "get_chain_table", "get_settings"]
