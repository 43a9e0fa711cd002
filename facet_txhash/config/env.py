"""
Environment loading and the chain table for the Facet transaction hash service.

- L1_RPC_URL_<chainId>: L1 JSON-RPC endpoint for that L1 chain (e.g. L1_RPC_URL_1)
- L2_RPC_URL_<chainId>: Facet JSON-RPC endpoint paired with that L1 chain
- Loads .env from project root when available.

Supported networks are rows in CHAINS keyed by L1 chain id; adding a network
means adding a row, not a branch.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is facet_txhash/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

MAINNET_CHAIN_ID = 1
SEPOLIA_CHAIN_ID = 11155111

FACET_MAINNET_CHAIN_ID = 0xFACE7
FACET_SEPOLIA_CHAIN_ID = 0xFACE7A


@dataclass(frozen=True)
class ChainConfig:
    """One supported network: an L1 chain and the Facet chain derived from it."""

    l1_chain_id: int
    name: str
    l1_rpc_url: str
    l2_chain_id: int
    l2_rpc_url: str


CHAINS: dict[int, ChainConfig] = {
    MAINNET_CHAIN_ID: ChainConfig(
        l1_chain_id=MAINNET_CHAIN_ID,
        name="mainnet",
        l1_rpc_url="https://ethereum-rpc.publicnode.com",
        l2_chain_id=FACET_MAINNET_CHAIN_ID,
        l2_rpc_url="https://mainnet.facet.org",
    ),
    SEPOLIA_CHAIN_ID: ChainConfig(
        l1_chain_id=SEPOLIA_CHAIN_ID,
        name="sepolia",
        l1_rpc_url="https://ethereum-sepolia-rpc.publicnode.com",
        l2_chain_id=FACET_SEPOLIA_CHAIN_ID,
        l2_rpc_url="https://sepolia.facet.org",
    ),
}


def load_txhash_env() -> None:
    """Load .env from project root. Safe to call multiple times."""
    load_dotenv(_ENV_PATH)


def get_chain_table() -> dict[int, ChainConfig]:
    """
    Return the chain table with RPC URLs overridden from env.

    Order per row: L1_RPC_URL_<id> / L2_RPC_URL_<id> > built-in default.
    """
    load_txhash_env()
    table: dict[int, ChainConfig] = {}
    for chain_id, chain in CHAINS.items():
        l1_url = (os.getenv(f"L1_RPC_URL_{chain_id}") or "").strip() or chain.l1_rpc_url
        l2_url = (os.getenv(f"L2_RPC_URL_{chain_id}") or "").strip() or chain.l2_rpc_url
        table[chain_id] = replace(chain, l1_rpc_url=l1_url, l2_rpc_url=l2_url)
    return table


def mask_rpc_url(url: str) -> str:
    """Hide API keys embedded in provider URLs before logging them."""
    if "api-key=" in url:
        return url.split("api-key=")[0] + "api-key=***"
    if "/v2/" in url:
        return url.split("/v2/")[0] + "/v2/***"
    return url
