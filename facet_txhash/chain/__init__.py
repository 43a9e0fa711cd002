"""
Chain-data access — read-only L1/L2 providers consumed by the derivation core.

The core depends only on the ChainDataProvider protocol; JsonRpcProvider is
the production implementation over Ethereum JSON-RPC.
"""

from facet_txhash.chain.interfaces import ChainDataProvider
from facet_txhash.chain.models import BlockHeader, LogEntry, SourceTransaction, TransactionReceipt
from facet_txhash.chain.rpc_client import JsonRpcProvider, open_providers

__all__ = [
    "BlockHeader",
    "ChainDataProvider",
    "JsonRpcProvider",
    "LogEntry",
    "SourceTransaction",
    "TransactionReceipt",
    "open_providers",
]
