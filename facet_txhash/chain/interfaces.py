"""
Capability interface for read-only chain data.

The derivation pipeline talks to L1 and L2 only through this protocol, so a
JSON-RPC backend, another client library or an in-memory test double can be
substituted without touching the core.
"""

from __future__ import annotations

from typing import Protocol

from facet_txhash.chain.models import BlockHeader, SourceTransaction, TransactionReceipt

LATEST = "latest"


class ChainDataProvider(Protocol):
    async def get_transaction(self, tx_hash: str) -> SourceTransaction | None:
        """Return the transaction, or None when the node does not know it."""
        ...

    async def get_transaction_receipt(self, tx_hash: str) -> TransactionReceipt | None:
        """Return the receipt, or None when the transaction is unknown or pending."""
        ...

    async def get_block(self, block: str) -> BlockHeader:
        """Return a block by hash, or the head block for ``"latest"``."""
        ...

    async def read_contract_state(
        self, address: str, selector: bytes, block_number: int | None = None
    ) -> bytes:
        """eth_call ``selector`` (no arguments) on ``address`` at ``block_number`` (None = latest)."""
        ...
