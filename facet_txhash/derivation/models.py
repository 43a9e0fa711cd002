"""
Derived Facet transaction models.

CanonicalTransaction is built once from the decoded envelope; the mint amount
is filled in a second pass once the historical mint rate is known.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from eth_utils import encode_hex

from facet_txhash.derivation.classifier import EnvelopeKind


@dataclass(frozen=True)
class CanonicalTransaction:
    """Fields of the L2 transaction an L2 node derives from one L1 submission."""

    kind: EnvelopeKind
    from_address: str
    to: str | None
    """None means contract creation; never the zero address."""
    value: int
    data: bytes
    gas_limit: int
    mine_boost: bytes | None = None
    fct_mint_amount: int | None = None

    def with_mint_amount(self, amount: int) -> "CanonicalTransaction":
        return replace(self, fct_mint_amount=amount)

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable view; big integers as decimal strings."""
        return {
            "kind": self.kind.value,
            "from": self.from_address,
            "to": self.to,
            "value": str(self.value),
            "data": encode_hex(self.data),
            "gasLimit": str(self.gas_limit),
            "mineBoost": encode_hex(self.mine_boost) if self.mine_boost else None,
            "fctMintAmount": None if self.fct_mint_amount is None else str(self.fct_mint_amount),
        }


@dataclass(frozen=True)
class DerivationResult:
    l1_transaction_hash: str
    l1_chain_id: int
    transaction: CanonicalTransaction
    mint_rate: int
    l2_block_number: int
    """L2 block the mint rate was read at."""
    facet_transaction_hash: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "l1TransactionHash": self.l1_transaction_hash,
            "chainId": self.l1_chain_id,
            "transaction": self.transaction.to_dict(),
            "mintRate": str(self.mint_rate),
            "l2BlockNumber": self.l2_block_number,
            "facetTransactionHash": self.facet_transaction_hash,
        }
