"""
FCT mint accounting.

Two formulas, matching what L2 computed historically for each path:

- direct: calldata-style cost of the re-encoded Facet transaction
  (4 gas per zero byte, 16 per non-zero byte) times the mint rate;
- event: flat 8 gas per byte of the whole log data times the mint rate.

They are deliberately kept as separate functions.
"""

from __future__ import annotations

from facet_txhash.derivation.constants import EVENT_BYTE_GAS, NONZERO_BYTE_GAS, ZERO_BYTE_GAS
from facet_txhash.derivation.direct_decoder import DirectEnvelope, encode_direct_envelope
from facet_txhash.derivation.event_decoder import EventEnvelope


def calculate_input_gas_cost(data: bytes) -> int:
    zero_bytes = data.count(0)
    return zero_bytes * ZERO_BYTE_GAS + (len(data) - zero_bytes) * NONZERO_BYTE_GAS


def direct_mint_amount(envelope: DirectEnvelope, l2_chain_id: int, mint_rate: int) -> int:
    """Mint for an inbox submission; the payload is re-encoded with the configured L2 chain id."""
    encoded = encode_direct_envelope(
        l2_chain_id,
        envelope.to,
        envelope.value,
        envelope.gas_limit,
        envelope.data,
        envelope.mine_boost,
    )
    return calculate_input_gas_cost(encoded) * mint_rate


def event_mint_amount(envelope: EventEnvelope, mint_rate: int) -> int:
    return len(envelope.payload) * EVENT_BYTE_GAS * mint_rate
