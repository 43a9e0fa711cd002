"""
Facet transaction hash.

The L2 transaction derived from an L1 submission is a deposit-style typed
transaction. Its hash, pinned byte for byte:

    source_hash = keccak256(uint256(0) ++ keccak256(l1_tx_hash ++ uint256(0)))
    payload     = 0x7E ++ rlp([source_hash, from, to or "", mint, value,
                               gas_limit, "" (not a system tx), data])
    hash        = keccak256(payload)

RLP integers are minimal big-endian (zero is the empty string).
"""

from __future__ import annotations

from typing import Callable

import rlp
from eth_utils import decode_hex, encode_hex, keccak, to_canonical_address

from facet_txhash.derivation.constants import DEPOSIT_TX_TYPE

USER_DEPOSIT_SOURCE_DOMAIN = 0
SOURCE_INDEX = 0

# (l1_tx_hash, from, to, value, data, gas_limit, mint) -> 0x-hex hash
HashDeriver = Callable[[str, str, str | None, int, bytes, int, int], str]


def compute_source_hash(l1_transaction_hash: str) -> bytes:
    inner = keccak(decode_hex(l1_transaction_hash) + SOURCE_INDEX.to_bytes(32, "big"))
    return keccak(USER_DEPOSIT_SOURCE_DOMAIN.to_bytes(32, "big") + inner)


def serialize_facet_transaction(
    l1_transaction_hash: str,
    from_address: str,
    to: str | None,
    value: int,
    data: bytes,
    gas_limit: int,
    fct_mint_amount: int,
) -> bytes:
    fields = [
        compute_source_hash(l1_transaction_hash),
        to_canonical_address(from_address),
        to_canonical_address(to) if to else b"",
        fct_mint_amount,
        value,
        gas_limit,
        b"",
        data,
    ]
    return bytes([DEPOSIT_TX_TYPE]) + rlp.encode(fields)


def compute_facet_transaction_hash(
    l1_transaction_hash: str,
    from_address: str,
    to: str | None,
    value: int,
    data: bytes,
    gas_limit: int,
    fct_mint_amount: int,
) -> str:
    """Return the 0x-prefixed 32-byte hash an L2 node assigns to the derived transaction."""
    payload = serialize_facet_transaction(
        l1_transaction_hash, from_address, to, value, data, gas_limit, fct_mint_amount
    )
    return encode_hex(keccak(payload))
