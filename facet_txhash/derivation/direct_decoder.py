"""
Direct envelope codec — calldata of a transaction sent to the Facet inbox.

Layout (one tag byte, then an RLP list of exactly six byte strings)::

    0x46 ++ rlp([chainId, to, value, gasLimit, data, mineBoost])

Integers are minimal big-endian strings (zero is the empty string), ``to`` is
empty (contract creation) or 20 bytes, ``mineBoost`` is an opaque byte string.
Only canonical encodings are accepted, so decoding and re-encoding with the
decoded chain id reproduces the calldata byte for byte.
"""

from __future__ import annotations

from dataclasses import dataclass

import rlp
from eth_utils import to_canonical_address, to_checksum_address

from facet_txhash.core.exceptions import MalformedEnvelope
from facet_txhash.derivation.constants import FACET_TX_TYPE

FIELD_COUNT = 6


@dataclass(frozen=True)
class DirectEnvelope:
    chain_id: int
    to: str | None
    value: int
    gas_limit: int
    data: bytes
    mine_boost: bytes | None


def _decode_uint(raw: bytes, name: str) -> int:
    if raw[:1] == b"\x00":
        raise MalformedEnvelope(f"Non-canonical {name} in Facet transaction")
    return int.from_bytes(raw, "big")


def _decode_to(raw: bytes) -> str | None:
    if not raw:
        return None
    if len(raw) != 20:
        raise MalformedEnvelope(f"Invalid to address length {len(raw)} in Facet transaction")
    return to_checksum_address(raw)


def decode_direct_envelope(raw: bytes) -> DirectEnvelope:
    """Decode inbox calldata; raise MalformedEnvelope on any layout mismatch."""
    if not raw:
        raise MalformedEnvelope("Empty Facet transaction input")
    if raw[0] != FACET_TX_TYPE:
        raise MalformedEnvelope(f"Unexpected Facet transaction type 0x{raw[0]:02x}")
    try:
        fields = rlp.decode(raw[1:])
    except rlp.DecodingError as e:
        raise MalformedEnvelope(f"Invalid RLP in Facet transaction: {e}") from e
    if not isinstance(fields, list) or len(fields) != FIELD_COUNT:
        raise MalformedEnvelope("Facet transaction must be an RLP list of 6 fields")
    if any(not isinstance(f, bytes) for f in fields):
        raise MalformedEnvelope("Facet transaction fields must be byte strings")

    chain_id, to, value, gas_limit, data, mine_boost = fields
    return DirectEnvelope(
        chain_id=_decode_uint(chain_id, "chainId"),
        to=_decode_to(to),
        value=_decode_uint(value, "value"),
        gas_limit=_decode_uint(gas_limit, "gasLimit"),
        data=data,
        mine_boost=mine_boost or None,
    )


def encode_direct_envelope(
    chain_id: int,
    to: str | None,
    value: int,
    gas_limit: int,
    data: bytes,
    mine_boost: bytes | None = None,
) -> bytes:
    """Serialize the fields back into the tagged inbox layout."""
    fields = [
        chain_id,
        to_canonical_address(to) if to else b"",
        value,
        gas_limit,
        data,
        mine_boost or b"",
    ]
    return bytes([FACET_TX_TYPE]) + rlp.encode(fields)
