"""
Event envelope decoder — Facet submissions emitted as a log by an L1 contract.

The log has exactly one topic, the Facet event signature; its data is a tag
byte (0x46, not checked) followed by an RLP list
``[_, to, value, gasLimit, data, _, ...]``. The transaction sender on L2 is
the aliased address of the emitting contract.
"""

from __future__ import annotations

from dataclasses import dataclass

import rlp
from eth_utils import to_checksum_address

from facet_txhash.chain.models import LogEntry, TransactionReceipt
from facet_txhash.core.exceptions import InvalidRlpPayload, NoFacetEvent
from facet_txhash.derivation.aliasing import apply_l1_to_l2_alias
from facet_txhash.derivation.constants import FACET_EVENT_SIGNATURE

MIN_FIELD_COUNT = 6


@dataclass(frozen=True)
class EventEnvelope:
    from_address: str
    to: str | None
    value: int
    gas_limit: int
    data: bytes
    payload: bytes
    """Full log data, tag byte included; the mint amount is charged on it."""


def find_facet_event(
    receipt: TransactionReceipt, signature: str = FACET_EVENT_SIGNATURE
) -> LogEntry:
    """Return the first log whose only topic is the Facet signature."""
    for log in receipt.logs:
        if len(log.topics) == 1 and log.topics[0].lower() == signature.lower():
            return log
    raise NoFacetEvent("No Facet event found in transaction")


def _decode_to(raw: bytes) -> str | None:
    # Empty (or single-byte) means contract creation, never the zero address
    if len(raw) <= 1:
        return None
    if len(raw) != 20:
        raise InvalidRlpPayload(f"Invalid to address length {len(raw)} in Facet event")
    return to_checksum_address(raw)


def _decode_uint(raw: bytes) -> int:
    return int.from_bytes(raw, "big") if raw else 0


def decode_event_payload(log: LogEntry) -> EventEnvelope:
    """Decode a Facet event log into transaction fields."""
    payload = log.data
    try:
        decoded = rlp.decode(payload[1:], strict=False)
    except rlp.DecodingError as e:
        raise InvalidRlpPayload("Invalid RLP data in Facet event") from e
    if not isinstance(decoded, list) or len(decoded) < MIN_FIELD_COUNT:
        raise InvalidRlpPayload("Invalid RLP data in Facet event")
    to, value, gas_limit, data = decoded[1:5]
    if not all(isinstance(f, bytes) for f in (to, value, gas_limit, data)):
        raise InvalidRlpPayload("Invalid RLP data in Facet event")

    return EventEnvelope(
        from_address=apply_l1_to_l2_alias(log.address),
        to=_decode_to(to),
        value=_decode_uint(value),
        gas_limit=_decode_uint(gas_limit),
        data=data,
        payload=payload,
    )
