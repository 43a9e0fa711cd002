"""Routes an L1 transaction to the direct (inbox) or contract-event decoder."""

from __future__ import annotations

from enum import Enum

from facet_txhash.chain.models import SourceTransaction
from facet_txhash.derivation.constants import FACET_INBOX_ADDRESS


class EnvelopeKind(str, Enum):
    DIRECT = "direct"
    CONTRACT_EVENT = "event"


def classify(tx: SourceTransaction, inbox_address: str = FACET_INBOX_ADDRESS) -> EnvelopeKind:
    """Direct iff the recipient is the inbox (case-insensitive); anything else, creation included, is an event."""
    if tx.to is not None and tx.to.lower() == inbox_address.lower():
        return EnvelopeKind.DIRECT
    return EnvelopeKind.CONTRACT_EVENT
