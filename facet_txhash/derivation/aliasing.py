"""
L1 -> L2 address aliasing.

A contract on L1 acts on L2 from its aliased address: the address plus a
fixed 160-bit offset, modulo 2**160. The same offset is used by the L2
execution environment, so L2 observers can undo it.
"""

from __future__ import annotations

from eth_utils import to_canonical_address, to_checksum_address

from facet_txhash.derivation.constants import ADDRESS_MODULUS, ALIAS_OFFSET


def _to_int(address: str | bytes) -> int:
    return int.from_bytes(to_canonical_address(address), "big")


def _from_int(value: int) -> str:
    return to_checksum_address(value.to_bytes(20, "big"))


def apply_l1_to_l2_alias(address: str | bytes) -> str:
    """Return the checksummed L2 alias of an L1 contract address."""
    return _from_int((_to_int(address) + ALIAS_OFFSET) % ADDRESS_MODULUS)


def undo_l1_to_l2_alias(address: str | bytes) -> str:
    """Inverse of apply_l1_to_l2_alias."""
    return _from_int((_to_int(address) - ALIAS_OFFSET) % ADDRESS_MODULUS)
