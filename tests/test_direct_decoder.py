"""
Tests for the direct (inbox calldata) envelope codec.
"""

from __future__ import annotations

import pytest
import rlp

from fakes import FACET_MAINNET_CHAIN_ID, direct_input
from facet_txhash.core.exceptions import MalformedEnvelope
from facet_txhash.derivation.direct_decoder import decode_direct_envelope, encode_direct_envelope

ROUND_TRIP_INPUTS = [
    direct_input(),
    direct_input(to=b"", value=b"", gas_limit=b"", data=b""),
    direct_input(data=bytes.fromhex("a9059cbb" + "00" * 31 + "7d"), mine_boost=b"\x01\x02"),
    direct_input(chain_id=0xFACE7A, value=b"\x01", gas_limit=(5_000_000).to_bytes(3, "big")),
    direct_input(data=b"\x00" * 200),
]


def test_decode_scenario_a_fields():
    """to=0xAA..AA, value=1e18, gasLimit=21000, empty data."""
    env = decode_direct_envelope(direct_input())
    assert env.chain_id == FACET_MAINNET_CHAIN_ID
    assert env.to.lower() == "0x" + "aa" * 20
    assert env.value == 10**18
    assert env.gas_limit == 21000
    assert env.data == b""
    assert env.mine_boost is None


def test_empty_to_is_contract_creation():
    env = decode_direct_envelope(direct_input(to=b""))
    assert env.to is None


def test_empty_integers_are_zero():
    env = decode_direct_envelope(direct_input(value=b"", gas_limit=b""))
    assert env.value == 0
    assert env.gas_limit == 0


@pytest.mark.parametrize("raw", ROUND_TRIP_INPUTS)
def test_decode_then_encode_reproduces_input(raw):
    """Re-encoding the decoded fields with the tag byte gives identical bytes."""
    env = decode_direct_envelope(raw)
    encoded = encode_direct_envelope(
        env.chain_id, env.to, env.value, env.gas_limit, env.data, env.mine_boost
    )
    assert encoded == raw


def test_encode_uses_empty_strings_for_absent_fields():
    encoded = encode_direct_envelope(FACET_MAINNET_CHAIN_ID, None, 0, 0, b"", None)
    assert encoded[0] == 0x46
    fields = rlp.decode(encoded[1:])
    assert fields[1:] == [b"", b"", b"", b"", b""]


@pytest.mark.parametrize(
    "raw, message",
    [
        (b"", "Empty"),
        (b"\x45" + direct_input()[1:], "Unexpected Facet transaction type"),
        (b"\x46", "Invalid RLP"),
        (b"\x46" + rlp.encode(b"not a list"), "6 fields"),
        (b"\x46" + rlp.encode([b"\x01", b"", b"", b"", b""]), "6 fields"),
        (b"\x46" + rlp.encode([b"\x01", b"", b"", b"", b"", b"", b""]), "6 fields"),
        (b"\x46" + rlp.encode([b"\x01", [b""], b"", b"", b"", b""]), "byte strings"),
        (direct_input(to=b"\xaa" * 19), "to address length"),
        (direct_input(value=b"\x00\x01"), "Non-canonical value"),
        (direct_input(gas_limit=b"\x00"), "Non-canonical gasLimit"),
        (direct_input() + b"\x00", "Invalid RLP"),
    ],
)
def test_malformed_envelopes(raw, message):
    with pytest.raises(MalformedEnvelope, match=message):
        decode_direct_envelope(raw)


def test_malformed_envelope_is_client_error():
    with pytest.raises(MalformedEnvelope) as excinfo:
        decode_direct_envelope(b"\x00")
    assert excinfo.value.status_code == 400
