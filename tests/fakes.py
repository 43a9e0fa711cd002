"""
In-memory chain-data providers and scenario builders shared by the tests.

FakeChainProvider implements the ChainDataProvider protocol from dicts, and
records every call so tests can assert which block the mint rate was read at.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

import rlp
from eth_abi import encode as abi_encode
from eth_utils import keccak

from facet_txhash.chain.models import BlockHeader, LogEntry, SourceTransaction, TransactionReceipt
from facet_txhash.core.exceptions import UpstreamError

INBOX = "0x00000000000000000000000000000000000FacE7"
SENTINEL = "0x00000000000000000000000000000000000000000000000000000000000face7"
FACET_MAINNET_CHAIN_ID = 0xFACE7

L1_TX_HASH = "0x" + "ab" * 32
L1_BLOCK_HASH = "0x" + "cd" * 32
SENDER = "0x" + "11" * 20
EMITTER = "0x" + "22" * 20
SOME_CONTRACT = "0x" + "33" * 20
TARGET = "0x" + "aa" * 20

L1_TIMESTAMP = 1_700_000_000
L2_TIP_NUMBER = 1_000_000
# 100 whole L2 blocks (plus 5 s) after the L1 block
L2_TIP_TIMESTAMP = L1_TIMESTAMP + 100 * 12 + 5
TARGET_BLOCK = L2_TIP_NUMBER - 100
MINT_RATE = 10**12


class FakeChainProvider:
    def __init__(
        self,
        *,
        transactions: dict[str, SourceTransaction] | None = None,
        receipts: dict[str, TransactionReceipt] | None = None,
        blocks: dict[str, BlockHeader] | None = None,
        latest: BlockHeader | None = None,
        mint_rates: dict[int | None, int] | None = None,
        state_error: Exception | None = None,
    ) -> None:
        self.transactions = transactions or {}
        self.receipts = receipts or {}
        self.blocks = blocks or {}
        self.latest = latest
        self.mint_rates = mint_rates or {}
        self.state_error = state_error
        self.calls: list[tuple[str, Any]] = []

    async def get_transaction(self, tx_hash: str) -> SourceTransaction | None:
        self.calls.append(("get_transaction", tx_hash))
        return self.transactions.get(tx_hash)

    async def get_transaction_receipt(self, tx_hash: str) -> TransactionReceipt | None:
        self.calls.append(("get_transaction_receipt", tx_hash))
        return self.receipts.get(tx_hash)

    async def get_block(self, block: str) -> BlockHeader:
        self.calls.append(("get_block", block))
        if block == "latest" and self.latest is not None:
            return self.latest
        if block in self.blocks:
            return self.blocks[block]
        raise UpstreamError(f"no block {block}")

    async def read_contract_state(
        self, address: str, selector: bytes, block_number: int | None = None
    ) -> bytes:
        self.calls.append(("read_contract_state", (address, selector, block_number)))
        if self.state_error is not None:
            raise self.state_error
        if block_number not in self.mint_rates:
            raise UpstreamError(f"header not found for block {block_number}")
        return abi_encode(["uint128"], [self.mint_rates[block_number]])

    def state_reads(self) -> list[tuple[str, bytes, int | None]]:
        return [args for name, args in self.calls if name == "read_contract_state"]


def fake_provider_factory(l1: FakeChainProvider, l2: FakeChainProvider):
    """Stand-in for open_providers yielding the given fakes."""

    @asynccontextmanager
    async def factory(chain, timeout_sec):
        yield l1, l2

    return factory


def direct_input(
    chain_id: int = FACET_MAINNET_CHAIN_ID,
    to: bytes = bytes.fromhex("aa" * 20),
    value: bytes = (10**18).to_bytes(8, "big"),
    gas_limit: bytes = (21000).to_bytes(2, "big"),
    data: bytes = b"",
    mine_boost: bytes = b"",
) -> bytes:
    """Inbox calldata built directly from raw RLP fields."""
    chain = chain_id.to_bytes((chain_id.bit_length() + 7) // 8, "big")
    return b"\x46" + rlp.encode([chain, to, value, gas_limit, data, mine_boost])


def event_payload(fields: list[Any] | None = None, tag: bytes = b"\x46") -> bytes:
    if fields is None:
        fields = [b"\x01", b"", b"", b"\x52\x08", b"\xab\xcd\xef", b""]
    return tag + rlp.encode(fields)


def facet_log(data: bytes, address: str = EMITTER, topics: tuple[str, ...] = (SENTINEL,)) -> LogEntry:
    return LogEntry(address=address, topics=topics, data=data, log_index=0)


def l1_transaction(to: str | None, input_data: bytes = b"", block_hash: str | None = L1_BLOCK_HASH):
    return SourceTransaction(
        hash=L1_TX_HASH,
        sender=SENDER,
        to=to,
        input=input_data,
        block_hash=block_hash,
        block_number=None if block_hash is None else 19_000_000,
    )


def l1_provider(tx: SourceTransaction | None, receipt: TransactionReceipt | None = None) -> FakeChainProvider:
    return FakeChainProvider(
        transactions={L1_TX_HASH: tx} if tx is not None else {},
        receipts={L1_TX_HASH: receipt} if receipt is not None else {},
        blocks={L1_BLOCK_HASH: BlockHeader(number=19_000_000, hash=L1_BLOCK_HASH, timestamp=L1_TIMESTAMP)},
    )


def l2_provider(**kwargs: Any) -> FakeChainProvider:
    kwargs.setdefault("mint_rates", {TARGET_BLOCK: MINT_RATE})
    return FakeChainProvider(
        latest=BlockHeader(number=L2_TIP_NUMBER, hash="0x" + "ef" * 32, timestamp=L2_TIP_TIMESTAMP),
        **kwargs,
    )


def expected_facet_hash(
    l1_tx_hash: str,
    sender: str,
    to: str | None,
    value: int,
    data: bytes,
    gas_limit: int,
    mint: int,
) -> str:
    """Facet deposit hash assembled field by field from the pinned layout."""
    source_hash = keccak(bytes(32) + keccak(bytes.fromhex(l1_tx_hash[2:]) + bytes(32)))
    body = rlp.encode(
        [
            source_hash,
            bytes.fromhex(sender[2:]),
            bytes.fromhex(to[2:]) if to else b"",
            mint,
            value,
            gas_limit,
            b"",
            data,
        ]
    )
    return "0x" + keccak(b"\x7e" + body).hex()


def calldata_gas(data: bytes) -> int:
    return sum(4 if b == 0 else 16 for b in data)
