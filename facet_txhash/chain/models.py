"""
Data models for chain-data provider output.

Normalized, immutable views of the JSON-RPC objects the derivation needs:
transactions, receipts with their logs, and block headers. Hex quantities are
parsed to int, hex data to bytes, addresses are kept as returned.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from eth_utils import decode_hex


def _quantity(value: Any) -> int:
    """Parse a JSON-RPC hex quantity ("0x1a") or a plain int."""
    if isinstance(value, int):
        return value
    return int(value, 16)


def _optional_quantity(value: Any) -> int | None:
    return None if value is None else _quantity(value)


@dataclass(frozen=True)
class SourceTransaction:
    """
    L1 transaction as returned by eth_getTransactionByHash.

    block_hash / block_number are None while the transaction is pending.
    """

    hash: str
    sender: str
    to: str | None  # None for contract creation
    input: bytes
    block_hash: str | None
    block_number: int | None

    @classmethod
    def from_rpc_item(cls, item: dict[str, Any]) -> "SourceTransaction":
        """Build from an eth_getTransactionByHash result object."""
        return cls(
            hash=item["hash"],
            sender=item["from"],
            to=item.get("to"),
            input=decode_hex(item.get("input") or "0x"),
            block_hash=item.get("blockHash"),
            block_number=_optional_quantity(item.get("blockNumber")),
        )


@dataclass(frozen=True)
class LogEntry:
    address: str
    topics: tuple[str, ...]
    data: bytes
    log_index: int | None = None

    @classmethod
    def from_rpc_item(cls, item: dict[str, Any]) -> "LogEntry":
        return cls(
            address=item["address"],
            topics=tuple(item.get("topics") or ()),
            data=decode_hex(item.get("data") or "0x"),
            log_index=_optional_quantity(item.get("logIndex")),
        )


@dataclass(frozen=True)
class TransactionReceipt:
    transaction_hash: str
    status: int | None
    logs: tuple[LogEntry, ...]

    @classmethod
    def from_rpc_item(cls, item: dict[str, Any]) -> "TransactionReceipt":
        """Build from an eth_getTransactionReceipt result object."""
        return cls(
            transaction_hash=item["transactionHash"],
            status=_optional_quantity(item.get("status")),
            logs=tuple(LogEntry.from_rpc_item(log) for log in item.get("logs") or ()),
        )


@dataclass(frozen=True)
class BlockHeader:
    """Block fields used by the mint-rate lookup (number and timestamp)."""

    number: int
    hash: str | None
    timestamp: int

    @classmethod
    def from_rpc_item(cls, item: dict[str, Any]) -> "BlockHeader":
        return cls(
            number=_quantity(item["number"]),
            hash=item.get("hash"),
            timestamp=_quantity(item["timestamp"]),
        )
