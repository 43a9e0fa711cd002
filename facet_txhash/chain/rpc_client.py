"""
Ethereum JSON-RPC chain-data provider over httpx.

One provider per endpoint (L1 or L2). Each call is a single POST with no
retry: a transport error, an HTTP error status, a JSON-RPC error object or a
result that cannot be parsed fails the call with UpstreamError.
"""

from __future__ import annotations

import itertools
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import httpx
from eth_utils import decode_hex, encode_hex

from facet_txhash.chain.interfaces import LATEST
from facet_txhash.chain.models import BlockHeader, SourceTransaction, TransactionReceipt
from facet_txhash.config.env import ChainConfig, mask_rpc_url
from facet_txhash.core.exceptions import UpstreamError
from facet_txhash.txhash_logging import get_logger

logger = get_logger(__name__)


def _build_rpc_body(request_id: int, method: str, params: list[Any]) -> dict[str, Any]:
    return {
        "jsonrpc": "2.0",
        "id": request_id,
        "method": method,
        "params": params,
    }


class JsonRpcProvider:
    """
    ChainDataProvider backed by an Ethereum JSON-RPC endpoint.

    The httpx client is owned by the caller (see open_providers) so that the
    L1 and L2 providers of one request share a connection pool and timeout.
    """

    def __init__(self, rpc_url: str, client: httpx.AsyncClient, *, label: str = "rpc") -> None:
        if not rpc_url.strip():
            raise ValueError("rpc_url must be non-empty")
        self._rpc_url = rpc_url.rstrip("/")
        self._client = client
        self._label = label
        self._request_ids = itertools.count(1)

    async def _call(self, method: str, params: list[Any]) -> Any:
        """Perform one JSON-RPC call; raise UpstreamError on transport or RPC error."""
        body = _build_rpc_body(next(self._request_ids), method, params)
        try:
            resp = await self._client.post(self._rpc_url, json=body)
            resp.raise_for_status()
            data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(
                "rpc_request_failed",
                provider=self._label,
                method=method,
                rpc_url=mask_rpc_url(self._rpc_url),
                error=str(e),
            )
            raise UpstreamError(f"{self._label} RPC {method} failed: {e}") from e
        if not isinstance(data, dict):
            raise UpstreamError(f"{self._label} RPC {method} returned a non-object response")
        if "error" in data:
            err = data["error"] or {}
            message = err.get("message", err) if isinstance(err, dict) else err
            code = err.get("code") if isinstance(err, dict) else None
            raise UpstreamError(f"{self._label} RPC error: {message} (code={code})")
        return data.get("result")

    async def get_transaction(self, tx_hash: str) -> SourceTransaction | None:
        result = await self._call("eth_getTransactionByHash", [tx_hash])
        if result is None:
            return None
        return self._parse(SourceTransaction, result, "transaction")

    async def get_transaction_receipt(self, tx_hash: str) -> TransactionReceipt | None:
        result = await self._call("eth_getTransactionReceipt", [tx_hash])
        if result is None:
            return None
        return self._parse(TransactionReceipt, result, "receipt")

    async def get_block(self, block: str) -> BlockHeader:
        if block == LATEST:
            result = await self._call("eth_getBlockByNumber", [LATEST, False])
        else:
            result = await self._call("eth_getBlockByHash", [block, False])
        if result is None:
            raise UpstreamError(f"{self._label} RPC returned no block for {block}")
        return self._parse(BlockHeader, result, "block")

    async def read_contract_state(
        self, address: str, selector: bytes, block_number: int | None = None
    ) -> bytes:
        block_tag = LATEST if block_number is None else hex(block_number)
        result = await self._call(
            "eth_call",
            [{"to": address, "data": encode_hex(selector)}, block_tag],
        )
        if not isinstance(result, str):
            raise UpstreamError(f"{self._label} RPC eth_call returned no data")
        try:
            return decode_hex(result)
        except ValueError as e:
            raise UpstreamError(f"{self._label} RPC eth_call returned invalid hex: {e}") from e

    def _parse(self, model: Any, item: Any, what: str) -> Any:
        try:
            return model.from_rpc_item(item)
        except (KeyError, TypeError, ValueError) as e:
            raise UpstreamError(f"{self._label} RPC returned a malformed {what}: {e}") from e


@asynccontextmanager
async def open_providers(
    chain: ChainConfig, timeout_sec: float
) -> AsyncIterator[tuple[JsonRpcProvider, JsonRpcProvider]]:
    """Yield (l1, l2) providers for one request; the shared client closes on exit."""
    async with httpx.AsyncClient(timeout=httpx.Timeout(timeout_sec)) as client:
        yield (
            JsonRpcProvider(chain.l1_rpc_url, client, label="l1"),
            JsonRpcProvider(chain.l2_rpc_url, client, label="l2"),
        )
