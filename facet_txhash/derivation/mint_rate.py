"""
Historical FCT mint-rate lookup on L2.

The mint rate drifts, so it is read at the L2 block that was current when the
L1 transaction was included, not at the tip. That block is approximated from
timestamps with a constant L2 block time:

    target = tip_number - floor((tip_timestamp - l1_timestamp) / block_time)

The constant spacing is an approximation: if real L2 spacing drifted since
the source transaction the selected block can be off by a few. The state
read at the target block is not retried and never falls back to the tip.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from eth_abi import decode as abi_decode
from eth_abi.exceptions import DecodingError as AbiDecodingError
from eth_utils import function_signature_to_4byte_selector

from facet_txhash.chain.interfaces import LATEST, ChainDataProvider
from facet_txhash.chain.models import BlockHeader, SourceTransaction
from facet_txhash.core.exceptions import NotFoundError, ProtocolError, UpstreamError
from facet_txhash.derivation.constants import L1_BLOCK_CONTRACT, L2_BLOCK_TIME
from facet_txhash.txhash_logging import get_logger

logger = get_logger(__name__)

FCT_MINT_RATE_SELECTOR = function_signature_to_4byte_selector("fctMintRate()")


@dataclass(frozen=True)
class MintRateLookup:
    mint_rate: int
    target_block: int
    l1_timestamp: int
    l2_tip_number: int
    l2_tip_timestamp: int


def resolve_target_block(
    l1_timestamp: int,
    tip_number: int,
    tip_timestamp: int,
    block_time: int = L2_BLOCK_TIME,
) -> int:
    """Estimate the L2 block height in effect at ``l1_timestamp``."""
    elapsed = tip_timestamp - l1_timestamp
    return tip_number - elapsed // block_time


async def read_fct_mint_rate(l2: ChainDataProvider, block_number: int | None = None) -> int:
    """Read fctMintRate() (uint128) from the L1 block predeploy; None reads the latest block."""
    raw = await l2.read_contract_state(L1_BLOCK_CONTRACT, FCT_MINT_RATE_SELECTOR, block_number)
    try:
        (rate,) = abi_decode(["uint128"], raw)
    except AbiDecodingError as e:
        raise UpstreamError(f"Could not decode fctMintRate result: {e}") from e
    return int(rate)


async def _fetch_block_pair(
    l1: ChainDataProvider, l2: ChainDataProvider, l1_block_hash: str
) -> tuple[BlockHeader, BlockHeader]:
    """Fetch the containing L1 block and the L2 head concurrently; one failure cancels the other."""
    tasks = [
        asyncio.ensure_future(l1.get_block(l1_block_hash)),
        asyncio.ensure_future(l2.get_block(LATEST)),
    ]
    try:
        l1_block, tip = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        # let cancelled reads unwind before the caller closes the shared client
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
    return l1_block, tip


async def lookup_mint_rate(
    tx: SourceTransaction,
    l1: ChainDataProvider,
    l2: ChainDataProvider,
    block_time: int = L2_BLOCK_TIME,
) -> MintRateLookup:
    """Resolve the L2 block matching the transaction's L1 inclusion time and read the rate there."""
    if tx.block_hash is None:
        raise NotFoundError("Transaction is not yet included in a block")

    l1_block, tip = await _fetch_block_pair(l1, l2, tx.block_hash)

    target = resolve_target_block(l1_block.timestamp, tip.number, tip.timestamp, block_time)
    if target < 0:
        raise ProtocolError("Source transaction predates the L2 chain")

    rate = await read_fct_mint_rate(l2, target)
    logger.debug(
        "mint_rate_resolved",
        l1_tx_hash=tx.hash,
        l1_timestamp=l1_block.timestamp,
        l2_tip=tip.number,
        target_block=target,
        mint_rate=rate,
    )
    return MintRateLookup(
        mint_rate=rate,
        target_block=target,
        l1_timestamp=l1_block.timestamp,
        l2_tip_number=tip.number,
        l2_tip_timestamp=tip.timestamp,
    )
