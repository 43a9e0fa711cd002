"""
Derive the Facet transaction for one L1 transaction and print it as JSON.

Usage:
  python -m facet_txhash.tools.derive_hash --tx-hash 0x... --chain-id 1

Prints canonical fields, mint rate, L2 block used for the rate and the hash.
Exit code 1 on any failure (message on stderr).
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from facet_txhash.chain.rpc_client import open_providers
from facet_txhash.config import get_settings
from facet_txhash.core.exceptions import FacetTxHashError
from facet_txhash.derivation.models import DerivationResult
from facet_txhash.derivation.pipeline import derive_facet_transaction
from facet_txhash.txhash_logging import logs_to_stderr


async def _derive(tx_hash: str, chain_id: int) -> DerivationResult:
    settings = get_settings()
    chain = settings.chain(chain_id)
    async with open_providers(chain, settings.rpc_timeout_sec) as (l1, l2):
        return await derive_facet_transaction(
            tx_hash,
            chain,
            l1,
            l2,
            inbox_address=settings.inbox_address,
            block_time=settings.l2_block_time_sec,
        )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Derive the Facet transaction hash for an L1 transaction")
    parser.add_argument("--tx-hash", required=True, help="L1 transaction hash (0x...)")
    parser.add_argument("--chain-id", type=int, default=1, help="L1 chain id (1 or 11155111)")
    args = parser.parse_args(argv)

    try:
        with logs_to_stderr():
            result = asyncio.run(_derive(args.tx_hash.strip().lower(), args.chain_id))
    except FacetTxHashError as e:
        print(f"error ({e.status_code}): {e.message}", file=sys.stderr)
        return 1
    print(json.dumps(result.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
