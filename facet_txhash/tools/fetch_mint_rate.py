"""
Print the FCT mint rate of a Facet network.

Usage:
  python -m facet_txhash.tools.fetch_mint_rate --chain-id 1
  python -m facet_txhash.tools.fetch_mint_rate --chain-id 11155111 --block 1234567
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from facet_txhash.chain.rpc_client import open_providers
from facet_txhash.config import get_settings
from facet_txhash.core.exceptions import FacetTxHashError
from facet_txhash.derivation.mint_rate import read_fct_mint_rate
from facet_txhash.txhash_logging import logs_to_stderr


async def _fetch(chain_id: int, block: int | None) -> int:
    settings = get_settings()
    chain = settings.chain(chain_id)
    async with open_providers(chain, settings.rpc_timeout_sec) as (_, l2):
        return await read_fct_mint_rate(l2, block)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Read fctMintRate() from a Facet network")
    parser.add_argument("--chain-id", type=int, default=1, help="L1 chain id (1 or 11155111)")
    parser.add_argument("--block", type=int, default=None, help="L2 block number (default: latest)")
    args = parser.parse_args(argv)

    try:
        with logs_to_stderr():
            rate = asyncio.run(_fetch(args.chain_id, args.block))
    except FacetTxHashError as e:
        print(f"error ({e.status_code}): {e.message}", file=sys.stderr)
        return 1
    print(rate)
    return 0


if __name__ == "__main__":
    sys.exit(main())
