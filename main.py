"""
Main entrypoint: Facet transaction hash API server.

Env: API_HOST, API_PORT, LOG_LEVEL, RPC_TIMEOUT_SEC, L1_RPC_URL_<chainId>,
L2_RPC_URL_<chainId>, etc. (see facet_txhash/config).

Equivalent: uvicorn facet_txhash.api_server.app:app --host 0.0.0.0 --port 8000
"""

# Configure structured JSON logging before other imports that may log
from facet_txhash.txhash_logging import get_logger

logger = get_logger("main")


def main() -> None:
    """Load settings and run the FastAPI server in the main thread."""
    from facet_txhash.api_server.app import app
    from facet_txhash.config import get_settings
    from facet_txhash.config.env import mask_rpc_url
    import uvicorn

    settings = get_settings()
    for chain in settings.chains.values():
        logger.info(
            "main_chain_configured",
            chain_id=chain.l1_chain_id,
            network=chain.name,
            l1_rpc=mask_rpc_url(chain.l1_rpc_url),
            l2_rpc=mask_rpc_url(chain.l2_rpc_url),
            l2_chain_id=chain.l2_chain_id,
        )
    logger.info("main_server_starting", host=settings.api_host, port=settings.api_port)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level)


if __name__ == "__main__":
    main()
