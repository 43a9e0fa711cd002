"""
FastAPI server — Facet transaction hash lookup.

Exposes GET /facet-transaction-hash?txHash=...&chainId=... (also at /)
returning {"facetTransactionHash": "0x..."}. Errors are returned as
{"error": "<message>"} with 400 (bad input, protocol violation),
404 (transaction not found) or 500 (upstream failure).
"""

from __future__ import annotations

import re
from typing import Any, AsyncContextManager, Callable

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from facet_txhash import __version__
from facet_txhash.chain.rpc_client import open_providers
from facet_txhash.config import ChainConfig, Settings, get_settings
from facet_txhash.core.exceptions import FacetTxHashError, UpstreamError, ValidationError
from facet_txhash.derivation.pipeline import derive_facet_transaction
from facet_txhash.txhash_logging import get_logger

logger = get_logger(__name__)

TX_HASH_PATTERN = re.compile(r"^0x[0-9a-fA-F]{64}$")

ProviderFactory = Callable[[ChainConfig, float], AsyncContextManager[Any]]


# -----------------------------------------------------------------------------
# Dependencies
# -----------------------------------------------------------------------------

def get_provider_factory() -> ProviderFactory:
    """Dependency: opens (l1, l2) chain-data providers for one request."""
    return open_providers


# -----------------------------------------------------------------------------
# Response models
# -----------------------------------------------------------------------------

class FacetTransactionHashResponse(BaseModel):
    facetTransactionHash: str = Field(..., description="0x-prefixed 32-byte Facet transaction hash")


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Failure message")


# -----------------------------------------------------------------------------
# Request validation
# -----------------------------------------------------------------------------

def parse_request(
    tx_hash: str | None, chain_id: str | None, settings: Settings
) -> tuple[str, ChainConfig]:
    """Validate txHash / chainId query values and resolve the chain row."""
    tx_hash = (tx_hash or "").strip()
    chain_id = (chain_id or "").strip()
    if not tx_hash or not chain_id:
        raise ValidationError("Missing txHash or chainId")
    try:
        l1_chain_id = int(chain_id)
    except ValueError:
        raise ValidationError("Invalid chainId") from None
    chain = settings.chain(l1_chain_id)
    if not TX_HASH_PATTERN.match(tx_hash):
        raise ValidationError("Invalid txHash")
    return tx_hash.lower(), chain


# -----------------------------------------------------------------------------
# App and routes
# -----------------------------------------------------------------------------

app = FastAPI(
    title="Facet Transaction Hash API",
    description="Derives the Facet (L2) transaction hash for an L1 transaction.",
    version=__version__,
)

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@app.get("/", response_model=FacetTransactionHashResponse, responses=_ERROR_RESPONSES)
@app.get(
    "/facet-transaction-hash",
    response_model=FacetTransactionHashResponse,
    responses=_ERROR_RESPONSES,
)
async def get_facet_transaction_hash(
    tx_hash: str | None = Query(None, alias="txHash", description="L1 transaction hash"),
    chain_id: str | None = Query(None, alias="chainId", description="L1 chain id (1 or 11155111)"),
    settings: Settings = Depends(get_settings),
    provider_factory: ProviderFactory = Depends(get_provider_factory),
) -> FacetTransactionHashResponse:
    """
    Return the Facet transaction hash derived from an L1 transaction.

    Direct inbox calls and contract-emitted Facet events are both supported.
    """
    l1_tx_hash, chain = parse_request(tx_hash, chain_id, settings)
    try:
        async with provider_factory(chain, settings.rpc_timeout_sec) as (l1, l2):
            result = await derive_facet_transaction(
                l1_tx_hash,
                chain,
                l1,
                l2,
                inbox_address=settings.inbox_address,
                block_time=settings.l2_block_time_sec,
            )
    except FacetTxHashError:
        raise
    except Exception as e:
        logger.exception("facet_hash_unexpected_error", l1_tx_hash=l1_tx_hash, error=str(e))
        raise UpstreamError(str(e)) from e
    return FacetTransactionHashResponse(facetTransactionHash=result.facet_transaction_hash)


@app.get("/health")
def health() -> dict[str, str]:
    """Liveness probe: API is up."""
    return {"status": "ok"}


@app.exception_handler(FacetTxHashError)
def facet_error_handler(request: Request, exc: FacetTxHashError) -> JSONResponse:
    """Map the service exception taxonomy to {"error": message} with its status."""
    log = logger.warning if exc.status_code < 500 else logger.error
    log(
        "facet_hash_request_failed",
        path=request.url.path,
        status_code=exc.status_code,
        error_class=type(exc).__name__,
        error=exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Consistent JSON error body for routing errors (404 unknown path, 405)."""
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})
