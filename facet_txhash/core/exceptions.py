"""
Application-level exceptions.

Every failure aborts the whole derivation; the API server maps each class to
an HTTP status through ``status_code`` and returns the message verbatim.
"""

from __future__ import annotations


class FacetTxHashError(Exception):
    """Base class for all service errors."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(FacetTxHashError):
    """Bad or missing request input (txHash, chainId)."""

    status_code = 400


class NotFoundError(FacetTxHashError):
    """Source transaction (or a record it depends on) does not exist."""

    status_code = 404


class ProtocolError(FacetTxHashError):
    """The L1 data does not follow the Facet submission protocol."""

    status_code = 400


class MalformedEnvelope(ProtocolError):
    """Inbox calldata does not match the Facet transaction encoding."""


class NoFacetEvent(ProtocolError):
    """Receipt holds no log carrying the Facet event topic."""


class InvalidRlpPayload(ProtocolError):
    """Facet event data is not an RLP list with the expected fields."""


class ConfigurationError(FacetTxHashError):
    """Environment settings are missing or malformed (block time, timeout, port)."""

    status_code = 500


class UpstreamError(FacetTxHashError):
    """Chain-data provider failure: transport, JSON-RPC error or bad result."""

    status_code = 500
