"""
Pytest fixtures for Facet transaction hash tests.

The API client runs against in-memory chain-data providers; no network is used.
"""

from __future__ import annotations

import pytest

from fakes import (
    INBOX,
    SOME_CONTRACT,
    facet_log,
    direct_input,
    event_payload,
    fake_provider_factory,
    l1_provider,
    l1_transaction,
    l2_provider,
)
from facet_txhash.chain.models import TransactionReceipt


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Ignore any developer RPC overrides so tests see the built-in chain table."""
    for name in ("L1_RPC_URL_1", "L2_RPC_URL_1", "L1_RPC_URL_11155111", "L2_RPC_URL_11155111",
                 "L2_BLOCK_TIME_SEC", "RPC_TIMEOUT_SEC", "FACET_INBOX_ADDRESS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def direct_providers():
    """(l1, l2) fakes for an inbox submission (scenario A)."""
    tx = l1_transaction(INBOX, direct_input())
    return l1_provider(tx), l2_provider()


@pytest.fixture
def event_providers():
    """(l1, l2) fakes for a contract-emitted Facet event (scenario B)."""
    tx = l1_transaction(SOME_CONTRACT)
    receipt = TransactionReceipt(
        transaction_hash=tx.hash,
        status=1,
        logs=(facet_log(event_payload()),),
    )
    return l1_provider(tx, receipt), l2_provider()


@pytest.fixture
def make_client():
    """Build a FastAPI TestClient whose provider factory yields the given fakes."""
    from fastapi.testclient import TestClient

    from facet_txhash.api_server.server import app, get_provider_factory

    def _make(l1, l2):
        app.dependency_overrides[get_provider_factory] = lambda: fake_provider_factory(l1, l2)
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
