"""
Test that txhash_logging can be imported without circular import and logger works.
"""

from __future__ import annotations


def test_logging_import():
    """Import get_logger from txhash_logging and use the logger."""
    from facet_txhash.txhash_logging import get_logger

    logger = get_logger("test")
    assert logger is not None
    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "warning")
    assert hasattr(logger, "error")
    logger.info("test_message", key="value")


def test_bind_transaction_logger():
    """bind_transaction returns a logger usable with request context."""
    from facet_txhash.txhash_logging import bind_transaction

    log = bind_transaction("0x" + "ab" * 32, 1)
    log.info("test_bound_message", stage="decode")
