"""
Structured logging for the Facet transaction hash service.

JSON logs with timestamp, event_type and request context (l1_tx_hash, chain_id).
"""

from facet_txhash.txhash_logging.logger import bind_transaction, get_logger, logs_to_stderr

__all__ = ["bind_transaction", "get_logger", "logs_to_stderr"]
