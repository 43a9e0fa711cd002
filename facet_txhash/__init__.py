"""
Facet transaction hash service — derives the L2 deposit transaction for an L1 transaction.

Reads the L1 transaction (direct inbox call or contract-emitted Facet event),
rebuilds the canonical Facet transaction, looks up the historical FCT mint rate
on L2 and computes the transaction hash an L2 node assigns to it.
"""

__version__ = "0.1.0"
