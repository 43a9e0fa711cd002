"""
API server package — HTTP interface of the Facet transaction hash service.

Validates request parameters, opens the L1/L2 chain-data providers for the
requested network and delegates to the derivation pipeline.
"""
