"""
Core cross-cutting pieces — the exception taxonomy shared by the derivation
pipeline, the chain-data providers and the API server.
"""
