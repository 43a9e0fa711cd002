"""
Facet derivation core — from an L1 transaction to the canonical Facet transaction and its hash.

Classifier -> direct or event decoder (+ aliasing) -> mint accounting
(historical mint rate) -> hash derivation. Orchestrated by pipeline.py.
"""
