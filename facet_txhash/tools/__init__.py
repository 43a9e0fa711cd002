"""Operator command-line tools (derive a hash, read the mint rate)."""
