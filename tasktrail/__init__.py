"""Task tracking API with a per-user audit trail.

The package intentionally re-exports nothing; application wiring lives in the
top-level ``main`` module.
"""
