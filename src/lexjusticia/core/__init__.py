"""
Core domain models, mathematical primitives, and output contracts.

This package is independent of external systems (ledger, proof verifier,
price feeds).
"""
