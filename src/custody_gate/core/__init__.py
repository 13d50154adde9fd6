"""
Core domain models and primitives.

This module contains the foundational building blocks that are independent
of external systems (consensus, ledger state, transport).
"""
