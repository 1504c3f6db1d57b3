"""
Core containers, arithmetic primitives, domain models and invariants.

This package contains the foundational building blocks that are independent
of storage and text input.
"""
