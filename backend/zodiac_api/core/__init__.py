"""Core Layer - pure domain logic, no IO, no async, no framework imports.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Validation, classification and entry-log functions are pure and deterministic
"""
