"""Core Layer: domain types, error taxonomy, validators and repository contracts.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or db/
    - Validators are pure and deterministic
"""
