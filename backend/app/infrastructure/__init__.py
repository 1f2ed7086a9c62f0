"""Infrastructure Layer: database engine/session lifecycle and logging setup.

Invariants:
    - Infrastructure never imports request handlers
"""
