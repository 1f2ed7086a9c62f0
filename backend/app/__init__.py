"""EdgeCRUD Application Package: typed CRUD API over a SQLite-family store.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
