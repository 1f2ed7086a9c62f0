"""Database Layer: declarative Base, session factory, and repositories.

Invariants:
    - Repositories take an AsyncSession; they never create engines
    - All SQLAlchemy exceptions are mapped to core/errors.py types here
"""
