"""Integrity Error Mapping: classifies driver errors raised on insert.

Invariants:
    - UNIQUE violations are recognised for SQLite ("UNIQUE constraint failed: t.col")
      and PostgreSQL ("duplicate key value violates unique constraint")
    - Everything else maps to StoreError
"""

import re

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.core.errors import AppError, StoreError, UniqueConstraintViolation

_SQLITE_UNIQUE = re.compile(r"UNIQUE constraint failed: \w+\.(\w+)")
_POSTGRES_UNIQUE = re.compile(r"Key \((\w+)\)=")


def unique_violation_field(exc: IntegrityError) -> str | None:
    """Return the offending column for a unique violation, else None."""
    text = str(exc.orig) if exc.orig is not None else str(exc)
    match = _SQLITE_UNIQUE.search(text) or _POSTGRES_UNIQUE.search(text)
    if match:
        return match.group(1)
    if "UNIQUE" in text.upper() or "duplicate key" in text:
        return ""
    return None


def map_store_error(
    exc: SQLAlchemyError, operation: str, resource: str, default_field: str,
) -> AppError:
    """Translate a SQLAlchemy exception into the API error taxonomy."""
    if isinstance(exc, IntegrityError):
        field = unique_violation_field(exc)
        if field is not None:
            return UniqueConstraintViolation(field or default_field, resource)
    return StoreError(exc, operation)
