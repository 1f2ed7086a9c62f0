"""Domain Types: identity types and the tagged validation result.

Invariants:
    - UserId and PostId wrap positive integers assigned by the store
    - No stored id exceeds MAX_STORE_ID
    - A validation result is exactly one of Valid (typed value) or Invalid (>= 1 FieldError)
    - FieldError order follows input field order

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Frozen dataclasses for results: validators are pure, results are values
"""

from dataclasses import dataclass
from typing import Generic, NewType, TypeVar


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
PostId = NewType("PostId", int)

# Largest value a SQLite INTEGER (signed 64-bit) key can hold
MAX_STORE_ID = 2**63 - 1


# ─── Validation Result ───────────────────────────────────────────

T = TypeVar("T")


@dataclass(frozen=True)
class FieldError:
    """One field-level validation failure."""
    field: str
    message: str


@dataclass(frozen=True)
class Valid(Generic[T]):
    """Validation succeeded; value is the typed record."""
    value: T


@dataclass(frozen=True)
class Invalid:
    """Validation failed; errors is never empty."""
    errors: tuple[FieldError, ...]

    def __post_init__(self):
        if not self.errors:
            raise ValueError("Invalid requires at least one FieldError")

    @property
    def message(self) -> str:
        return "; ".join(e.message for e in self.errors)
