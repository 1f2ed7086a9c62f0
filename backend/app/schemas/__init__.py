"""Pydantic Schemas: request/response contracts at the API boundary.

Invariants:
    - Schemas validate at the system boundary (client input, API responses)
    - Separate from models: schemas are API contracts, models are persistence
"""
