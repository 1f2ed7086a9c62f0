"""API Layer: FastAPI routes, dependencies, and error handlers.

Invariants:
    - Routes registered explicitly in main.create_app (no auto-discovery)
    - Every endpoint, success or failure, returns the response envelope
"""
