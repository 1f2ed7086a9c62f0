"""Route Modules: one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with a resource prefix and tags
    - main.create_app mounts them under settings.api_prefix
"""
