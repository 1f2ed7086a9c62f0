"""ORM Models: SQLAlchemy declarative models for the users and posts tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so string-based relationship() references resolve
      before any query runs
"""

from app.models.user import User  # noqa: F401
from app.models.post import Post  # noqa: F401
