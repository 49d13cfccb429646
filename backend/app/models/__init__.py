"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - Imported here so Base.metadata is complete before create_all/autogenerate
"""

from app.models.employee import Employee  # noqa: F401
