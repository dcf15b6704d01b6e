"""ORM Models — SQLAlchemy declarative models for the profile store.

Invariants:
    - All models inherit from Base (db/base.py)
    - Version is the aggregate root for profiles; containers and requirements stand alone

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs (ADR: standard SQLAlchemy pattern)
"""

from profile_api.models.version import Version  # noqa: F401
from profile_api.models.profile import ProfileRecord, ProfileFile  # noqa: F401
from profile_api.models.container import ContainerRecord  # noqa: F401
from profile_api.models.requirements import RequirementsDocument  # noqa: F401
