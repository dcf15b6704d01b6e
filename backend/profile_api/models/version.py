"""Version ORM — a named revision of the whole profile set.

Invariants:
    - id is the user-facing version name (e.g. "1.0")
    - Deleting a version cascades to its profiles and their files
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from profile_api.db.base import Base


class Version(Base):
    """Version entity: owns every profile defined for it."""
    __tablename__ = "versions"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    profiles: Mapped[list["ProfileRecord"]] = relationship(
        "ProfileRecord", back_populates="version",
        cascade="all, delete-orphan",
    )
