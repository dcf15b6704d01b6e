"""Profile ORM — persists profiles and their configuration files.

Invariants:
    - (version_id, profile_id) is the composite primary key
    - parents stores parent profile ids in declared order (same version)
    - Files belong to exactly one profile and are deleted with it
    - Overlays are never stored: they are derived per request

Design Decisions:
    - JSON columns for parents/attributes: read whole, never queried by element
      (ADR: same trade-off as message_history)
    - LargeBinary for file content: files are opaque bytes to this service
    - files loaded with selectin: every profile read needs its file map
"""

from sqlalchemy import (
    String, Boolean, JSON, LargeBinary, ForeignKey, ForeignKeyConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from profile_api.core.profile_model import Profile
from profile_api.db.base import Base


class ProfileRecord(Base):
    """Profile entity: a versioned bundle of configuration files."""
    __tablename__ = "profiles"

    version_id: Mapped[str] = mapped_column(
        String(255), ForeignKey("versions.id", ondelete="CASCADE"),
        primary_key=True,
    )
    profile_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    parents: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    attributes: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    abstract: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    hidden: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    locked: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    version: Mapped["Version"] = relationship("Version", back_populates="profiles")
    files: Mapped[list["ProfileFile"]] = relationship(
        "ProfileFile", back_populates="profile",
        cascade="all, delete-orphan", lazy="selectin",
    )

    def to_domain(self) -> Profile:
        return Profile(
            version=self.version_id,
            id=self.profile_id,
            parents=tuple(self.parents or ()),
            attributes=dict(self.attributes or {}),
            file_configurations={f.name: f.content for f in self.files},
            abstract=self.abstract,
            hidden=self.hidden,
            locked=self.locked,
        )


class ProfileFile(Base):
    """One configuration file of a profile."""
    __tablename__ = "profile_files"
    __table_args__ = (
        ForeignKeyConstraint(
            ["version_id", "profile_id"],
            ["profiles.version_id", "profiles.profile_id"],
            ondelete="CASCADE",
        ),
    )

    version_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    profile_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    name: Mapped[str] = mapped_column(String(1024), primary_key=True)
    content: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)

    # Relationships
    profile: Mapped["ProfileRecord"] = relationship(
        "ProfileRecord", back_populates="files",
    )
