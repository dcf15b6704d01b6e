"""Container ORM — runtime containers and their profile assignments.

Invariants:
    - A container runs exactly one version
    - profile_ids lists assigned profile ids of that version

Design Decisions:
    - JSON list over an association table: assignments are always read whole
      and filtered in core (containers_for_profile)
"""

from sqlalchemy import String, Boolean, JSON
from sqlalchemy.orm import Mapped, mapped_column

from profile_api.core.profile_model import Container
from profile_api.db.base import Base


class ContainerRecord(Base):
    """Container entity."""
    __tablename__ = "containers"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    version_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    profile_ids: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    alive: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def to_domain(self) -> Container:
        return Container(
            id=self.id,
            version=self.version_id,
            profile_ids=tuple(self.profile_ids or ()),
            alive=self.alive,
        )
