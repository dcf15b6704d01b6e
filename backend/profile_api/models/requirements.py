"""Requirements ORM — the single shared requirements document.

Invariants:
    - At most one row (id = REQUIREMENTS_DOCUMENT_ID)
    - document holds FabricRequirements.to_dict() verbatim
    - No row means "no requirements container" (reads return None)
"""

from sqlalchemy import Integer, JSON
from sqlalchemy.orm import Mapped, mapped_column

from profile_api.db.base import Base

REQUIREMENTS_DOCUMENT_ID = 1


class RequirementsDocument(Base):
    """Singleton requirements container."""
    __tablename__ = "requirements"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, default=REQUIREMENTS_DOCUMENT_ID,
    )
    document: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)


def empty_requirements_document() -> RequirementsDocument:
    """The row a fresh store starts with: no profile has requirements yet."""
    return RequirementsDocument(
        id=REQUIREMENTS_DOCUMENT_ID, document={"profile_requirements": []},
    )
