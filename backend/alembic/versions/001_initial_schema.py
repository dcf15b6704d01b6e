"""Initial schema — versions, profiles, profile_files, containers, requirements.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "versions",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "profiles",
        sa.Column("version_id", sa.String(255), sa.ForeignKey("versions.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("profile_id", sa.String(255), primary_key=True),
        sa.Column("parents", sa.JSON, nullable=False),
        sa.Column("attributes", sa.JSON, nullable=False),
        sa.Column("abstract", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("hidden", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("locked", sa.Boolean, nullable=False, server_default=sa.false()),
    )

    op.create_table(
        "profile_files",
        sa.Column("version_id", sa.String(255), primary_key=True),
        sa.Column("profile_id", sa.String(255), primary_key=True),
        sa.Column("name", sa.String(1024), primary_key=True),
        sa.Column("content", sa.LargeBinary, nullable=False),
        sa.ForeignKeyConstraint(
            ["version_id", "profile_id"],
            ["profiles.version_id", "profiles.profile_id"],
            ondelete="CASCADE",
        ),
    )

    op.create_table(
        "containers",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("version_id", sa.String(255), nullable=False),
        sa.Column("profile_ids", sa.JSON, nullable=False),
        sa.Column("alive", sa.Boolean, nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_containers_version_id", "containers", ["version_id"])

    requirements = op.create_table(
        "requirements",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("document", sa.JSON, nullable=False),
    )
    op.bulk_insert(requirements, [{"id": 1, "document": {"profile_requirements": []}}])


def downgrade() -> None:
    op.drop_table("requirements")
    op.drop_index("ix_containers_version_id", table_name="containers")
    op.drop_table("containers")
    op.drop_table("profile_files")
    op.drop_table("profiles")
    op.drop_table("versions")
