"""Add volunteer profile fields and skills

Revision ID: 0002_volunteer_profile
Revises: 0001_initial
Create Date: 2026-03-18 15:34:09.552710

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0002_volunteer_profile"
down_revision = "0001_initial"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.add_column(
        "volunteer_account",
        sa.Column("date_of_birth", sa.String(length=32), nullable=True),
    )
    op.add_column(
        "volunteer_account",
        sa.Column("description", sa.String(length=300), nullable=True),
    )
    op.add_column(
        "volunteer_account",
        sa.Column("privacy", sa.String(length=16), nullable=True),
    )

    op.create_table(
        "volunteer_skill",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("volunteer_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=128), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["volunteer_id"],
            ["volunteer_account.id"],
            name=op.f("fk_volunteer_skill_volunteer_id_volunteer_account"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_volunteer_skill")),
    )
    op.create_index(
        "ix_volunteer_skill_volunteer_id", "volunteer_skill", ["volunteer_id"]
    )


def downgrade() -> None:
    op.drop_index("ix_volunteer_skill_volunteer_id", table_name="volunteer_skill")
    op.drop_table("volunteer_skill")
    op.drop_column("volunteer_account", "privacy")
    op.drop_column("volunteer_account", "description")
    op.drop_column("volunteer_account", "date_of_birth")
