"""Add volunteer CV table

Revision ID: 0003_volunteer_cv
Revises: 0002_volunteer_profile
Create Date: 2026-05-06 09:21:57.030416

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0003_volunteer_cv"
down_revision = "0002_volunteer_profile"
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Until this runs the profile endpoint reports "cv" as unavailable
    op.create_table(
        "volunteer_cv",
        sa.Column("volunteer_id", sa.Integer(), nullable=False),
        sa.Column("url", sa.String(length=512), nullable=False),
        sa.ForeignKeyConstraint(
            ["volunteer_id"],
            ["volunteer_account.id"],
            name=op.f("fk_volunteer_cv_volunteer_id_volunteer_account"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("volunteer_id", name=op.f("pk_volunteer_cv")),
    )


def downgrade() -> None:
    op.drop_table("volunteer_cv")
