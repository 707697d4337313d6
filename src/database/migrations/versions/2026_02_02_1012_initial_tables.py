"""Create organization, volunteer and admin account tables

Revision ID: 0001_initial
Revises:
Create Date: 2026-02-02 10:12:41.118204

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "organization_account",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(length=128), nullable=False),
        sa.Column("phone_number", sa.String(length=32), nullable=False),
        sa.Column("url", sa.String(length=256), nullable=False),
        sa.Column("latitude", sa.Numeric(), nullable=True),
        sa.Column("longitude", sa.Numeric(), nullable=True),
        sa.Column("password", sa.String(length=256), nullable=False),
        sa.Column("location_name", sa.String(length=256), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_organization_account")),
        sa.UniqueConstraint("email", name=op.f("uq_organization_account_email")),
        sa.UniqueConstraint(
            "phone_number", name=op.f("uq_organization_account_phone_number")
        ),
        sa.UniqueConstraint("url", name=op.f("uq_organization_account_url")),
        sa.UniqueConstraint("password", name=op.f("uq_organization_account_password")),
    )

    op.create_table(
        "organization_request",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(length=128), nullable=False),
        sa.Column("name", sa.String(length=128), nullable=False),
        sa.Column("phone_number", sa.String(length=32), nullable=True),
        sa.Column("url", sa.String(length=256), nullable=False),
        sa.Column("latitude", sa.Numeric(), nullable=True),
        sa.Column("longitude", sa.Numeric(), nullable=True),
        sa.Column("location_name", sa.String(length=256), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_organization_request")),
        sa.UniqueConstraint("email", name=op.f("uq_organization_request_email")),
        sa.UniqueConstraint("url", name=op.f("uq_organization_request_url")),
    )

    op.create_table(
        "volunteer_account",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("first_name", sa.String(length=128), nullable=False),
        sa.Column("last_name", sa.String(length=128), nullable=False),
        sa.Column("gender", sa.String(length=64), nullable=False),
        sa.Column("email", sa.String(length=128), nullable=False),
        sa.Column("phone_number", sa.String(length=32), nullable=False),
        sa.Column("password", sa.String(length=256), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_volunteer_account")),
        sa.UniqueConstraint("email", name=op.f("uq_volunteer_account_email")),
        sa.UniqueConstraint(
            "phone_number", name=op.f("uq_volunteer_account_phone_number")
        ),
        sa.UniqueConstraint("password", name=op.f("uq_volunteer_account_password")),
    )

    op.create_table(
        "admin_account",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(length=128), nullable=False),
        sa.Column("first_name", sa.String(length=64), nullable=False),
        sa.Column("last_name", sa.String(length=64), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_admin_account")),
        sa.UniqueConstraint("email", name=op.f("uq_admin_account_email")),
    )


def downgrade() -> None:
    op.drop_table("admin_account")
    op.drop_table("volunteer_account")
    op.drop_table("organization_request")
    op.drop_table("organization_account")
