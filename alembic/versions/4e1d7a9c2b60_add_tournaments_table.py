"""add tournaments table

Revision ID: 4e1d7a9c2b60
Revises:
Create Date: 2026-10-18 10:02:11.304517

"""
from alembic import op
import sqlalchemy as sa



# revision identifiers, used by Alembic.
revision = '4e1d7a9c2b60'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "tournaments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("game", sa.String(length=255), nullable=False),
        sa.Column(
            "status",
            sa.Enum(
                "UPCOMING",
                "REGISTRATION_OPEN",
                "REGISTRATION_CLOSED",
                "IN_PROGRESS",
                "COMPLETED",
                "CANCELLED",
                name="tournament_status",
                native_enum=False,
                length=32,
            ),
            nullable=False,
        ),
        sa.Column("start_date", sa.DateTime(), nullable=False),
        sa.Column("end_date", sa.DateTime(), nullable=True),
        sa.Column("max_participants", sa.Integer(), nullable=True),
        sa.Column("current_participants", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("prize_pool", sa.Numeric(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_tournaments_game"), "tournaments", ["game"], unique=False)
    op.create_index(op.f("ix_tournaments_status"), "tournaments", ["status"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_tournaments_status"), table_name="tournaments")
    op.drop_index(op.f("ix_tournaments_game"), table_name="tournaments")
    op.drop_table("tournaments")
