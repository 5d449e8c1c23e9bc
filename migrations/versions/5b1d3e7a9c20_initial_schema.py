"""initial schema

Revision ID: 5b1d3e7a9c20
Revises:
Create Date: 2026-10-17 09:12:44.318205

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5b1d3e7a9c20"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create engine, ledger and clock tables."""
    op.create_table(
        "post",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("author", sa.String(length=255), nullable=False),
        sa.Column("content_ref", sa.LargeBinary(length=64), nullable=False),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
        sa.Column("status", sa.String(length=16), nullable=False),
        sa.Column("report_count", sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_post_author", "post", ["author"])

    op.create_table(
        "report",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("post_id", sa.Integer(), nullable=False),
        sa.Column("reporter", sa.String(length=255), nullable=False),
        sa.Column("reason", sa.String(length=100), nullable=False),
        sa.Column("stake", sa.BigInteger(), nullable=False),
        sa.Column("filed_at", sa.BigInteger(), nullable=False),
        sa.Column("votes_for", sa.BigInteger(), nullable=False),
        sa.Column("votes_against", sa.BigInteger(), nullable=False),
        sa.Column("resolved", sa.Boolean(), nullable=False),
        sa.Column("upheld", sa.Boolean(), nullable=True),
        sa.Column("resolved_at", sa.BigInteger(), nullable=True),
        sa.ForeignKeyConstraint(["post_id"], ["post.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_report_post_id", "report", ["post_id"])

    op.create_table(
        "report_vote",
        sa.Column("report_id", sa.Integer(), nullable=False),
        sa.Column("voter", sa.String(length=255), nullable=False),
        sa.Column("choice", sa.Boolean(), nullable=False),
        sa.Column("stake", sa.BigInteger(), nullable=False),
        sa.ForeignKeyConstraint(["report_id"], ["report.id"]),
        sa.PrimaryKeyConstraint("report_id", "voter"),
    )
    op.create_index("ix_report_vote_report_id", "report_vote", ["report_id"])

    op.create_table(
        "reputation",
        sa.Column("principal", sa.String(length=255), nullable=False),
        sa.Column("score", sa.BigInteger(), nullable=False),
        sa.Column("is_moderator", sa.Boolean(), nullable=False),
        sa.CheckConstraint("score >= 0", name="ck_reputation_score_non_negative"),
        sa.PrimaryKeyConstraint("principal"),
    )

    op.create_table(
        "engine_state",
        sa.Column("id", sa.BigInteger(), nullable=False),
        sa.Column("next_post_id", sa.BigInteger(), nullable=False),
        sa.Column("next_report_id", sa.BigInteger(), nullable=False),
        sa.Column("total_staked", sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "ledger_account",
        sa.Column("principal", sa.String(length=255), nullable=False),
        sa.Column("balance", sa.BigInteger(), nullable=False),
        sa.CheckConstraint("balance >= 0", name="ck_ledger_account_balance_non_negative"),
        sa.PrimaryKeyConstraint("principal"),
    )

    op.create_table(
        "block_clock",
        sa.Column("id", sa.BigInteger(), nullable=False),
        sa.Column("height", sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Drop every table created by this revision."""
    op.drop_table("block_clock")
    op.drop_table("ledger_account")
    op.drop_table("engine_state")
    op.drop_table("reputation")
    op.drop_index("ix_report_vote_report_id", table_name="report_vote")
    op.drop_table("report_vote")
    op.drop_index("ix_report_post_id", table_name="report")
    op.drop_table("report")
    op.drop_index("ix_post_author", table_name="post")
    op.drop_table("post")
