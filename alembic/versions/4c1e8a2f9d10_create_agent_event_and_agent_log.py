"""create agent_event and agent_log

Revision ID: 4c1e8a2f9d10
Revises:
Create Date: 2026-10-18 09:12:44.118203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "4c1e8a2f9d10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "agent_event",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("payload", sa.JSON(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_agent_event_created_at"), "agent_event", ["created_at"], unique=False
    )

    op.create_table(
        "agent_log",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("message", sa.String(), nullable=False),
        sa.Column("level", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_agent_log_level"), "agent_log", ["level"], unique=False)
    op.create_index(
        op.f("ix_agent_log_created_at"), "agent_log", ["created_at"], unique=False
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_agent_log_created_at"), table_name="agent_log")
    op.drop_index(op.f("ix_agent_log_level"), table_name="agent_log")
    op.drop_table("agent_log")
    op.drop_index(op.f("ix_agent_event_created_at"), table_name="agent_event")
    op.drop_table("agent_event")
